# rngjump/shr3.py
# 3-shift-register generator: x ^= x << 13; x ^= x >> 17; x ^= x << 5.
# Each xor-shift is the GF(2) matrix I + Shift(k), so one step is a fixed
# 32x32 bit matrix and n steps are its n-th power.

from .bitcolumnmatrix import BitColumnMatrix32
from .rngcore import MASK32, RngJumpAhead, jump_distance

# (I + Shift(5)) * (I + Shift(-17)) * (I + Shift(13))
SHR3_MATRIX_ARRAY = (
    0x00042021, 0x00084042, 0x00108084, 0x00210108, 0x00420231, 0x00840462, 0x010808C4, 0x02101188,
    0x04202310, 0x08404620, 0x10808C40, 0x21011880, 0x42023100, 0x84046200, 0x0808C400, 0x10118800,
    0x20231000, 0x40462021, 0x808C4042, 0x01080084, 0x02100108, 0x04200210, 0x08400420, 0x10800840,
    0x21001080, 0x42002100, 0x84004200, 0x08008400, 0x10010800, 0x20021000, 0x40042000, 0x80084000,
)
SHR3_MATRIX = BitColumnMatrix32(SHR3_MATRIX_ARRAY)


class SHR3(RngJumpAhead):
    CYCLE_LEN = (1 << 32) - 1
    SEED_COUNT = 1
    STATE_FIELDS = ('shr3',)

    def __init__(self, seed1=0):
        self.shr3 = seed1 & MASK32

    def sanitise(self):
        # zero is a fixed point of the shift register
        if self.shr3 == 0:
            self.shr3 = 0xFFFFFFFF

    def next_u32(self):
        self.sanitise()
        shr3 = self.shr3
        shr3 ^= (shr3 << 13) & MASK32
        shr3 ^= shr3 >> 17
        shr3 ^= (shr3 << 5) & MASK32
        self.shr3 = shr3
        return shr3

    def jumpahead(self, n):
        self.sanitise()
        n = jump_distance(n, self.CYCLE_LEN)
        self.shr3 = SHR3_MATRIX.pow(n).dot_vec(self.shr3)
