# rngjump/cong.py
# 32-bit linear congruential generator: x -> 69069*x + 12345 (mod 2**32).
# n steps collapse to x -> M**n * x + C * (1 + M + ... + M**(n-1)).

from . import maths
from .rngcore import MASK32, RngJumpAhead, jump_distance


class Cong(RngJumpAhead):
    M = 69069
    C = 12345
    CYCLE_LEN = 1 << 32
    SEED_COUNT = 1
    STATE_FIELDS = ('cong',)

    def __init__(self, seed1=0):
        self.cong = seed1 & MASK32

    def next_u32(self):
        self.cong = (self.cong * self.M + self.C) & MASK32
        return self.cong

    def jumpahead(self, n):
        n = jump_distance(n, self.CYCLE_LEN)
        mult_exp = maths.wrapping_pow(self.M, n, 32)
        add_const = (maths.wrapping_geom_series(self.M, n, 32) * self.C) & MASK32
        self.cong = (mult_exp * self.cong + add_const) & MASK32
