# rngjump/lfsr.py
# Combined Tausworthe generators (L'Ecuyer's LFSR88 and LFSR113).
# Each component z -> ((z & mask) << c) ^ (((z << a) ^ z) >> b) is linear over
# GF(2), so its step is the 32x32 bit matrix
#     ((I & mask) << c) + ((I + (I << a)) >> b)
# and jumping n steps applies that matrix raised to n.

from functools import lru_cache

from .bitcolumnmatrix import BitColumnMatrix32
from .rngcore import MASK32, RngJumpAhead, jump_distance


def lfsr_seed_z(seed):
    return (seed ^ (seed << 16)) & MASK32


def lfsr_sanitise_z(z, min_value):
    # the significant bits of z must not all be zero
    if z < min_value:
        return z ^ 0xFFFFFFFF
    return z


def lfsr_next_z(z, a, b, c, min_value):
    mask = 0xFFFFFFFF - (min_value - 1)
    b_term = (((z << a) & MASK32) ^ z) >> b
    return (((z & mask) << c) & MASK32) ^ b_term


@lru_cache(maxsize=None)
def lfsr_matrix(a, b, c, min_value):
    mask = 0xFFFFFFFF - (min_value - 1)
    one = BitColumnMatrix32.identity()
    return ((one & mask) << c) + ((one + (one << a)) >> b)


def lfsr_cycle_len(min_value):
    # min_value is 2**k; the top 32 - k bits run through a maximal-length cycle
    return (1 << (32 - (min_value.bit_length() - 1))) - 1


def lfsr_jumpahead(z, a, b, c, min_value, n):
    cycle_len = lfsr_cycle_len(min_value)
    reduced = jump_distance(n, cycle_len)
    if reduced == 0 and n != 0:
        # the first step rewrites the low bits, so a whole cycle is not a no-op
        reduced = cycle_len
    return lfsr_matrix(a, b, c, min_value).pow(reduced).dot_vec(z)


class _Tausworthe(RngJumpAhead):
    # one (a, b, c, min_value) tuple per component, in state order
    PARAMS = ()

    def _sanitise_all(self):
        for name, (_, _, _, min_value) in zip(self.STATE_FIELDS, self.PARAMS):
            setattr(self, name, lfsr_sanitise_z(getattr(self, name), min_value))

    def current(self):
        result = 0
        for z in self.state:
            result ^= z
        return result

    def next_u32(self):
        for name, (a, b, c, min_value) in zip(self.STATE_FIELDS, self.PARAMS):
            z = lfsr_sanitise_z(getattr(self, name), min_value)
            setattr(self, name, lfsr_next_z(z, a, b, c, min_value))
        return self.current()

    def jumpahead(self, n):
        self._sanitise_all()
        for name, (a, b, c, min_value) in zip(self.STATE_FIELDS, self.PARAMS):
            setattr(self, name, lfsr_jumpahead(getattr(self, name), a, b, c, min_value, n))


class LFSR88(_Tausworthe):
    Z1_MIN = 2
    Z2_MIN = 8
    Z3_MIN = 16
    PARAMS = (
        (13, 19, 12, Z1_MIN),
        (2, 25, 4, Z2_MIN),
        (3, 11, 17, Z3_MIN),
    )
    STATE_FIELDS = ('z1', 'z2', 'z3')
    SEED_COUNT = 3

    def __init__(self, seed1=0, seed2=0, seed3=0):
        self.z1 = lfsr_seed_z(seed1)
        self.z2 = lfsr_seed_z(seed2)
        self.z3 = lfsr_seed_z(seed3)


class LFSR113(_Tausworthe):
    Z1_MIN = 2
    Z2_MIN = 8
    Z3_MIN = 16
    Z4_MIN = 128
    PARAMS = (
        (6, 13, 18, Z1_MIN),
        (2, 27, 2, Z2_MIN),
        (13, 21, 7, Z3_MIN),
        (3, 12, 13, Z4_MIN),
    )
    STATE_FIELDS = ('z1', 'z2', 'z3', 'z4')
    SEED_COUNT = 4

    def __init__(self, seed1=0, seed2=0, seed3=0, seed4=0):
        self.z1 = lfsr_seed_z(seed1)
        self.z2 = lfsr_seed_z(seed2)
        self.z3 = lfsr_seed_z(seed3)
        self.z4 = lfsr_seed_z(seed4)
