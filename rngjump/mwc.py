# rngjump/mwc.py
# Multiply-with-carry generators.
# A step x -> (x & half_mask) * M + (x >> half) is congruent to x * M modulo
# (M << half) - 1, a safe prime, so n steps are one modular multiplication by
# M**n. The multiplier has order (mod - 1) / 2 there.

from . import maths
from .rngcore import MASK32, RngJumpAhead, jump_distance


def mwc_next(x, multiplier, bits):
    half = bits // 2
    mask = (1 << bits) - 1
    half_mask = mask >> half
    return ((x & half_mask) * multiplier + (x >> half)) & mask


def mwc_sanitise(x, limit, bits):
    # reduce into [1, limit); zero (or limit itself) is a stuck state
    temp = x
    if temp >= limit:
        temp -= limit
    if temp == 0:
        temp = x ^ ((1 << bits) - 1)
        if temp >= limit:
            temp -= limit
    return temp


def mwc_jumpahead(x, multiplier, mod, cycle_len, n, bits):
    reduced = jump_distance(n, cycle_len)
    if n == 0:
        return x
    x = mwc_sanitise(x, mod, bits)
    if x % mod == 0:
        # a multiple of the modulus survives sanitising and is a fixed point of
        # one step; only the next sanitise moves it onto the cycle
        x = mwc_sanitise(mwc_next(x, multiplier, bits), mod, bits)
        reduced = jump_distance(reduced - 1, cycle_len)
    return maths.mul_mod(maths.pow_mod(multiplier, reduced, mod, bits), x, mod, bits)


class MWC2(RngJumpAhead):
    UPPER_M = 36969
    LOWER_M = 18000
    UPPER_MOD = (UPPER_M << 16) - 1
    LOWER_MOD = (LOWER_M << 16) - 1
    UPPER_CYCLE_LEN = (UPPER_MOD - 1) // 2
    LOWER_CYCLE_LEN = (LOWER_MOD - 1) // 2
    STATE_FIELDS = ('upper', 'lower')
    SEED_COUNT = 2

    def __init__(self, seed1=0, seed2=0):
        self.upper = seed1 & MASK32
        self.lower = seed2 & MASK32

    def sanitise(self):
        self.upper = mwc_sanitise(self.upper, self.UPPER_MOD, 32)
        self.lower = mwc_sanitise(self.lower, self.LOWER_MOD, 32)

    def current(self):
        return (self.lower + (self.upper << 16) + (self.upper >> 16)) & MASK32

    def next_u32(self):
        self.sanitise()
        self.upper = mwc_next(self.upper, self.UPPER_M, 32)
        self.lower = mwc_next(self.lower, self.LOWER_M, 32)
        return self.current()

    def jumpahead(self, n):
        self.upper = mwc_jumpahead(self.upper, self.UPPER_M, self.UPPER_MOD, self.UPPER_CYCLE_LEN, n, 32)
        self.lower = mwc_jumpahead(self.lower, self.LOWER_M, self.LOWER_MOD, self.LOWER_CYCLE_LEN, n, 32)


class MWC1(MWC2):
    # same state sequence as MWC2, simpler output mix
    def current(self):
        return (self.lower + (self.upper << 16)) & MASK32


class MWC64(RngJumpAhead):
    M = 698769069
    MOD = (M << 32) - 1
    CYCLE_LEN = (MOD - 1) // 2
    STATE_FIELDS = ('mwc',)
    SEED_COUNT = 2

    def __init__(self, seed1=0, seed2=0):
        self.mwc = ((seed1 & MASK32) << 32) ^ (seed2 & MASK32)

    def sanitise(self):
        self.mwc = mwc_sanitise(self.mwc, self.MOD, 64)

    def current(self):
        return self.mwc & MASK32

    def next_u32(self):
        self.sanitise()
        self.mwc = mwc_next(self.mwc, self.M, 64)
        return self.current()

    def jumpahead(self, n):
        self.mwc = mwc_jumpahead(self.mwc, self.M, self.MOD, self.CYCLE_LEN, n, 64)
