# rngjump/kiss.py
# KISS combiners: a multiply-with-carry, a congruential and a shift-register
# generator stepped together. Jumping ahead jumps each component, each against
# its own cycle length.

from .cong import Cong
from .mwc import MWC2, MWC64
from .rngcore import MASK32, RngJumpAhead
from .shr3 import SHR3


class _Combined(RngJumpAhead):
    MWC_CLASS = None
    SEED_COUNT = 4

    def __init__(self, seed1=0, seed2=0, seed3=0, seed4=0):
        self.mwc = self.MWC_CLASS(seed1, seed2)
        self.cong = Cong(seed3)
        self.shr3 = SHR3(seed4)

    def _components(self):
        return (self.mwc, self.cong, self.shr3)

    @property
    def STATE_FIELDS(self):
        return tuple(f for c in self._components() for f in c.STATE_FIELDS)

    @property
    def state(self):
        return tuple(word for c in self._components() for word in c.state)

    @state.setter
    def state(self, values):
        values = tuple(values)
        if len(values) != len(self.STATE_FIELDS):
            raise ValueError(f"{type(self).__name__} state has {len(self.STATE_FIELDS)} words, got {len(values)}")
        start = 0
        for c in self._components():
            end = start + len(c.STATE_FIELDS)
            c.state = values[start:end]
            start = end

    def current(self):
        raise NotImplementedError

    def next_u32(self):
        for c in self._components():
            c.next_u32()
        return self.current()

    def jumpahead(self, n):
        for c in self._components():
            c.jumpahead(n)


class KISS(_Combined):
    MWC_CLASS = MWC2

    def current(self):
        return ((self.mwc.current() ^ self.cong.cong) + self.shr3.shr3) & MASK32


class KISS2(_Combined):
    MWC_CLASS = MWC64

    def current(self):
        return (self.mwc.current() + self.cong.cong + self.shr3.shr3) & MASK32
