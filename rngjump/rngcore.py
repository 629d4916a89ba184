# rngjump/rngcore.py
# Shared surface of the generators: 32-bit steps, derived 64-bit/bytes output,
# state access and jump-ahead by an arbitrary (possibly negative) distance.

import logging
import operator

from . import maths

logger = logging.getLogger('rngjump.rngcore')

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF


def jump_distance(n, cycle_len):
    """Reduce a jump distance to [0, cycle_len)."""
    try:
        n = operator.index(n)
    except TypeError:
        raise TypeError(f"jump distance must be an integer, not {type(n).__name__}") from None
    reduced = maths.modulo(n, cycle_len)
    if reduced != n:
        logger.debug(f"jump distance {n} reduced to {reduced} (cycle {cycle_len})")
    return reduced


class RngJumpAhead:
    # names of the state words, in order
    STATE_FIELDS = ()
    # number of 32-bit seed arguments taken by __init__
    SEED_COUNT = 0

    def next_u32(self):
        raise NotImplementedError

    def jumpahead(self, n):
        raise NotImplementedError

    def next_u64(self):
        low = self.next_u32()
        high = self.next_u32()
        return (high << 32) | low

    def fill_bytes(self, length):
        out = bytearray()
        while length - len(out) >= 8:
            out += self.next_u64().to_bytes(8, 'little')
        left = length - len(out)
        if left > 4:
            out += self.next_u64().to_bytes(8, 'little')[:left]
        elif left > 0:
            out += self.next_u32().to_bytes(4, 'little')[:left]
        return bytes(out)

    @property
    def state(self):
        return tuple(getattr(self, name) for name in self.STATE_FIELDS)

    @state.setter
    def state(self, values):
        values = tuple(values)
        if len(values) != len(self.STATE_FIELDS):
            raise ValueError(f"{type(self).__name__} state has {len(self.STATE_FIELDS)} words, got {len(values)}")
        for name, value in zip(self.STATE_FIELDS, values):
            setattr(self, name, value)

    @classmethod
    def from_state(cls, state):
        rng = cls()
        rng.state = state
        return rng

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.state == other.state

    def __repr__(self):
        fields = ', '.join(f"{name}={value}" for name, value in zip(self.STATE_FIELDS, self.state))
        return f"{type(self).__name__}({fields})"
