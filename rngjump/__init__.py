# rngjump/__init__.py
# Simple pseudo-random generators with O(log n) jump-ahead.

from .bitcolumnmatrix import (
    BitColumnMatrix,
    BitColumnMatrix8,
    BitColumnMatrix16,
    BitColumnMatrix32,
    BitColumnMatrix64,
    BitColumnMatrix128,
)
from .cong import Cong
from .kiss import KISS, KISS2
from .lfsr import LFSR88, LFSR113
from .mwc import MWC1, MWC2, MWC64
from .rngcore import RngJumpAhead
from .shr3 import SHR3

GENERATORS = {
    'cong': Cong,
    'shr3': SHR3,
    'mwc1': MWC1,
    'mwc2': MWC2,
    'kiss': KISS,
    'mwc64': MWC64,
    'kiss2': KISS2,
    'lfsr88': LFSR88,
    'lfsr113': LFSR113,
}

__all__ = [
    'BitColumnMatrix',
    'BitColumnMatrix8',
    'BitColumnMatrix16',
    'BitColumnMatrix32',
    'BitColumnMatrix64',
    'BitColumnMatrix128',
    'RngJumpAhead',
    'Cong',
    'SHR3',
    'MWC1',
    'MWC2',
    'MWC64',
    'KISS',
    'KISS2',
    'LFSR88',
    'LFSR113',
    'GENERATORS',
]
