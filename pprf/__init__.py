"""
RSA Puncturable PRF Package

A pseudorandom function over a bounded input domain, keyed by an RSA
accumulator, whose outputs can be irrevocably disabled ("punctured") at
chosen inputs without changing the outputs anywhere else.
"""

from .errors import (
    InputIndexError,
    ParameterGenerationError,
    PprfError,
    StateDecodeError,
)
from .models import PrfState
from .prf import PuncturablePrf
from .puncture_set import PunctureSet

__version__ = "0.1.0"
__all__ = [
    "PuncturablePrf",
    "PunctureSet",
    "PrfState",
    "PprfError",
    "ParameterGenerationError",
    "InputIndexError",
    "StateDecodeError",
]
