"""
DICEWARE - passphrase words drawn from a deduplicated vocabulary
"""

from diceware.generator import (
    EmptyPoolError,
    InsufficientPoolError,
    InvalidArgumentError,
    NegativeCountError,
    NullReferenceError,
    RandomSource,
    WordSampler,
)

__version__ = "1.0.0"

__all__ = [
    "WordSampler",
    "RandomSource",
    "InvalidArgumentError",
    "NullReferenceError",
    "EmptyPoolError",
    "NegativeCountError",
    "InsufficientPoolError",
    "__version__",
]
