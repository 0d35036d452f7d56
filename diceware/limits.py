"""
Word count and logging limits shared by configuration and the CLI.
"""

import math

# Passphrase length.
MIN_WORD_COUNT = 1
MAX_WORD_COUNT = 64
DEFAULT_WORD_COUNT = 6

# Words per line in numbered output.
WORDS_PER_LINE = 3

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def entropy_bits(pool_size: int, count: int) -> float:
    """Return the entropy of count independent draws from pool_size words."""
    if pool_size < 1 or count < 1:
        return 0.0
    return count * math.log2(pool_size)
