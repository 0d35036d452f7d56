"""
BIP39 word lists (2048 words each)
Uses the official mnemonic package for the vocabulary
"""

from functools import lru_cache
from typing import List

from mnemonic import Mnemonic

from diceware.errors import ConfigurationError

DEFAULT_LANGUAGE = "english"


def available_languages() -> List[str]:
    """Languages bundled with the mnemonic package"""
    return sorted(Mnemonic.list_languages())


@lru_cache()
def _cached_wordlist(language: str) -> tuple:
    return tuple(Mnemonic(language).wordlist)


def load_wordlist(language: str = DEFAULT_LANGUAGE) -> List[str]:
    """
    Return the BIP39 word list for language.

    Raises:
      ConfigurationError if mnemonic has no list for language.
    """
    languages = available_languages()
    if language not in languages:
        raise ConfigurationError(
            f"Unknown word list language '{language}'. "
            f"Available: {', '.join(languages)}"
        )
    return list(_cached_wordlist(language))


# Official BIP39 English wordlist
BIP39_WORDLIST = load_wordlist(DEFAULT_LANGUAGE)
