"""
Passphrase generation on top of WordSampler
Defaults to the system CSPRNG; a seed gives reproducible output
"""

import base64
import hashlib
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from diceware.config import Settings
from diceware.generator import RandomSource, WordSampler
from diceware.logging_config import log_generation
from diceware.wordlist import BIP39_WORDLIST, load_wordlist


@dataclass(frozen=True)
class Passphrase:
    words: List[str]
    phrase: str
    fingerprint: str


def fingerprint(words: Sequence[str]) -> str:
    """
    SHA-256 of normalized words, base64 encoded
    Comparing fingerprints never needs the plain words
    """
    # Normalize: lowercase, trimmed, single spaces
    normalized = " ".join(word.lower().strip() for word in words)

    hash_bytes = hashlib.sha256(normalized.encode("utf-8")).digest()
    return base64.b64encode(hash_bytes).decode("ascii")


class PassphraseGenerator:
    """Draws passphrase words from one vocabulary"""

    def __init__(
        self,
        words: Optional[Sequence[str]] = None,
        rng: Optional[RandomSource] = None,
        separator: str = " ",
    ):
        if words is None:
            words = BIP39_WORDLIST
        if rng is None:
            rng = random.SystemRandom()
        self.sampler = WordSampler(words, rng)
        self.separator = separator

    @classmethod
    def from_settings(cls, settings: Settings) -> "PassphraseGenerator":
        """Build a generator for the configured language and seed"""
        if settings.SEED is not None:
            rng = random.Random(settings.SEED)
        else:
            rng = random.SystemRandom()
        return cls(
            words=load_wordlist(settings.LANGUAGE),
            rng=rng,
            separator=settings.SEPARATOR,
        )

    def generate(self, count: int, allow_duplicates: bool = True) -> Passphrase:
        """Draw count words and join them with the separator"""
        words = self.sampler.sample(count, allow_duplicates)
        log_generation(count, self.sampler.pool_size, allow_duplicates)
        return Passphrase(
            words=words,
            phrase=self.separator.join(words),
            fingerprint=fingerprint(words),
        )
