import random

import pytest

from diceware.config import Settings
from diceware.generator import InsufficientPoolError, NegativeCountError
from diceware.passphrase import PassphraseGenerator, fingerprint
from diceware.wordlist import BIP39_WORDLIST


def test_generate_joins_words_with_separator(scripted):
    generator = PassphraseGenerator(
        words=["Red", "green", "blue"], rng=scripted([2, 0]), separator="-"
    )

    passphrase = generator.generate(2)

    assert passphrase.words == ["blue", "red"]
    assert passphrase.phrase == "blue-red"
    assert passphrase.fingerprint == fingerprint(["blue", "red"])


def test_generate_unique_words():
    generator = PassphraseGenerator(words=["a", "b", "c", "d"], rng=random.Random(4))

    passphrase = generator.generate(4, allow_duplicates=False)

    assert sorted(passphrase.words) == ["a", "b", "c", "d"]


def test_generate_propagates_sampler_errors():
    generator = PassphraseGenerator(words=["a", "b"], rng=random.Random(0))

    with pytest.raises(InsufficientPoolError):
        generator.generate(3, allow_duplicates=False)
    with pytest.raises(NegativeCountError):
        generator.generate(-1)


def test_defaults_to_bip39_and_system_random():
    generator = PassphraseGenerator()

    assert generator.sampler.pool_size == len(BIP39_WORDLIST)
    assert isinstance(generator.sampler.rng, random.SystemRandom)

    passphrase = generator.generate(12)
    assert len(passphrase.words) == 12
    assert all(word in BIP39_WORDLIST for word in passphrase.words)


def test_fingerprint_ignores_case_and_surrounding_whitespace():
    assert fingerprint(["Apple ", " banana"]) == fingerprint(["apple", "banana"])
    assert fingerprint(["apple", "banana"]) != fingerprint(["banana", "apple"])


def test_fingerprint_is_base64_sha256():
    # 32 digest bytes -> 44 base64 characters
    assert len(fingerprint(["word"])) == 44


def test_from_settings_with_seed_is_reproducible():
    settings = Settings(SEED=42, WORD_COUNT=5, SEPARATOR=".")

    first = PassphraseGenerator.from_settings(settings).generate(5)
    second = PassphraseGenerator.from_settings(settings).generate(5)

    assert first == second
    assert first.phrase.count(".") == 4


def test_from_settings_without_seed_uses_system_random():
    generator = PassphraseGenerator.from_settings(Settings())

    assert isinstance(generator.sampler.rng, random.SystemRandom)


def test_generate_logs_counts_but_not_words(caplog):
    caplog.set_level("INFO", logger="diceware")
    generator = PassphraseGenerator(words=["secretword"], rng=random.Random(0))

    generator.generate(3)

    assert "Generated 3 words" in caplog.text
    assert "pool of 1" in caplog.text
    assert "secretword" not in caplog.text
