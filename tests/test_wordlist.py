"""
Tests for the BIP39 vocabulary provider
"""

import random

import pytest

from diceware.errors import ConfigurationError
from diceware.generator import WordSampler
from diceware.wordlist import BIP39_WORDLIST, available_languages, load_wordlist


def test_english_wordlist_has_2048_unique_lowercase_words():
    assert len(BIP39_WORDLIST) == 2048
    assert len(set(BIP39_WORDLIST)) == 2048
    assert all(word == word.lower() for word in BIP39_WORDLIST)


def test_english_is_available():
    assert "english" in available_languages()


def test_load_wordlist_returns_fresh_list():
    words = load_wordlist("english")
    words.clear()

    assert len(load_wordlist("english")) == 2048


def test_load_wordlist_rejects_unknown_language():
    with pytest.raises(ConfigurationError) as exc:
        load_wordlist("klingon")

    assert "klingon" in str(exc.value)


def test_sampler_keeps_full_english_pool():
    sampler = WordSampler(BIP39_WORDLIST, random.Random(0))

    assert sampler.pool_size == 2048
