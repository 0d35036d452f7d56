"""
Word sampling over a deduplicated vocabulary
Randomness comes from the caller - the sampler never creates its own source
"""

from typing import Iterable, Iterator, List, Optional, Protocol, Tuple


NULL_RNG_MESSAGE = "Random number generator must not be None."
NULL_WORDS_MESSAGE = "Sequence of words must not be None."
EMPTY_WORDS_MESSAGE = "Sequence of words must not be empty."
NEGATIVE_COUNT_MESSAGE = "Number of words to be selected must not be negative."
INSUFFICIENT_WORDS_MESSAGE = (
    "Number of distinct words requested must not exceed number of words in pool."
)


class InvalidArgumentError(ValueError):
    """Base class for sampler usage errors"""


class NullReferenceError(InvalidArgumentError):
    """A required collaborator (word sequence or random source) is missing"""


class EmptyPoolError(InvalidArgumentError):
    """The word sequence contains no tokens"""


class NegativeCountError(InvalidArgumentError):
    """A batch draw asked for fewer than zero words"""


class InsufficientPoolError(InvalidArgumentError):
    """A no-repeat batch draw asked for more words than the pool holds"""


class RandomSource(Protocol):
    """Anything that yields a uniform int in [0, stop), e.g. random.Random"""

    def randrange(self, stop: int) -> int:
        ...


class WordSampler:
    """Draws random words from an immutable, lowercased, duplicate-free pool"""

    def __init__(self, words: Optional[Iterable[str]], rng: Optional[RandomSource]):
        """
        Build the pool from words and bind it to rng.

        Raises:
          NullReferenceError if rng or words is None.
          EmptyPoolError if words holds no tokens.
        """
        if rng is None:
            raise NullReferenceError(NULL_RNG_MESSAGE)
        if words is None:
            raise NullReferenceError(NULL_WORDS_MESSAGE)

        # dict keeps first-seen order while collapsing duplicates
        pool = tuple(dict.fromkeys(word.lower() for word in words))
        if not pool:
            raise EmptyPoolError(EMPTY_WORDS_MESSAGE)

        self._words: Tuple[str, ...] = pool
        self._lookup = frozenset(pool)
        self._rng = rng

    @property
    def pool(self) -> Tuple[str, ...]:
        """Normalized words available for drawing"""
        return self._words

    @property
    def rng(self) -> RandomSource:
        """The random source given at construction, not a copy"""
        return self._rng

    @property
    def pool_size(self) -> int:
        return len(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and word.lower() in self._lookup

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        return self.next()

    def next(self) -> str:
        """Return one word, drawn with replacement"""
        return self._words[self._rng.randrange(len(self._words))]

    def sample(self, count: int, allow_duplicates: bool = True) -> List[str]:
        """
        Return count words in the order they were drawn.

        Without duplicates, repeated picks are discarded and redrawn until
        the selection is full.

        Raises:
          NegativeCountError if count < 0.
          InsufficientPoolError if duplicates are disallowed and count
          exceeds the pool size.
        """
        if count < 0:
            raise NegativeCountError(NEGATIVE_COUNT_MESSAGE)
        if not allow_duplicates and count > len(self._words):
            raise InsufficientPoolError(INSUFFICIENT_WORDS_MESSAGE)

        selection: List[str] = []
        seen = set()
        while len(selection) < count:
            pick = self.next()
            if allow_duplicates or pick not in seen:
                selection.append(pick)
                seen.add(pick)
        return selection

    def __repr__(self) -> str:
        return f"WordSampler(pool_size={len(self._words)})"
