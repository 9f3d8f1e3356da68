import logging
from typing import FrozenSet, Iterable, Iterator

logger = logging.getLogger(__name__)

MIN_WORD_LEN = 3


class DictionaryEmpty(ValueError):
    """Raised when no word of the requested length survives loading."""


def _is_word(word: str, word_length: int) -> bool:
    return len(word) == word_length and word.isalpha()


class Dictionary:
    """An immutable, ordered list of guess-able words that all share one length."""

    def __init__(self, words: Iterable[str], word_length: int):
        if word_length < MIN_WORD_LEN:
            raise ValueError(f"Word length must be at least {MIN_WORD_LEN}.")

        # lower-case and drop repeats, keeping first-seen order
        normalized = tuple(dict.fromkeys(word.lower() for word in words))
        if not normalized:
            raise DictionaryEmpty(f"No {word_length}-letter words in dictionary.")
        for word in normalized:
            if not _is_word(word, word_length):
                raise ValueError(f"Invalid word '{word}'. Must be {word_length} letters.")

        self.word_length = word_length
        self._words = normalized
        # lookups go through the set, iteration and random picks through the tuple
        self._lookup: FrozenSet[str] = frozenset(normalized)

    @classmethod
    def load(cls, raw_text: str, word_length: int) -> "Dictionary":
        """
        Builds a dictionary from newline-delimited text.

        Each line is stripped and lower-cased; lines that aren't exactly
        `word_length` letters afterwards are dropped, as are repeats.

        Args:
            raw_text (str): The raw word list, one word per line.
            word_length (int): The length every word must have.

        Raises:
            DictionaryEmpty: If no line has the requested length.
        """
        if word_length < MIN_WORD_LEN:
            raise ValueError(f"Word length must be at least {MIN_WORD_LEN}.")

        words = []
        skipped = 0
        # splitlines() copes with \r\n and a missing trailing newline, so we never
        # have to chop characters off the end of a line by hand
        for line in raw_text.splitlines():
            word = line.strip().lower()
            if not _is_word(word, word_length):
                if word:
                    skipped += 1
                continue
            words.append(word)

        if not words:
            raise DictionaryEmpty(f"No {word_length}-letter words in dictionary.")

        logger.debug("Loaded %d lines (%d skipped)", len(words), skipped)
        return cls(words, word_length)

    def contains(self, word: str) -> bool:
        return word.lower() in self._lookup

    def pick_random(self, rng) -> str:
        """Picks a word uniformly at random using `rng.choice`."""
        return rng.choice(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"Dictionary({len(self._words)} words, word_length={self.word_length})"
