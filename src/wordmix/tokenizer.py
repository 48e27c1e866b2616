"""Word tokenizer that reports word bounds and Latin vowel positions."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

LATIN_VOWELS = frozenset("aeiouy")

DEFAULT_SEPARATORS = frozenset(" ")


@dataclass
class WordInfo:
    """Bounds of one word in a character sequence.

    Positions are absolute and inclusive. Vowel positions are ascending and
    only filled when vowel collection was requested.
    """

    begin_position: int
    end_position: int
    vowel_positions: list[int] = field(default_factory=list)

    @property
    def length(self) -> int:
        return self.end_position - self.begin_position + 1

    def span(self) -> tuple[int, int]:
        return self.begin_position, self.end_position


def resolve_separators(separators: Iterable[str] | None) -> frozenset[str]:
    """Return the separator set, falling back to a single space when none given."""
    if not separators:
        return DEFAULT_SEPARATORS
    resolved = frozenset(separators)
    return resolved or DEFAULT_SEPARATORS


def find_word_begin(characters: Sequence[str], start: int, separators: frozenset[str]) -> int:
    """Return the position of the next non-separator at or after start, or -1."""
    for position in range(start, len(characters)):
        if characters[position] not in separators:
            return position
    return -1


def find_word_end(characters: Sequence[str], start: int, separators: frozenset[str]) -> int:
    """Return the last position of the word starting at start (inclusive)."""
    position = start
    while position < len(characters) and characters[position] not in separators:
        position += 1
    return position - 1


def collect_vowel_positions(characters: Sequence[str], word: WordInfo) -> None:
    """Append the positions of Latin vowels inside the word's bounds."""
    for position in range(word.begin_position, word.end_position + 1):
        if characters[position] in LATIN_VOWELS:
            word.vowel_positions.append(position)


def collect_words_info(
    characters: Sequence[str],
    collect_vowels_info: bool = False,
    separators: Iterable[str] | None = None,
) -> list[WordInfo]:
    """Collect word bounds from a character sequence.

    A word is a maximal run of characters that are not separators, so runs of
    consecutive separators never produce empty words.

    Args:
        characters: A string or list of single characters
        collect_vowels_info: Also record vowel positions for each word
        separators: Word separator characters (defaults to a space)

    Returns:
        WordInfo list in order of appearance
    """
    current_separators = resolve_separators(separators)
    words: list[WordInfo] = []
    position = 0

    while True:
        begin = find_word_begin(characters, position, current_separators)
        if begin == -1:
            break
        end = find_word_end(characters, begin, current_separators)
        word = WordInfo(begin, end)
        if collect_vowels_info:
            collect_vowel_positions(characters, word)
        words.append(word)
        position = end + 1

    return words
