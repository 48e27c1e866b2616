"""Statement shuffling: scramble letters inside each word of a string.

Separators never move. In vowel mode consonants keep their absolute
positions and only the vowel slots of each word are permuted.
"""

import logging
from collections.abc import Iterable
from random import Random

from wordmix.schemas import ShuffleOptions
from wordmix.shuffle import shuffle
from wordmix.tokenizer import collect_words_info

logger = logging.getLogger(__name__)


def shuffle_statement(
    text: str,
    shuffle_only_vowels: bool = False,
    separators: Iterable[str] | None = None,
    *,
    rng: Random | None = None,
) -> str:
    """Shuffle letters in the words of a statement.

    Args:
        text: Statement to shuffle
        shuffle_only_vowels: Permute only the Latin vowels of each word
        separators: Word separator characters (defaults to a space)
        rng: Random source shared by every word of the statement

    Returns:
        A new string of the same length with the same characters
    """
    letters = list(text)
    words = collect_words_info(letters, shuffle_only_vowels, separators)
    rng = rng if rng is not None else Random()

    for word in words:
        if shuffle_only_vowels:
            shuffle(letters, word.begin_position, word.end_position, word.vowel_positions, rng=rng)
        else:
            shuffle(letters, word.begin_position, word.end_position, rng=rng)

    logger.debug("Shuffled %d words (only_vowels=%s)", len(words), shuffle_only_vowels)
    return "".join(letters)


class StatementShuffler:
    """Shuffles statements with a fixed set of options and a seeded random source."""

    def __init__(self, options: ShuffleOptions | None = None):
        self.options = options or ShuffleOptions()
        self._seed_used = (
            self.options.seed if self.options.seed is not None else Random().getrandbits(32)
        )
        self.rng = Random(self._seed_used)

    @property
    def seed_used(self) -> int:
        """Return the seed that was used for this shuffler."""
        return self._seed_used

    def shuffle(self, text: str) -> str:
        """Shuffle one statement using the configured options."""
        return shuffle_statement(
            text,
            self.options.only_vowels,
            self.options.separator_set,
            rng=self.rng,
        )

    def shuffle_many(self, texts: Iterable[str]) -> list[str]:
        """Shuffle several statements, drawing from the same random stream."""
        return [self.shuffle(text) for text in texts]
