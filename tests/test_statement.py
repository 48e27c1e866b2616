"""Tests for statement shuffling."""

from collections import Counter
from random import Random

import pytest

from wordmix.schemas import ShuffleOptions
from wordmix.statement import StatementShuffler, shuffle_statement
from wordmix.tokenizer import LATIN_VOWELS

SAMPLE = "the quick brown fox jumps over the lazy dog"


@pytest.fixture
def rng():
    return Random(42)


class TestShuffleStatement:
    """Tests for shuffle_statement()."""

    def test_cat_dog(self, rng):
        for _ in range(20):
            result = shuffle_statement("cat dog", rng=rng)
            assert len(result) == 7
            assert result[3] == " "
            assert sorted(result[0:3]) == sorted("cat")
            assert sorted(result[4:7]) == sorted("dog")

    @pytest.mark.parametrize("only_vowels", [False, True])
    def test_preserves_length_and_characters(self, rng, only_vowels):
        result = shuffle_statement(SAMPLE, only_vowels, rng=rng)
        assert len(result) == len(SAMPLE)
        assert Counter(result) == Counter(SAMPLE)

    def test_separators_never_move(self, rng):
        text = "hello, world; again"
        result = shuffle_statement(text, separators=" ,;", rng=rng)
        for i, char in enumerate(text):
            if char in " ,;":
                assert result[i] == char

    def test_letters_stay_inside_their_word(self, rng):
        result = shuffle_statement(SAMPLE, rng=rng)
        assert [sorted(w) for w in result.split(" ")] == [sorted(w) for w in SAMPLE.split(" ")]

    def test_vowel_mode_keeps_consonants(self, rng):
        text = "shuffling only the vowels keeps consonants"
        for _ in range(20):
            result = shuffle_statement(text, True, rng=rng)
            for i, char in enumerate(text):
                if char not in LATIN_VOWELS:
                    assert result[i] == char

    def test_vowel_mode_permutes_vowels_within_word(self, rng):
        text = "education"
        seen = set()
        for _ in range(200):
            result = shuffle_statement(text, True, rng=rng)
            assert Counter(result) == Counter(text)
            seen.add(result)
        assert len(seen) > 1

    def test_bee_is_stable_in_vowel_mode(self, rng):
        for _ in range(20):
            assert shuffle_statement("bee", True, rng=rng) == "bee"

    def test_single_letter_words_unchanged(self, rng):
        assert shuffle_statement("a b c d", rng=rng) == "a b c d"

    def test_single_vowel_words_unchanged(self, rng):
        assert shuffle_statement("strength and crwth", True, rng=rng) == "strength and crwth"

    def test_empty_text(self, rng):
        assert shuffle_statement("", rng=rng) == ""
        assert shuffle_statement("", True, rng=rng) == ""

    def test_whole_word_mode_eventually_changes_word(self, rng):
        results = {shuffle_statement("abcdef", rng=rng) for _ in range(50)}
        assert len(results) > 1

    def test_same_seed_same_output(self):
        first = shuffle_statement(SAMPLE, rng=Random(7))
        second = shuffle_statement(SAMPLE, rng=Random(7))
        assert first == second

    def test_default_random_source(self):
        result = shuffle_statement(SAMPLE)
        assert Counter(result) == Counter(SAMPLE)


class TestStatementShuffler:
    """Tests for StatementShuffler."""

    def test_default_options(self):
        shuffler = StatementShuffler()
        assert shuffler.options.only_vowels is False
        assert isinstance(shuffler.seed_used, int)

    def test_seed_is_kept(self):
        shuffler = StatementShuffler(ShuffleOptions(seed=12345))
        assert shuffler.seed_used == 12345

    def test_seeded_shufflers_agree(self):
        options = ShuffleOptions(seed=2024)
        assert StatementShuffler(options).shuffle(SAMPLE) == StatementShuffler(options).shuffle(SAMPLE)

    def test_random_seed_is_reproducible(self):
        first = StatementShuffler()
        replay = StatementShuffler(ShuffleOptions(seed=first.seed_used))
        assert first.shuffle(SAMPLE) == replay.shuffle(SAMPLE)

    def test_vowel_option(self):
        shuffler = StatementShuffler(ShuffleOptions(only_vowels=True, seed=1))
        result = shuffler.shuffle("brisk trump")
        assert result == "brisk trump"

    def test_separator_option(self):
        shuffler = StatementShuffler(ShuffleOptions(separators=",", seed=1))
        result = shuffler.shuffle("x,ab,y")
        assert result[0] == "x"
        assert result[1] == ","
        assert result[4] == ","
        assert result[5] == "y"

    def test_shuffle_many(self):
        shuffler = StatementShuffler(ShuffleOptions(seed=3))
        results = shuffler.shuffle_many(["cat", "dog", "bird"])
        assert [sorted(r) for r in results] == [sorted("cat"), sorted("dog"), sorted("bird")]
