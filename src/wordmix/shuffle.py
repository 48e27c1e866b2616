"""Fisher-Yates shuffling over a range or over a subset of movable positions.

All precondition checks run before the sequence is touched, so a failed call
never leaves a partially shuffled sequence behind.
"""

from collections.abc import Iterable, MutableSequence, Sequence
from random import Random
from typing import Any

from wordmix.errors import InvalidMovableIndicesError, InvalidRangeError


def validate_bounds(sequence: Sequence[Any], begin_position: int, end_position: int) -> None:
    """Raise InvalidRangeError unless 0 <= begin <= end < len(sequence)."""
    if begin_position < 0 or end_position >= len(sequence) or begin_position > end_position:
        raise InvalidRangeError(begin_position, end_position, len(sequence))


def validate_movable_indices(
    begin_position: int, end_position: int, movable_indices: Sequence[int]
) -> None:
    """Check that movable indices are in range and strictly ascending.

    Args:
        begin_position: First position of the active range (inclusive)
        end_position: Last position of the active range (inclusive)
        movable_indices: Positions allowed to move

    Raises:
        InvalidMovableIndicesError: On the first offending index
    """
    previous = None
    for index in movable_indices:
        if index < begin_position or index > end_position:
            raise InvalidMovableIndicesError(
                index,
                f"Movable index {index} is outside [{begin_position}, {end_position}]",
            )
        if previous is not None and previous >= index:
            raise InvalidMovableIndicesError(
                index,
                f"Movable indices must be strictly ascending: {previous} is followed by {index}",
            )
        previous = index


def _swap(sequence: MutableSequence[Any], i: int, j: int) -> None:
    sequence[i], sequence[j] = sequence[j], sequence[i]


def shuffle(
    sequence: MutableSequence[Any],
    begin_position: int,
    end_position: int,
    movable_indices: Iterable[int] | None = None,
    *,
    rng: Random | None = None,
) -> None:
    """Shuffle a sequence in place between two inclusive positions.

    Without movable_indices every position in [begin_position, end_position]
    takes part. With movable_indices only the listed positions are permuted
    among themselves; every other position keeps its element.

    Args:
        sequence: Mutable sequence to shuffle in place
        begin_position: First position of the range (inclusive)
        end_position: Last position of the range (inclusive)
        movable_indices: Strictly ascending positions within the range, or None
        rng: Random source; a freshly seeded one is used when omitted

    Raises:
        InvalidRangeError: If the bounds are outside the sequence or reversed
        InvalidMovableIndicesError: If a movable index is out of range or
            the indices are not strictly ascending
    """
    validate_bounds(sequence, begin_position, end_position)

    if movable_indices is None:
        rng = rng if rng is not None else Random()
        for i in range(end_position + 1, begin_position + 1, -1):
            j = rng.randint(begin_position, i - 1)
            _swap(sequence, j, i - 1)
        return

    movable = list(movable_indices)
    validate_movable_indices(begin_position, end_position, movable)
    if len(movable) < 2:
        return

    # Fisher-Yates over ranks, mapped back onto sequence positions
    rng = rng if rng is not None else Random()
    for i in range(len(movable), 1, -1):
        rank = rng.randint(0, i - 1)
        _swap(sequence, movable[rank], movable[i - 1])


def shuffle_all(sequence: MutableSequence[Any], *, rng: Random | None = None) -> None:
    """Shuffle the whole sequence in place. Empty sequences are left alone."""
    if not sequence:
        return
    shuffle(sequence, 0, len(sequence) - 1, rng=rng)
