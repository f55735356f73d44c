"""Seedable permutations for reproducible sessions."""

from random import Random
from typing import Sequence, TypeVar

T = TypeVar("T")


def permuted(items: Sequence[T], seed: int | None) -> list[T]:
    """
    Return a uniformly shuffled copy of a sequence.

    The input is left untouched. The same seed and input always produce the
    same permutation.

    Args:
        items: Sequence to permute
        seed: Seed for the permutation, or None for an unseeded one

    Returns:
        A new list holding the same items in permuted order
    """
    result = list(items)
    Random(seed).shuffle(result)
    return result


def next_seed(rng: Random) -> int:
    """Draw a fresh 32-bit seed from a session random source."""
    return rng.getrandbits(32)
