from collections.abc import Callable, Generator, Iterable, MutableSequence, Sequence
from itertools import pairwise, permutations
from math import factorial
from random import Random
from typing import NamedTuple


def _sampler(N: int, r: Random) -> Generator[list[int], None, None]:
    while True:
        yield [r.randrange(N) for _ in range(N)]


class SortingAlgorithm(NamedTuple):
    """An in-place sorting procedure plus what the statistics need to exercise it."""

    name: str
    func: Callable[[MutableSequence[int]], None]
    max_N: int
    stable: bool = False
    generator: Callable[[int], Iterable[Sequence[int]]] = lambda n: permutations(range(n))
    input_total: Callable[[int], int] = factorial
    sampler: Callable[[int, Random], Generator[Sequence[int], None, None]] = _sampler
    validator: Callable[[Iterable[int]], bool] = lambda arr: all(x <= y for x, y in pairwise(arr))

    def sort(self, arr: MutableSequence[int]) -> None:
        self.func(arr)
