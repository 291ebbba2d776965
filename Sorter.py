from collections.abc import MutableSequence

from sorting_algorithms.SortingAlgorithm import SortingAlgorithm


class Sorter:
    """Forwards sort requests to the algorithm chosen at construction."""

    def __init__(self, algorithm: SortingAlgorithm) -> None:
        self._algorithm = algorithm

    @property
    def algorithm(self) -> SortingAlgorithm:
        return self._algorithm

    def sort_data(self, arr: MutableSequence[int]) -> None:
        self._algorithm.sort(arr)

    __slots__ = ["_algorithm"]
