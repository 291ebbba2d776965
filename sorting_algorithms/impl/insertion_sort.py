from collections.abc import MutableSequence

from ..SortingAlgorithm import SortingAlgorithm


def insertion_sort(arr: MutableSequence[int]) -> None:
    for i in range(1, len(arr)):
        key = arr[i]
        j = i - 1
        while j >= 0 and arr[j] > key:
            arr[j + 1] = arr[j]
            j -= 1
        arr[j + 1] = key


algorithm = SortingAlgorithm("insertion sort", insertion_sort, 9, stable=True)
