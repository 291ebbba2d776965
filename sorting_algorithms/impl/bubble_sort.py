from collections.abc import MutableSequence

from ..SortingAlgorithm import SortingAlgorithm


def bubble_sort(arr: MutableSequence[int], early_exit: bool = False) -> None:
    """Runs ``len(arr)`` full passes; with ``early_exit`` it stops after a pass without swaps."""
    for _ in range(len(arr)):
        swapped = False
        for j in range(len(arr) - 1):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
        if early_exit and not swapped:
            break


algorithm = SortingAlgorithm("bubble sort", bubble_sort, 8, stable=True)
