from collections.abc import MutableSequence

from ..SortingAlgorithm import SortingAlgorithm


def quick_sort(arr: MutableSequence[int]) -> None:
    def impl(l: int, r: int) -> None:
        # recurse into the smaller side, loop on the larger one: stack depth stays O(log n)
        while l < r:
            pivot = arr[(l + r) // 2]
            i, j = l, r
            while i <= j:
                while arr[i] < pivot:
                    i += 1
                while arr[j] > pivot:
                    j -= 1
                if i <= j:
                    arr[i], arr[j] = arr[j], arr[i]
                    i += 1
                    j -= 1
            if j - l < r - i:
                if l < j:
                    impl(l, j)
                l = i
            else:
                if i < r:
                    impl(i, r)
                r = j

    impl(0, len(arr) - 1)


algorithm = SortingAlgorithm("quick sort", quick_sort, 9)
