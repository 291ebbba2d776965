from collections.abc import Iterable

from Config import *
from Sorter import Sorter
from sorting_algorithms.sorting_algorithms import get_sorting_algorithm


def format_sequence(arr: Iterable[int]) -> str:
    return "".join(f"{x} " for x in arr)


def main() -> None:
    numbers = list(SAMPLE_INPUT)
    results: list[tuple[str, list[int]]] = []
    for label, name in SORTER_ORDER:
        sorter = Sorter(get_sorting_algorithm(name))
        data = numbers.copy()
        sorter.sort_data(data)
        results.append((label, data))

    print(f"Original array: {format_sequence(numbers)}")
    for label, data in results:
        print(f"{label}: {format_sequence(data)}")


if __name__ == "__main__":
    main()
