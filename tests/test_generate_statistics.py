from math import factorial

import pandas as pd
import pytest

import generate_statistics
from generate_statistics import InvalidSortingAlgorithmError, _work, get_operation_cnts, is_stable_on, measure_stability, sort_result, to_displayable_int
from sorting_algorithms.sorting_algorithms import get_sorting_algorithm, sorting_algorithms


def test_to_displayable_int():
    assert to_displayable_int(120) == "120"
    assert to_displayable_int(factorial(20)) == "2.43e+18"


def test_bubble_sort_compares_every_adjacent_pair_each_pass():
    operation_cnts = get_operation_cnts(get_sorting_algorithm("bubble sort"), 4)
    assert len(operation_cnts) == factorial(4)
    # 4 passes of 3 comparisons, no pair is compared twice in a row for n > 2
    assert (operation_cnts == 12).all()


def test_insertion_sort_operation_counts():
    operation_cnts = get_operation_cnts(get_sorting_algorithm("insertion sort"), 4)
    assert operation_cnts.min() == 3
    assert operation_cnts.max() == 6


def test_trivial_inputs_need_no_comparisons():
    for sorting_algorithm in sorting_algorithms:
        assert get_operation_cnts(sorting_algorithm, 0).tolist() == [0]
        assert get_operation_cnts(sorting_algorithm, 1).tolist() == [0]


def test_sampling_beyond_max_n(monkeypatch):
    monkeypatch.setattr(generate_statistics, "MAX_SAMPLE_TIME_MS", 20)
    sorting_algorithm = get_sorting_algorithm("quick sort")
    operation_cnts = get_operation_cnts(sorting_algorithm, sorting_algorithm.max_N + 1)
    assert len(operation_cnts) > 0
    assert (operation_cnts > 0).all()


def test_broken_algorithm_is_rejected():
    broken = get_sorting_algorithm("bubble sort")._replace(name="broken", func=lambda arr: arr.reverse())
    with pytest.raises(InvalidSortingAlgorithmError, match="broken"):
        get_operation_cnts(broken, 3)


def test_stability():
    assert is_stable_on(get_sorting_algorithm("insertion sort"), [4, 3, 9, 1, 4, 7])
    assert is_stable_on(get_sorting_algorithm("bubble sort"), [2, 1, 2, 1, 2])
    # the middle pivot swaps the first 1 to the end, past the second one
    assert not is_stable_on(get_sorting_algorithm("quick sort"), [1, 1, 0])


def test_declared_stable_algorithm_must_measure_stable():
    unstable = get_sorting_algorithm("quick sort")._replace(stable=True)
    with pytest.raises(InvalidSortingAlgorithmError, match="declared stable"):
        measure_stability(unstable, 8)
    assert measure_stability(get_sorting_algorithm("insertion sort"), 8)


def test_work_row():
    idx = [a.name for a in sorting_algorithms].index("insertion sort")
    name, N, input_total, best, worst, avg, stable = _work((idx, 3)).split(",")
    assert (name, N, input_total, best, worst, stable) == ("insertion sort", "3", "6", "2", "3", "True")
    assert float(avg) == pytest.approx(16 / 6)


def test_sort_result(tmp_path, monkeypatch):
    result_dir = tmp_path / "statistics.csv"
    monkeypatch.setattr(generate_statistics, "RESULT_DIR", result_dir)
    result_dir.write_text(
        "name,N,input,best,worst,avg,stable\n"
        "quick sort,3,6,2,3,2.5,False\n"
        "bubble sort,3,6,6,6,6.0,True\n"
        "quick sort,2,2,1,1,1.0,True\n"
    )
    sort_result()
    df = pd.read_csv(result_dir)
    assert list(zip(df["name"], df["N"])) == [("bubble sort", 3), ("quick sort", 2), ("quick sort", 3)]
    quick = pd.read_csv(tmp_path / "quick sort.csv")
    assert list(quick.columns) == ["N", "input", "best", "worst", "avg", "stable"]
    assert quick["N"].tolist() == [2, 3]
