from collections.abc import Sequence
from decimal import Decimal
from functools import cmp_to_key
from itertools import islice, product
from multiprocessing import Pool
from random import Random
from time import thread_time
from typing import NamedTuple, Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from Config import *
from sorting_algorithms.SortingAlgorithm import SortingAlgorithm
from sorting_algorithms.sorting_algorithms import sorting_algorithms


class IdxVal(NamedTuple):
    idx: int
    val: int


class InvalidSortingAlgorithmError(Exception):
    def __init__(self, name: str, msg: str) -> None:
        super().__init__(f"Invalid sorting algorithm `{name}`: {msg}")


def to_displayable_int(x: int) -> str:
    return str(x) if x < 1e9 else f"{Decimal(x):.2e}"


def get_operation_cnts(sorting_algorithm: SortingAlgorithm, N: int) -> np.ndarray:
    """Count the comparisons ``sorting_algorithm`` makes on each input of length ``N``.

    Every permutation of ``range(N)`` is tried when ``N <= max_N``; beyond that, seeded
    random inputs are sampled until ``MAX_SAMPLE_TIME_MS`` of thread time is spent.
    Repeating the same comparison back to back (``a<b`` then ``a>b``) counts once.
    """

    def cmp(x: IdxVal, y: IdxVal) -> int:
        if x.idx == y.idx:
            return 0
        if x.idx > y.idx:
            return -cmp(y, x)
        nonlocal operation_cnt, last_cmp
        if (cur_cmp := (x.idx, y.idx)) != last_cmp:
            last_cmp = cur_cmp
            operation_cnt += 1
        return (x.val > y.val) - (x.val < y.val)

    key = cmp_to_key(cmp)

    do_sample = N > sorting_algorithm.max_N
    if do_sample:
        start_time = thread_time()
    r = Random(SAMPLE_SEED)
    operation_cnts: list[int] = []
    for val_array in sorting_algorithm.sampler(N, r) if do_sample else sorting_algorithm.generator(N):
        arr = [key(IdxVal(i, v)) for i, v in enumerate(val_array)]
        last_cmp: Optional[tuple[int, int]] = None
        operation_cnt = 0
        sorting_algorithm.sort(arr)
        result = [x.obj.val for x in arr]
        if not sorting_algorithm.validator(result) or sorted(result) != sorted(val_array):
            raise InvalidSortingAlgorithmError(sorting_algorithm.name, f"{list(val_array)} was sorted into {result}")
        operation_cnts.append(operation_cnt)
        if do_sample and int((thread_time() - start_time) * 1000) > MAX_SAMPLE_TIME_MS:
            break
    return np.array(operation_cnts, dtype=np.int64)


def is_stable_on(sorting_algorithm: SortingAlgorithm, val_array: Sequence[int]) -> bool:
    key = cmp_to_key(lambda x, y: (x.val > y.val) - (x.val < y.val))
    arr = [key(IdxVal(i, v)) for i, v in enumerate(val_array)]
    sorting_algorithm.sort(arr)
    tagged = [x.obj for x in arr]
    return all(x.idx < y.idx for x, y in zip(tagged, tagged[1:]) if x.val == y.val)


def measure_stability(sorting_algorithm: SortingAlgorithm, N: int) -> bool:
    r = Random(SAMPLE_SEED)
    stable = all(is_stable_on(sorting_algorithm, val_array) for val_array in islice(sorting_algorithm.sampler(N, r), STABILITY_SAMPLES))
    if sorting_algorithm.stable and not stable:
        raise InvalidSortingAlgorithmError(sorting_algorithm.name, f"declared stable but reordered equal elements with N={N}")
    return stable


def _work(args: tuple[int, int]) -> str:
    sorting_algorithm_idx, N = args
    sorting_algorithm = sorting_algorithms[sorting_algorithm_idx]
    operation_cnts = get_operation_cnts(sorting_algorithm, N)
    input_total = sorting_algorithm.input_total(N) if N <= sorting_algorithm.max_N else len(operation_cnts)
    stable = measure_stability(sorting_algorithm, N)
    best, worst, avg = operation_cnts.min(), operation_cnts.max(), operation_cnts.mean()
    return ",".join(map(str, (sorting_algorithm.name, N, to_displayable_int(input_total), best, worst, avg, stable)))


def generate_statistics() -> None:
    tasks = list(product(range(len(sorting_algorithms)), STATISTICS_NS))
    RESULT_DIR.parent.mkdir(parents=True, exist_ok=True)
    with Pool() as pool, open(RESULT_DIR, "w") as f:
        f.write("name,N,input,best,worst,avg,stable\n")
        for result in tqdm(pool.imap_unordered(_work, tasks), total=len(tasks)):
            f.write(result + "\n")
            f.flush()


def sort_result() -> None:
    df = pd.read_csv(RESULT_DIR)
    df = df.sort_values(["name", "N"])
    df.to_csv(RESULT_DIR, index=False)
    for name, group in df.groupby("name"):
        group.drop(columns=["name"]).to_csv(RESULT_DIR.parent / f"{name}.csv", index=False)


if __name__ == "__main__":
    generate_statistics()
    sort_result()
    print(f"fin: statistics written to {RESULT_DIR}")
