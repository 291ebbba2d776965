from pathlib import Path

SAMPLE_INPUT = (4, 3, 9, 1, 4, 7)
SORTER_ORDER = (("Bubble sort", "bubble sort"), ("Quick sort", "quick sort"), ("Insertion sort", "insertion sort"))

SAMPLE_SEED = 0
MAX_SAMPLE_TIME_MS = 1000
STATISTICS_NS = list(range(1, 10)) + list(range(10, 100, 10)) + list(range(100, 1000, 100))
STABILITY_SAMPLES = 64

RESULT_DIR = Path("logs/statistics.csv")
