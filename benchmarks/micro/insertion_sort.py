# benchmarks/micro/insertion_sort.py
#
# Compares insertion sort with the built-in sort on a random array. The
# input is copied into a scratch list by the untimed prepare step before
# every iteration, so both sorts always start from the same unsorted data
# and only the sort itself is measured.

import numpy as np
from benchmarks.runner import run_benchmark
from timebench import configure_logging
from timebench.workloads import insertion_sort, random_array


def reset_scratch(args):
    data, scratch = args
    scratch[:] = data
    return args


def sort_insertion(data, scratch):
    insertion_sort(scratch)


def sort_builtin(data, scratch):
    scratch.sort()


def main():
    configure_logging()
    print("--- Running Insertion Sort Benchmark ---")
    size = 2_000

    data = random_array(size, np.random.default_rng(42)).tolist()
    scratch = list(data)

    insertion_time = run_benchmark(sort_insertion, (data, scratch), prepare=reset_scratch)
    builtin_time = run_benchmark(sort_builtin, (data, scratch), prepare=reset_scratch)

    print(f"list.sort (baseline): {builtin_time:.4f} ms")
    print(f"insertion_sort:       {insertion_time:.4f} ms")
    print(f"Slowdown: {insertion_time / builtin_time:.2f}x")


if __name__ == "__main__":
    main()
