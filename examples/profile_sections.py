# examples/profile_sections.py

"""
Profiles the stages of a small pipeline with timebench.profile().
"""

import numpy as np

import timebench
from timebench.workloads import insertion_sort, random_array


def main():
    rng = np.random.default_rng(0)
    with timebench.profile() as p:
        for _ in range(5):
            with p.section("generate"):
                data = random_array(1_000, rng).tolist()
            with p.section("insertion_sort"):
                insertion_sort(data)
            with p.section("builtin_sort"):
                sorted(data)
    p.print_report()


if __name__ == "__main__":
    main()
