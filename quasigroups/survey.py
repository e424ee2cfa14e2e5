import time

import numpy as np

from .closure import SubquasigroupMode, has_subquasigroups
from .generate import sequential_replacement_table
from .metrics import is_associative, is_commutative, is_latin_square
from .quasigroup import Quasigroup

DEFAULT_SAMPLES = 20


def survey_orders(orders, samples: int = DEFAULT_SAMPLES, rng=None) -> list[dict]:
    """
    For each order, generate `samples` random quasigroups and record the share
    that are Latin squares, have proper / non-trivial subquasigroups, are
    associative (i.e. groups) or commutative.
    """
    if samples < 1:
        raise ValueError(f"samples must be >= 1, got {samples}")
    rng = rng if rng is not None else np.random.default_rng()
    rows = []
    for n in orders:
        latin = proper = non_trivial = assoc = comm = 0
        seconds = 0.0
        for _ in range(samples):
            t0 = time.perf_counter()
            T = sequential_replacement_table(n, rng=rng)
            seconds += time.perf_counter() - t0
            q = Quasigroup(T)
            latin += is_latin_square(T)
            proper += has_subquasigroups(q, SubquasigroupMode.PROPER)
            non_trivial += has_subquasigroups(q, SubquasigroupMode.NON_TRIVIAL)
            assoc += is_associative(T)
            comm += is_commutative(T)
        rows.append({
            "order": int(n),
            "samples": samples,
            "pct_latin": 100.0 * latin / samples,
            "pct_proper": 100.0 * proper / samples,
            "pct_non_trivial": 100.0 * non_trivial / samples,
            "pct_associative": 100.0 * assoc / samples,
            "pct_commutative": 100.0 * comm / samples,
            "mean_seconds": seconds / samples,
        })
    return rows


def print_survey(rows):
    print(" n | samples | % latin | % proper | % non-trivial | % assoc | % comm | mean gen (ms)")
    print("---+---------+---------+----------+---------------+---------+--------+--------------")
    for r in rows:
        print(f"{r['order']:>2} | {r['samples']:>7} | {r['pct_latin']:>7.1f} | "
              f"{r['pct_proper']:>8.1f} | {r['pct_non_trivial']:>13.1f} | "
              f"{r['pct_associative']:>7.1f} | {r['pct_commutative']:>6.1f} | {1000 * r['mean_seconds']:>12.3f}")
