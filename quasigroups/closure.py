"""
Subquasigroup detection by closing square-orbit seeds under the operation.

A seed is the orbit x, x*x, (x*x)*(x*x), ... of some element. Every seed is
closed under * (all pairwise products added) until a fixed point, and the
closed set is accepted when it is a proper, non-singleton subset.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .quasigroup import Quasigroup


class SubquasigroupMode(Enum):
    PROPER = "proper"
    NON_TRIVIAL = "non_trivial"


@dataclass(frozen=True)
class ClosurePolicy:
    """
    max_size: abort the closure as soon as it grows past this (None = never).
    reject_singleton_seed: a one-element seed fails without being closed.
    """
    max_size: Optional[int]
    reject_singleton_seed: bool

    @classmethod
    def for_mode(cls, mode: SubquasigroupMode, order: int) -> "ClosurePolicy":
        if mode is SubquasigroupMode.PROPER:
            # a proper Latin subsquare never has more than half the rows
            return cls(max_size=order // 2, reject_singleton_seed=False)
        return cls(max_size=None, reject_singleton_seed=True)

    def accepts(self, size: int, order: int) -> bool:
        return 1 < size < order


@dataclass(frozen=True)
class SubquasigroupReport:
    proper: bool
    non_trivial: bool

    @property
    def both(self) -> bool:
        return self.proper and self.non_trivial


def square_orbits(q: Quasigroup) -> list[list[int]]:
    """Partition the elements into square-walks; each element is walked once."""
    visited = [False] * q.order
    walks = []
    for start in range(q.order):
        if visited[start]:
            continue
        walk, seen = [], set()
        x = start
        while x not in seen:
            seen.add(x)
            walk.append(x)
            visited[x] = True
            x = q.apply(x, x)
        walks.append(walk)
    return walks


def orbit_seeds(q: Quasigroup) -> list[frozenset[int]]:
    """
    Orbits of every element, deduplicated. A walk's tail is the orbit of its
    head up to the point where the walk enters its cycle; past that, every
    head's orbit is the whole cycle.
    """
    seen = set()
    seeds = []
    for walk in square_orbits(q):
        last = walk[-1]
        entry = walk.index(q.apply(last, last))
        for i in range(entry + 1):
            key = frozenset(walk[i:])
            if key in seen:
                continue
            seen.add(key)
            seeds.append(key)
    return seeds


def bounded_closure_from_seed(q: Quasigroup, seed, max_size: Optional[int] = None):
    """
    Expand `seed` under * until closed or size exceeds max_size.
    Returns (G_sorted, closed_ok). If closed_ok=False the closure was abandoned.
    """
    G = set(seed)
    changed = True
    while changed:
        changed = False
        current = sorted(G)
        for x in current:
            for y in current:
                prod = q.apply(x, y)
                if prod in G:
                    continue
                G.add(prod)
                changed = True
                if max_size is not None and len(G) > max_size:
                    return sorted(G), False
    return sorted(G), True


def closure(q: Quasigroup, seed) -> frozenset[int]:
    G, _ = bounded_closure_from_seed(q, seed)
    return frozenset(G)


def _close_with_policy(q: Quasigroup, seed, policy: ClosurePolicy):
    if policy.reject_singleton_seed and len(seed) == 1:
        return None
    G, ok = bounded_closure_from_seed(q, seed, max_size=policy.max_size)
    if ok and policy.accepts(len(G), q.order):
        return G
    return None


def find_subquasigroup(q: Quasigroup, mode: SubquasigroupMode) -> Optional[list[int]]:
    """First closed proper non-singleton set reached from an orbit seed, or None."""
    policy = ClosurePolicy.for_mode(mode, q.order)
    for seed in orbit_seeds(q):
        G = _close_with_policy(q, seed, policy)
        if G is not None:
            return G
    return None


def has_subquasigroups(q: Quasigroup, mode: SubquasigroupMode) -> bool:
    return find_subquasigroup(q, mode) is not None


def detect_subquasigroups(q: Quasigroup) -> SubquasigroupReport:
    return SubquasigroupReport(
        proper=has_subquasigroups(q, SubquasigroupMode.PROPER),
        non_trivial=has_subquasigroups(q, SubquasigroupMode.NON_TRIVIAL),
    )
