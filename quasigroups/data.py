from math import gcd

import numpy as np

from .generate import sequential_replacement_table


def _check_order(order: int):
    if order < 1:
        raise ValueError(f"order must be >= 1, got {order}")


def cyclic_group_table(order: int) -> np.ndarray:
    """x * y = (x + y) mod n"""
    _check_order(order)
    idx = np.arange(order, dtype=np.int64)
    return (idx[:, None] + idx[None, :]) % order


def random_permutation(order: int, rng: np.random.Generator | None = None) -> np.ndarray:
    _check_order(order)
    rng = rng if rng is not None else np.random.default_rng()
    return rng.permutation(order).astype(np.int64)


def validate_affine_coefficients(order: int, alpha: int, beta: int, c: int):
    _check_order(order)
    if gcd(alpha, order) != 1:
        raise ValueError(f"alpha={alpha} must be coprime with {order}")
    if gcd(beta, order) != 1:
        raise ValueError(f"beta={beta} must be coprime with {order}")
    if not (0 <= c < order):
        raise ValueError(f"c={c} must be in [0, {order - 1}]")


def affine_quasigroup_table(order, alpha, beta, c, permutation=None, rng=None) -> np.ndarray:
    """
    x * y = (alpha*x + beta*f(y) + c) mod n, f a permutation of 0..n-1
    (random when not given).
    """
    validate_affine_coefficients(order, alpha, beta, c)
    if permutation is None:
        f = random_permutation(order, rng=rng)
    else:
        f = np.asarray(permutation, dtype=np.int64)
        if f.shape != (order,) or sorted(f.tolist()) != list(range(order)):
            raise ValueError(f"f must be a permutation of 0..{order - 1}")
    x = np.arange(order, dtype=np.int64)
    return (alpha * x[:, None] + beta * f[None, :] + c) % order


def sequential_replacement_dataset(order: int, num_tables: int, rng=None) -> np.ndarray:
    """(num_tables, n, n) stack of sequential-replacement squares"""
    _check_order(order)
    rng = rng if rng is not None else np.random.default_rng()
    tables = [sequential_replacement_table(order, rng=rng) for _ in range(num_tables)]
    if not tables:
        return np.empty((0, order, order), dtype=np.int64)
    return np.stack(tables)
