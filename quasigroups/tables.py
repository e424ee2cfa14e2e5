"""
Flat Cayley-table dumps and terminal rendering.

Dump layout: first line is the order n, then n lines of n space-separated
integers. Anything after the table block (e.g. a results summary) is ignored
when reading.
"""

import sys

import numpy as np


class MalformedTableError(ValueError):
    """The text is not a valid flat dump of an n x n table over 0..n-1."""


def parse_cayley_table(text: str) -> np.ndarray:
    tokens = text.split()
    if not tokens:
        raise MalformedTableError("empty input, expected the table order")
    try:
        n = int(tokens[0])
    except ValueError:
        raise MalformedTableError(f"order must be an integer, got {tokens[0]!r}") from None
    if n < 1:
        raise MalformedTableError(f"order must be >= 1, got {n}")

    cells = tokens[1:1 + n * n]
    if len(cells) < n * n:
        raise MalformedTableError(f"expected {n * n} table entries, found {len(cells)}")
    try:
        values = [int(v) for v in cells]
    except ValueError as e:
        raise MalformedTableError(f"non-integer table entry: {e}") from None

    T = np.array(values, dtype=np.int64).reshape(n, n)
    bad = (T < 0) | (T >= n)
    if bad.any():
        i, j = map(int, np.argwhere(bad)[0])
        raise MalformedTableError(f"entry ({i}, {j}) = {T[i, j]} outside [0, {n - 1}]")
    return T


def read_cayley_table(path) -> np.ndarray:
    with open(path, "r") as f:
        return parse_cayley_table(f.read())


def dump_cayley_table(T) -> str:
    T = np.asarray(T)
    lines = [str(T.shape[0])]
    for row in T:
        lines.append(" ".join(str(int(v)) for v in row))
    return "\n".join(lines) + "\n"


def format_cayley_table(T) -> str:
    T = np.asarray(T)
    n = T.shape[0]
    w = len(str(max(n - 1, 0)))
    lines = [" " * w + " | " + " ".join(f"{j:>{w}}" for j in range(n))]
    lines.append("-" * w + "-+-" + "-" * ((w + 1) * n - 1))
    for i in range(n):
        lines.append(f"{i:>{w}} | " + " ".join(f"{int(v):>{w}}" for v in T[i]))
    return "\n".join(lines)


def format_report(report) -> str:
    def state(flag):
        return "present" if flag else "absent"

    lines = [
        "Check results:",
        f"- Proper subquasigroups: {state(report.proper)}",
        f"- Non-trivial subquasigroups: {state(report.non_trivial)}",
    ]
    if report.both:
        lines.append("The quasigroup contains proper non-trivial subquasigroups.")
    else:
        lines.append("The quasigroup does not contain both proper and non-trivial subquasigroups.")
    return "\n".join(lines) + "\n"


def write_results(path, T, report=None):
    with open(path, "w") as f:
        f.write(dump_cayley_table(T))
        if report is not None:
            f.write("\n")
            f.write(format_report(report))


def read_cayley_table_interactive(input_fn=input, output=None) -> np.ndarray:
    """Prompt for the order and then every cell, re-asking on bad values."""
    out = output if output is not None else sys.stdout

    def ask_int(prompt):
        while True:
            raw = input_fn(prompt)
            try:
                return int(raw.strip())
            except ValueError:
                print(f"Not an integer: {raw!r}", file=out)

    n = ask_int("Order of the quasigroup: ")
    if n < 1:
        raise ValueError(f"order must be >= 1, got {n}")
    print(f"Enter the Cayley table ({n}x{n}):", file=out)
    T = np.empty((n, n), dtype=np.int64)
    for r in range(n):
        for c in range(n):
            v = ask_int(f"({r},{c}): ")
            while not (0 <= v < n):
                print(f"Entries must be in [0, {n - 1}], try again", file=out)
                v = ask_int(f"({r},{c}): ")
            T[r, c] = v
    return T
