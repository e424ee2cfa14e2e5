"""

quasigroups
===========
A toolkit for generating finite quasigroups as Cayley tables and detecting
their proper and non-trivial subquasigroups.
"""

# core structure
from .quasigroup import Quasigroup, OutOfRangeError

# Latin square + algebraic checks
from .metrics import (
    is_latin_square,
    is_associative,
    is_commutative,
    count_latin_squares,
)

# subquasigroup detection
from .closure import (
    SubquasigroupMode,
    SubquasigroupReport,
    ClosurePolicy,
    square_orbits,
    orbit_seeds,
    bounded_closure_from_seed,
    closure,
    find_subquasigroup,
    has_subquasigroups,
    detect_subquasigroups,
)

# table generation
from .generate import SequentialReplacementGenerator, sequential_replacement_table
from .data import (
    cyclic_group_table,
    random_permutation,
    validate_affine_coefficients,
    affine_quasigroup_table,
    sequential_replacement_dataset,
)

# flat dumps
from .tables import (
    MalformedTableError,
    parse_cayley_table,
    read_cayley_table,
    dump_cayley_table,
    format_cayley_table,
    format_report,
    write_results,
)

__all__ = [
    # quasigroup
    "Quasigroup",
    "OutOfRangeError",
    # metrics
    "is_latin_square",
    "is_associative",
    "is_commutative",
    "count_latin_squares",
    # closure
    "SubquasigroupMode",
    "SubquasigroupReport",
    "ClosurePolicy",
    "square_orbits",
    "orbit_seeds",
    "bounded_closure_from_seed",
    "closure",
    "find_subquasigroup",
    "has_subquasigroups",
    "detect_subquasigroups",
    # generation
    "SequentialReplacementGenerator",
    "sequential_replacement_table",
    "cyclic_group_table",
    "random_permutation",
    "validate_affine_coefficients",
    "affine_quasigroup_table",
    "sequential_replacement_dataset",
    # tables
    "MalformedTableError",
    "parse_cayley_table",
    "read_cayley_table",
    "dump_cayley_table",
    "format_cayley_table",
    "format_report",
    "write_results",
]
