"""
Interactive text menu: obtain a Cayley table, then run subquasigroup checks
on it and optionally save the results.
"""

import sys
from math import gcd

import numpy as np

from .closure import SubquasigroupMode, detect_subquasigroups, has_subquasigroups
from .data import affine_quasigroup_table, cyclic_group_table, random_permutation, validate_affine_coefficients
from .generate import sequential_replacement_table
from .quasigroup import Quasigroup
from .tables import format_cayley_table, read_cayley_table, read_cayley_table_interactive, write_results

MAIN_MENU = (
    "Choose an input method:\n"
    "1 - Read from file\n"
    "2 - Enter manually\n"
    "3 - Generate cyclic group\n"
    "4 - Generate affine quasigroup (a * b = (alpha * a + beta * f(b) + c) mod n)\n"
    "5 - Generate with the sequential replacement graph method\n"
    "6 - Exit\n"
)

ACTIONS_MENU = (
    "\nActions:\n"
    "1 - Check for proper subquasigroups\n"
    "2 - Check for non-trivial subquasigroups\n"
    "3 - Both checks\n"
    "4 - Save results to file\n"
    "5 - Back to main menu\n"
    "6 - Exit\n"
)

EXIT = "exit"
BACK = "back"


class Session:
    def __init__(self, input_fn=input, output=None, rng=None):
        self.input_fn = input_fn
        self.out = output if output is not None else sys.stdout
        self.rng = rng if rng is not None else np.random.default_rng()

    def say(self, *args):
        print(*args, file=self.out)

    def ask(self, prompt):
        return self.input_fn(prompt).strip()

    def ask_int(self, prompt):
        return int(self.ask(prompt))

    def ask_until(self, prompt, ok, complaint):
        v = self.ask_int(prompt)
        while not ok(v):
            self.say(complaint)
            v = self.ask_int(prompt)
        return v

    # ---------- table sources ----------
    def affine_table(self):
        n = self.ask_int("Order of the quasigroup: ")
        if n < 1:
            raise ValueError(f"order must be >= 1, got {n}")
        alpha = self.ask_until(
            f"Coefficient alpha (coprime with {n}): ",
            lambda a: _coprime(a, n),
            f"alpha must be coprime with {n}, try again",
        )
        beta = self.ask_until(
            f"Coefficient beta (coprime with {n}): ",
            lambda b: _coprime(b, n),
            f"beta must be coprime with {n}, try again",
        )
        c = self.ask_until(
            f"Constant c (0 <= c < {n}): ",
            lambda v: 0 <= v < n,
            f"c must be in [0, {n - 1}], try again",
        )
        validate_affine_coefficients(n, alpha, beta, c)
        f = random_permutation(n, rng=self.rng)
        self.say("Generated permutation f:", " ".join(str(int(v)) for v in f))
        return affine_quasigroup_table(n, alpha, beta, c, permutation=f)

    def obtain_table(self, choice):
        if choice == 1:
            return read_cayley_table(self.ask("File name: "))
        if choice == 2:
            return read_cayley_table_interactive(self.input_fn, self.out)
        if choice == 3:
            return cyclic_group_table(self.ask_int("Order of the quasigroup: "))
        if choice == 4:
            return self.affine_table()
        if choice == 5:
            return sequential_replacement_table(self.ask_int("Order of the quasigroup: "), rng=self.rng)
        return None

    # ---------- checks on one table ----------
    def actions(self, T):
        q = Quasigroup(T)
        while True:
            try:
                action = self.ask_int(ACTIONS_MENU + "Choice: ")
            except ValueError:
                continue
            if action == 1:
                found = has_subquasigroups(q, SubquasigroupMode.PROPER)
                self.say("Proper subquasigroup found" if found else "No proper subquasigroups")
            elif action == 2:
                found = has_subquasigroups(q, SubquasigroupMode.NON_TRIVIAL)
                self.say("Non-trivial subquasigroup found" if found else "No non-trivial subquasigroups")
            elif action == 3:
                report = detect_subquasigroups(q)
                self.say(f"Proper subquasigroup: {'yes' if report.proper else 'no'}")
                self.say(f"Non-trivial subquasigroup: {'yes' if report.non_trivial else 'no'}")
            elif action == 4:
                path = self.ask("Output file name: ")
                try:
                    write_results(path, T, detect_subquasigroups(q))
                except OSError as e:
                    self.say(f"Error: {e}")
                    continue
                self.say(f"Results saved to {path}")
            elif action == 5:
                return BACK
            elif action == 6:
                return EXIT

    def run(self) -> int:
        while True:
            try:
                choice = self.ask_int(MAIN_MENU + "Choice: ")
            except ValueError:
                continue
            if choice == 6:
                return 0
            try:
                T = self.obtain_table(choice)
            except (ValueError, OSError) as e:
                self.say(f"Error: {e}")
                continue
            if T is None:
                continue
            self.say()
            self.say(format_cayley_table(T))
            if self.actions(T) == EXIT:
                return 0


def _coprime(a, n):
    return gcd(a, n) == 1


def main(input_fn=input, output=None, rng=None) -> int:
    session = Session(input_fn=input_fn, output=output, rng=rng)
    try:
        return session.run()
    except (EOFError, KeyboardInterrupt):
        return 0


if __name__ == "__main__":
    sys.exit(main())
