"""
Tests for the sequential replacement graph generator.
"""

import numpy as np
import pytest

from quasigroups import SequentialReplacementGenerator, is_latin_square, sequential_replacement_table


class LowestChoice:
    """Stands in for np.random.Generator: always draws the smallest candidate."""

    def choice(self, seq):
        return seq[0]


# rows 1 and 2 both hit a dead end in the last column; row 2 also exhausts
# the exclusion path once during its repair
LOWEST_5 = [
    [0, 1, 2, 3, 4],
    [3, 2, 4, 1, 0],
    [4, 3, 0, 2, 1],
    [1, 0, 3, 4, 2],
    [2, 4, 1, 0, 3],
]


class TestGeneratedSquares:

    @pytest.mark.parametrize("n", range(1, 14))
    def test_always_latin(self, n):
        rng = np.random.default_rng(n)
        for _ in range(3):
            T = sequential_replacement_table(n, rng=rng)
            assert T.shape == (n, n)
            assert T.dtype == np.int64
            assert is_latin_square(T)

    def test_order_one(self):
        T = sequential_replacement_table(1, rng=np.random.default_rng(0))
        assert T.tolist() == [[0]]

    @pytest.mark.parametrize("order", [0, -3])
    def test_non_positive_order_rejected(self, order):
        with pytest.raises(ValueError, match="order must be >= 1"):
            SequentialReplacementGenerator(order)

    def test_seed_fixes_output(self):
        a = sequential_replacement_table(7, rng=np.random.default_rng(123))
        b = sequential_replacement_table(7, rng=np.random.default_rng(123))
        np.testing.assert_array_equal(a, b)

    def test_exact_output_with_fixed_choices(self):
        T = sequential_replacement_table(5, rng=LowestChoice())
        assert T.tolist() == LOWEST_5

    def test_exact_output_without_conflicts(self):
        T = sequential_replacement_table(4, rng=LowestChoice())
        assert T.tolist() == [[0, 1, 2, 3], [1, 0, 3, 2], [2, 3, 0, 1], [3, 2, 1, 0]]

    def test_row_buffers_are_reused(self):
        seen = []

        class Recording(SequentialReplacementGenerator):
            def _generate_row(self):
                seen.append((id(self._row), id(self._available_in_row), [id(s) for s in self._start_of_row]))
                return super()._generate_row()

        T = Recording(6, rng=np.random.default_rng(4)).generate()
        assert is_latin_square(T)
        assert len(seen) == 6
        assert all(ids == seen[0] for ids in seen)

    def test_generator_is_reusable(self):
        gen = SequentialReplacementGenerator(6, rng=np.random.default_rng(1))
        first = gen.generate()
        second = gen.generate()
        assert is_latin_square(first)
        assert is_latin_square(second)

    def test_squares_vary(self):
        rng = np.random.default_rng(99)
        seen = {sequential_replacement_table(5, rng=rng).tobytes() for _ in range(20)}
        assert len(seen) > 1

    def test_default_rng(self):
        assert is_latin_square(sequential_replacement_table(4))


class TestReplacementRepair:
    """
    Order 4, first row 0 1 2 3, second row started as 1 2 0: the last column
    can only take 0, 1 or 2, all already used in the row.
    """

    START = [{1, 2, 3}, {0, 2, 3}, {0, 1, 3}, {0, 1, 2}]

    def conflict_state(self, seed):
        gen = SequentialReplacementGenerator(4, rng=np.random.default_rng(seed))
        row = [1, 2, 0]
        gen.available_in_column = [set(s) for s in self.START]
        for c, v in enumerate(row):
            gen.available_in_column[c].discard(v)
        available_in_row = {3}
        return gen, row, available_in_row

    def test_graph_skips_empty_columns(self):
        start = [{1}, set(), {0, 1}, {2}]
        graph = SequentialReplacementGenerator._replacement_graph(2, start)
        assert graph == {2: {0, 1}, 0: {1}}

    def test_graph_is_a_snapshot(self):
        start = [set(s) for s in self.START]
        graph = SequentialReplacementGenerator._replacement_graph(3, start)
        graph[0].clear()
        assert start[0] == {1, 2, 3}

    @pytest.mark.parametrize("seed", range(10))
    @pytest.mark.parametrize("evicted", [0, 1, 2])
    def test_repair_frees_the_evicted_element(self, seed, evicted):
        gen, row, available_in_row = self.conflict_state(seed)
        assert not (gen.available_in_column[3] & available_in_row)

        graph = gen._replacement_graph(3, self.START)
        gen._make_available(evicted, graph, row, available_in_row)

        assert len(row) == 3
        assert len(set(row)) == 3
        assert evicted not in row
        assert evicted in available_in_row
        assert evicted in gen.available_in_column[3]
        assert available_in_row == {0, 1, 2, 3} - set(row)
        for c, v in enumerate(row):
            assert v in self.START[c]
            assert gen.available_in_column[c] == self.START[c] - {v}


class TestExhaustedPath:
    """
    Order 5 after rows 0 1 2 3 4 and 3 2 4 1 0, third row started as 1 0 3 2:
    the last column can only take 1, 2 or 3.
    """

    START = [{1, 2, 4}, {0, 3, 4}, {0, 1, 3}, {0, 2, 4}, {1, 2, 3}]

    def test_path_resets_when_every_choice_was_tried(self):
        gen = SequentialReplacementGenerator(5, rng=LowestChoice())
        row = [1, 0, 3, 2]
        gen.available_in_column = [set(s) for s in self.START]
        for c, v in enumerate(row):
            gen.available_in_column[c].discard(v)
        available_in_row = {4}

        graph = gen._replacement_graph(4, self.START)
        gen._make_available(1, graph, row, available_in_row)

        # column 2 is reached with 0 and 3 both on the path; only a cleared
        # path lets it take 0 again
        assert row == [4, 3, 0, 2]
        assert available_in_row == {1}
        for c, v in enumerate(row):
            assert gen.available_in_column[c] == self.START[c] - {v}
