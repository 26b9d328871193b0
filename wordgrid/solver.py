from typing import Iterable, Sequence

from wordgrid.neighbors import init_neighbors
from wordgrid.trie import LETTER_A, PyTrie

TOP_N = 6


def rank_words(words: Iterable[str], limit: int = TOP_N) -> list[str]:
    """Longest words first, alphabetical within a length."""
    return sorted(words, key=lambda word: (-len(word), word))[:limit]


class GridSolver:
    """Find every dictionary word that can be traced on a rectangular grid.

    A word is traced by stepping between 8-directionally adjacent cells,
    using each cell at most once. The search walks the trie in lock-step
    with the grid, so a path is abandoned as soon as no word starts with it.
    """

    _trie: PyTrie

    def __init__(self, trie: PyTrie, dims: tuple[int, int]):
        self._trie = trie
        self._dims = dims
        rows, cols = dims
        self._n = rows * cols
        self._cells = [0] * self._n
        self._used = [False] * self._n
        self._path: list[str] = []
        self._found: set[str] = set()
        self._neighbors = init_neighbors(rows, cols)
        assert not self._trie.is_word()

    def set_board(self, rows: Sequence[str]):
        num_rows, num_cols = self._dims
        assert len(rows) == num_rows
        for r, row in enumerate(rows):
            assert len(row) == num_cols
            for c, let in enumerate(row):
                assert "A" <= let <= "Z"
                self._cells[num_cols * r + c] = ord(let) - LETTER_A

    def __str__(self):
        _, cols = self._dims
        letters = "".join(chr(LETTER_A + let) for let in self._cells)
        return "\n".join(letters[i : i + cols] for i in range(0, self._n, cols))

    def find_words(self) -> set[str]:
        self._found = set()
        t = self._trie
        for i in range(0, self._n):
            d = t.descend(self._cells[i])
            if d:
                self.do_dfs(i, d)
        return self._found

    def do_dfs(self, i: int, t: PyTrie):
        self._used[i] = True
        self._path.append(chr(LETTER_A + self._cells[i]))
        try:
            if t.is_word():
                self._found.add("".join(self._path))

            for idx in self._neighbors[i]:
                if not self._used[idx]:
                    d = t.descend(self._cells[idx])
                    if d:
                        self.do_dfs(idx, d)
        finally:
            self._path.pop()
            self._used[i] = False

    def solve(self) -> tuple[int, list[str]]:
        words = self.find_words()
        return len(words), rank_words(words)


def solve_grid(trie: PyTrie, rows: Sequence[str]) -> tuple[int, list[str]]:
    if not rows or not rows[0]:
        return 0, []
    solver = GridSolver(trie, (len(rows), len(rows[0])))
    solver.set_board(rows)
    return solver.solve()
