from inline_snapshot import snapshot

from wordgrid.neighbors import init_neighbors


def test_neighbors22():
    assert init_neighbors(2, 2) == [[1, 2, 3], [0, 2, 3], [0, 1, 3], [0, 1, 2]]


def test_neighbors23():
    # 0 1 2
    # 3 4 5
    assert init_neighbors(2, 3) == snapshot(
        [
            [1, 3, 4],
            [0, 2, 3, 4, 5],
            [1, 4, 5],
            [0, 1, 4],
            [0, 1, 2, 3, 5],
            [1, 2, 4],
        ]
    )


def test_neighbors_line():
    assert init_neighbors(1, 4) == [[1], [0, 2], [1, 3], [2]]
    assert init_neighbors(4, 1) == [[1], [0, 2], [1, 3], [2]]
    assert init_neighbors(1, 1) == [[]]


def test_neighbors44():
    ns = init_neighbors(4, 4)
    assert len(ns) == 16
    assert [len(n) for n in ns] == snapshot(
        [3, 5, 5, 3, 5, 8, 8, 5, 5, 8, 8, 5, 3, 5, 5, 3]
    )
    assert ns[5] == [0, 1, 2, 4, 6, 8, 9, 10]
    for i, n in enumerate(ns):
        assert i not in n
        for j in n:
            assert i in ns[j]


def test_neighbors_match_king_moves():
    for rows, cols in [(2, 2), (3, 4), (4, 3), (5, 5)]:
        ns = init_neighbors(rows, cols)
        for i, n in enumerate(ns):
            r, c = divmod(i, cols)
            expected = [
                j
                for j in range(rows * cols)
                if j != i and max(abs(j // cols - r), abs(j % cols - c)) == 1
            ]
            assert n == expected
