import functools


@functools.cache
def init_neighbors(rows: int, cols: int) -> list[list[int]]:
    """Adjacent cells (diagonals included) for each cell of a rows x cols grid.

    Cells are numbered row-major, so cell (r, c) is cols * r + c. Each list
    is in ascending order, which is also row-offset, then column-offset order.
    """
    out = []
    for r in range(rows):
        row_span = range(max(r - 1, 0), min(r + 2, rows))
        for c in range(cols):
            col_span = range(max(c - 1, 0), min(c + 2, cols))
            out.append(
                [cols * nr + nc for nr in row_span for nc in col_span if (nr, nc) != (r, c)]
            )
    return out
