#!/usr/bin/env python
"""I/O-free performance test.

    $ python -m wordgrid.perf --size 44 --dictionary words.txt 10000 --random_seed 808813
"""

import argparse
import random
import time

from tqdm import tqdm

from wordgrid.args import add_standard_args, get_dims, get_trie_and_solver_from_args
from wordgrid.trie import LETTER_A


def random_board(dims: tuple[int, int]) -> list[str]:
    rows, cols = dims
    return [
        "".join(chr(LETTER_A + random.randint(0, 25)) for _ in range(cols))
        for _ in range(rows)
    ]


def split_board(board: str, dims: tuple[int, int]) -> list[str]:
    rows, cols = dims
    assert len(board) == rows * cols
    board = board.upper()
    return [board[i : i + cols] for i in range(0, rows * cols, cols)]


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="Grid solver perf test",
        description="Measure the speed of grid solving, free from I/O.",
    )
    add_standard_args(parser, random_seed=True)
    parser.add_argument(
        "--input_file",
        type=str,
        help="Use this file instead of generating random boards.",
    )
    parser.add_argument(
        "num_boards",
        type=int,
        help="Number of boards to solve",
        default=10_000,
        nargs="?",
    )
    args = parser.parse_args(argv)
    if args.random_seed >= 0:
        random.seed(args.random_seed)

    dims = get_dims(args)
    _, solver = get_trie_and_solver_from_args(args)

    if args.input_file:
        with open(args.input_file) as f:
            boards = [split_board(line.strip(), dims) for line in f if line.strip()]
        print(f"Read {len(boards)} boards from {args.input_file}")
    else:
        print(f"Generating {args.num_boards} {dims[0]}x{dims[1]} boards...")
        boards = [random_board(dims) for _ in range(args.num_boards)]

    if not boards:
        print("No boards to solve.")
        return

    total_words = 0
    print("Solving boards...")
    start_s = time.time()
    for board in tqdm(boards, smoothing=0):
        solver.set_board(board)
        total, _ = solver.solve()
        total_words += total
    end_s = time.time()

    elapsed_s = end_s - start_s
    pace = len(boards) / max(elapsed_s, 1e-9)

    print(f"{total_words=}")
    print(f"{elapsed_s:.02f}s, {pace:.02f} bds/sec")


if __name__ == "__main__":
    main()
