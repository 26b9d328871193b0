"""Standard command-line arguments share across many tools."""

import argparse

from wordgrid.solver import GridSolver
from wordgrid.trie import make_py_trie


def add_standard_args(parser: argparse.ArgumentParser, *, random_seed=False):
    parser.add_argument(
        "--size",
        type=int,
        choices=(22, 23, 33, 34, 44, 45, 55),
        default=44,
        help="Size of the grid: number of rows, then number of columns.",
    )
    parser.add_argument(
        "--dictionary",
        type=str,
        default="words.txt",
        help="Path to dictionary file with one word per line.",
    )

    if random_seed:
        parser.add_argument(
            "--random_seed",
            help="Explicitly set the random seed.",
            type=int,
            default=-1,
        )


def get_dims(args: argparse.Namespace) -> tuple[int, int]:
    return args.size // 10, args.size % 10


def get_trie_from_args(args: argparse.Namespace):
    t = make_py_trie(args.dictionary)
    assert t
    return t


def get_trie_and_solver_from_args(args: argparse.Namespace):
    t = get_trie_from_args(args)
    return t, GridSolver(t, get_dims(args))
