#!/usr/bin/env python
"""Find all the words on a letter grid and print the longest ones.

    $ python -m wordgrid.find_words srps euim eahw wdzr
"""

import argparse
import sys
import time

from wordgrid.args import add_standard_args, get_dims, get_trie_and_solver_from_args
from wordgrid.solver import TOP_N, rank_words


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Find all the words on a letter grid",
        epilog="Example: %(prog)s srps euim eahw wdzr",
    )
    add_standard_args(parser)
    parser.add_argument(
        "rows", metavar="ROW", nargs="*", help="Letters in each row of the grid."
    )
    parser.add_argument(
        "--print_words",
        action="store_true",
        help="Print all the words that can be found on the grid.",
    )
    args = parser.parse_args(argv)

    num_rows, num_cols = get_dims(args)
    if len(args.rows) != num_rows:
        parser.error(f"expected {num_rows} rows, got {len(args.rows)}")
    for row in args.rows:
        if len(row) != num_cols:
            parser.error(f"each row must be exactly {num_cols} letters long: {row!r}")
        if not (row.isascii() and row.isalpha()):
            parser.error(f"rows may only contain the letters A-Z: {row!r}")
    rows = [row.upper() for row in args.rows]

    start_s = time.time()
    try:
        _, solver = get_trie_and_solver_from_args(args)
    except (OSError, UnicodeDecodeError) as e:
        sys.stderr.write(
            f"Error loading dictionary: {e}. "
            f"Ensure {args.dictionary} exists and is readable.\n"
        )
        return 1
    load_s = time.time()

    solver.set_board(rows)
    words = solver.find_words()
    total, longest = len(words), rank_words(words)
    end_s = time.time()

    print(f"Total words found: {total}")
    print(f"Longest {TOP_N} words: {', '.join(longest)}")
    if args.print_words:
        print("\n".join(sorted(words)))

    sys.stderr.write(
        f"loaded dictionary in {load_s - start_s:.2f}s, "
        f"solved in {end_s - load_s:.4f}s\n"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
