"""Command-line front end to the package's algorithms."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence, TextIO

from algocraft.backtracking.n_queens import MAX_QUEENS, format_board, place_queens
from algocraft.dynamic_programming.kadane import maximum_subarray
from algocraft.dynamic_programming.matrix_chain import format_brackets, optimal_brackets
from algocraft.number_theory.fast_exponentiation import (
    MAX_EXACT_DIGITS,
    digits_required,
    fast_exp,
)
from algocraft.number_theory.sieve import primes_up_to
from algocraft.sorting.bubble_sort import bubble_sort
from algocraft.sorting.common import SortOrder, format_state
from algocraft.sorting.counting_sort import counting_sort
from algocraft.sorting.heap_sort import heap_sort
from algocraft.sorting.insertion_sort import insertion_sort
from algocraft.sorting.merge_sort import merge_sort
from algocraft.sorting.quick_sort import quick_sort
from algocraft.sorting.radix_sort import radix_sort
from algocraft.sorting.selection_sort import selection_sort
from algocraft.sorting.shell_sort import shell_sort
from algocraft.strings.kmp import kmp_search
from algocraft.strings.lcs import longest_common_subsequence

#: Exit status when there is nothing to sort.
EXIT_INPUT_SIZE_IS_ZERO = 2

SORTERS: dict[str, Callable[..., None]] = {
    "bubble": bubble_sort,
    "counting": counting_sort,
    "heap": heap_sort,
    "insertion": insertion_sort,
    "merge": merge_sort,
    "quick": quick_sort,
    "radix": radix_sort,
    "selection": selection_sort,
    "shell": shell_sort,
}


def _run_sort(args: argparse.Namespace, out: TextIO) -> int:
    values = list(args.values)
    if not values:
        print("Nothing to sort here.", file=out)
        return EXIT_INPUT_SIZE_IS_ZERO

    order: SortOrder = args.order
    on_step = (lambda state: print(format_state(state), file=out)) if args.show_state else None
    SORTERS[args.algorithm](values, order, on_step)

    print(f"The values in {order.text} order are:", file=out)
    print(format_state(values), file=out)
    return 0


def _run_queens(args: argparse.Namespace, out: TextIO) -> int:
    size = args.size
    board = place_queens(size)
    if board is None:
        print(
            f"Couldn't find a way to place {size} queens on a {size}x{size} board",
            file=out,
        )
    else:
        print("Found a way!", file=out)
        out.write(format_board(board))
    return 0


def _run_matrix_chain(args: argparse.Namespace, out: TextIO) -> int:
    dims = args.dimensions
    if len(dims) < 3:
        raise ValueError("at least two matrices (three dimensions) are required")
    cost, bracket = optimal_brackets(dims)
    print(f"Optimal cost: {cost}", file=out)
    print("Optimal parenthesization:", file=out)
    print(format_brackets(1, len(dims) - 1, bracket), file=out)
    return 0


def _run_max_subarray(args: argparse.Namespace, out: TextIO) -> int:
    values = args.values
    best = maximum_subarray(values)
    print("The contiguous subarray with the largest sum is:", file=out)
    print(format_state(values[best.start : best.end + 1]), file=out)
    print(f"(from position {best.start + 1} to {best.end + 1})", file=out)
    print(file=out)
    print(f"Sum of its elements is {best.total}", file=out)
    return 0


def _run_power(args: argparse.Namespace, out: TextIO) -> int:
    base, exponent = args.base, args.exponent
    if base == 0 and exponent == 0:
        result = "undefined"
    else:
        result = str(fast_exp(base, exponent))
        if digits_required(base, exponent) > MAX_EXACT_DIGITS:
            result += " (modulo 10^9+7)"
    print(f"{base}^{exponent} = {result}", file=out)
    return 0


def _run_primes(args: argparse.Namespace, out: TextIO) -> int:
    limit = args.limit
    primes = primes_up_to(limit)
    print(f"All prime numbers upto {limit} (inclusive) are:", file=out)
    for prime in primes:
        print(prime, file=out)
    return 0


def _run_kmp(args: argparse.Namespace, out: TextIO) -> int:
    indices = kmp_search(args.pattern, args.text)
    if len(indices) == 1:
        print(f"Pattern found at index {indices[0]}", file=out)
    elif indices:
        print("Pattern found at indices : " + ", ".join(map(str, indices)), file=out)
    else:
        print("Couldn't find the pattern!", file=out)
    return 0


def _run_lcs(args: argparse.Namespace, out: TextIO) -> int:
    lcs = longest_common_subsequence(args.first, args.second)
    print(f"Largest common subsequence (of length {len(lcs)}):", file=out)
    print(lcs, file=out)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser with one sub-command per algorithm."""
    parser = argparse.ArgumentParser(
        prog="algocraft", description="Run classic algorithms from the command line."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    sort = commands.add_parser("sort", help="sort integers")
    sort.add_argument("algorithm", choices=sorted(SORTERS))
    sort.add_argument("values", nargs="*", type=int)
    sort.add_argument(
        "--order",
        type=SortOrder.from_answer,
        default=SortOrder.ASCENDING,
        help="[a]scending (default) or [d]escending",
    )
    sort.add_argument(
        "--show-state",
        action="store_true",
        help="print the values after each step",
    )
    sort.set_defaults(handler=_run_sort)

    queens = commands.add_parser("queens", help="place N non-attacking queens")
    queens.add_argument("size", type=int, help=f"number of queens (max {MAX_QUEENS})")
    queens.set_defaults(handler=_run_queens)

    chain = commands.add_parser("matrix-chain", help="cheapest matrix chain product")
    chain.add_argument(
        "dimensions",
        nargs="+",
        type=int,
        help="row dimensions of the matrices, then the last column dimension",
    )
    chain.set_defaults(handler=_run_matrix_chain)

    subarray = commands.add_parser("max-subarray", help="largest-sum contiguous subarray")
    subarray.add_argument("values", nargs="+", type=int)
    subarray.set_defaults(handler=_run_max_subarray)

    power = commands.add_parser("power", help="fast exponentiation")
    power.add_argument("base", type=int)
    power.add_argument("exponent", type=int)
    power.set_defaults(handler=_run_power)

    primes = commands.add_parser("primes", help="primes up to a limit")
    primes.add_argument("limit", type=int)
    primes.set_defaults(handler=_run_primes)

    kmp = commands.add_parser("kmp", help="find a pattern in a text")
    kmp.add_argument("text")
    kmp.add_argument("pattern")
    kmp.set_defaults(handler=_run_kmp)

    lcs = commands.add_parser("lcs", help="longest common subsequence")
    lcs.add_argument("first")
    lcs.add_argument("second")
    lcs.set_defaults(handler=_run_lcs)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command given by ``argv`` and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.handler(args, sys.stdout)
    except ValueError as exc:
        parser.error(str(exc))
    return 2


if __name__ == "__main__":
    sys.exit(main())