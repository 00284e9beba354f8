"""Command-line front end for the algokit helpers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from algokit.numbers import (
    ackermann,
    bitwise_summary,
    fahrenheit_to_celsius,
    fibonacci_series,
    is_even,
    is_prime,
)
from algokit.records import Student, read_token_pairs, write_profile
from algokit.searching import binary_search, is_palindrome, linear_search

_SORTED_SAMPLE = (2, 4, 6, 8, 10, 12, 14)
_LINEAR_SAMPLE = (10, 20, 30, 40, 50)


def _run_ackermann(args: argparse.Namespace) -> list[str]:
    return [f"Ackermann({args.m}, {args.n}) = {ackermann(args.m, args.n)}"]


def _run_binary_search(args: argparse.Namespace) -> list[str]:
    index = binary_search(args.items, args.key)
    if index is None:
        return ["Element not found."]
    return [f"Element found at index {index}"]


def _run_bitwise(args: argparse.Namespace) -> list[str]:
    results = bitwise_summary(args.a, args.b)
    return [
        f"a & b (AND): {results['and']}",
        f"a | b (OR): {results['or']}",
        f"a ^ b (XOR): {results['xor']}",
        f"~a (NOT): {results['not']}",
        f"a << 2 (Left Shift): {results['left_shift']}",
        f"a >> 1 (Right Shift): {results['right_shift']}",
    ]


def _run_even_odd(args: argparse.Namespace) -> list[str]:
    kind = "Even" if is_even(args.number) else "Odd"
    return [f"{args.number} is {kind} Number"]


def _run_fibonacci(args: argparse.Namespace) -> list[str]:
    terms = " ".join(str(value) for value in fibonacci_series(args.count))
    return [f"Fibonacci Series: {terms}".rstrip()]


def _run_linear_search(args: argparse.Namespace) -> list[str]:
    index = linear_search(args.items, args.key)
    if index is None:
        return ["Element not found"]
    return [f"Element is found at index {index}"]


def _run_palindrome(args: argparse.Namespace) -> list[str]:
    if is_palindrome(args.text):
        return ["The string is a palindrome."]
    return ["The string is not a palindrome."]


def _run_prime(args: argparse.Namespace) -> list[str]:
    if is_prime(args.number):
        return [f"{args.number} is a Prime number"]
    return [f"{args.number} is not a prime number"]


def _run_temperature(args: argparse.Namespace) -> list[str]:
    return [f"Temp in Celsius is {fahrenheit_to_celsius(args.fahrenheit):f}"]


def _run_students(args: argparse.Namespace) -> list[str]:
    fields = args.fields
    if not fields or len(fields) % 3:
        raise ValueError("students expects name, roll and marks for each student")
    triples = zip(*[iter(fields)] * 3)
    students = [Student.parse(" ".join(triple)) for triple in triples]
    return ["", "Student Details:", *(student.describe() for student in students)]


def _run_profile(args: argparse.Namespace) -> list[str]:
    write_profile(args.path, args.name, args.age)
    lines = ["Data written to file successfully.", "", "Reading data from file:"]
    lines.extend(f"{first} {second}" for first, second in read_token_pairs(args.path))
    return lines


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algokit", description="Run small classic algorithms."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    def command(
        name: str, handler: Callable[[argparse.Namespace], list[str]], help_text: str
    ) -> argparse.ArgumentParser:
        sub = commands.add_parser(name, help=help_text)
        sub.set_defaults(handler=handler)
        return sub

    sub = command("ackermann", _run_ackermann, "evaluate the Ackermann function")
    sub.add_argument("m", type=int, nargs="?", default=2)
    sub.add_argument("n", type=int, nargs="?", default=3)

    sub = command("binary-search", _run_binary_search, "search a sorted list")
    sub.add_argument("key", type=int, nargs="?", default=10)
    sub.add_argument("--items", type=int, nargs="+", default=list(_SORTED_SAMPLE))

    sub = command("bitwise", _run_bitwise, "show bitwise operator results")
    sub.add_argument("a", type=int, nargs="?", default=12)
    sub.add_argument("b", type=int, nargs="?", default=5)

    sub = command("even-odd", _run_even_odd, "tell whether a number is even")
    sub.add_argument("number", type=int)

    sub = command("fibonacci", _run_fibonacci, "print a Fibonacci series")
    sub.add_argument("count", type=int)

    sub = command("linear-search", _run_linear_search, "search a list in order")
    sub.add_argument("key", type=int)
    sub.add_argument("--items", type=int, nargs="+", default=list(_LINEAR_SAMPLE))

    sub = command("palindrome", _run_palindrome, "check a word for a palindrome")
    sub.add_argument("text")

    sub = command("prime", _run_prime, "tell whether a number is prime")
    sub.add_argument("number", type=int)

    sub = command("temperature", _run_temperature, "convert Fahrenheit to Celsius")
    sub.add_argument("fahrenheit", type=float)

    sub = command("students", _run_students, "show student records")
    sub.add_argument("fields", nargs="*", metavar="NAME ROLL MARKS")

    sub = command("profile", _run_profile, "write a profile file and read it back")
    sub.add_argument("name")
    sub.add_argument("age", type=int)
    sub.add_argument("--path", default="data.txt")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named in ``argv`` and return an exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        lines = args.handler(args)
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())