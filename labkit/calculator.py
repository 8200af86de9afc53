"""Interactive command-line calculator."""

from __future__ import annotations

import argparse
import sys

from labkit.evaluator import evaluate

_WHITESPACE = " \t\n\r\f\v"


def trim(text: str) -> str:
    """Return ``text`` without leading and trailing ASCII whitespace."""
    return text.strip(_WHITESPACE)


def main(argv: list[str] | None = None) -> int:
    """Read one expression from standard input and print its value."""
    argparse.ArgumentParser(
        prog="calculator",
        description="Evaluate an arithmetic expression read from standard input.",
    ).parse_args(argv)

    print("Welcome to CLI Calculator!")
    print("Enter an expression: ", end="", flush=True)
    line = sys.stdin.readline()
    if line.endswith("\n"):
        line = line[:-1]

    print(f"You entered: {line}")
    line = trim(line)
    print(f"Trimmed input: {line}")

    try:
        result = evaluate(line)
    except (ValueError, ZeroDivisionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Result: {result:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())