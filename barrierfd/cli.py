"""Command-line entry point that prices the reference up-and-out call."""

import argparse

from .option import UpOutCallOption
from .solvers import ThomasSolver


def main(argv=None) -> int:
    """Print the reference option's setup and its price."""
    parser = argparse.ArgumentParser(
        prog="barrierfd",
        description="Price an up-and-out call option on a finite-difference mesh.",
    )
    parser.parse_args(argv)

    option = UpOutCallOption(100, 125, 0.3, 0.4, -0.2, 0.7, ThomasSolver())
    option.dump_print()
    print(f"Option Price: {option.price():g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())