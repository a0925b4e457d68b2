"""Command line demonstration of forward and backward passes."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .numeric import Numeric, format_numeric
from .ops import cos, div, mul, relu, sin, sub


def run_example() -> str:
    """Evaluate ReLU(cos(a - b) / c), back-propagate and describe the values."""
    a = Numeric(-3.6, store_grad=True)
    b = Numeric(2.312, store_grad=True)
    c = Numeric(2, store_grad=True)

    loss = relu(div(cos(sub(a, b)), c))
    loss.backward()

    return "".join(format_numeric(n) + "\n\n" for n in (loss, a, b, c))


def run_check() -> str:
    """Evaluate a larger expression and report the loss and every gradient."""
    a = Numeric(-3.6, store_grad=True)
    b = Numeric(2.312, store_grad=True)
    c = Numeric(7.95, store_grad=True)
    d = Numeric(-271, store_grad=True)
    e = Numeric(-932.229, store_grad=True)

    right = mul(relu(div(cos(sub(a, b)), c)), d)
    left = div(sin(div(a, c)), e)
    loss = sub(right, left)
    loss.backward()

    rows = [("loss", loss.value)]
    rows += [(f"{name}_grad", n.grad) for name, n in zip("abcde", (a, b, c, d, e))]
    return "".join(f"{label}: {value:f}\n" for label, value in rows)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the example, or with ``--check`` the gradient report."""
    parser = argparse.ArgumentParser(
        prog="scalargrad",
        description="Run a small automatic differentiation example.",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="print the loss and gradients of the larger check expression",
    )
    args = parser.parse_args(argv)
    print(run_check() if args.check else run_example(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())