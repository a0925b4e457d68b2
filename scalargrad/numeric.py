"""Scalar values that remember how they were computed and collect gradients."""

from __future__ import annotations

from typing import Callable, Optional

GradFn = Callable[["Numeric", "Numeric"], float]


class AutogradError(RuntimeError):
    """Raised when a value or a computation graph is used incorrectly."""


class Numeric:
    """A scalar node in a computation graph.

    Leaf values are created directly; results of operations keep references
    to their operands and to the function giving the local derivative.
    """

    __slots__ = ("value", "store_grad", "grad", "grad_fn", "op1", "op2")

    def __init__(
        self,
        value: float,
        store_grad: bool = False,
        op1: Optional[Numeric] = None,
        op2: Optional[Numeric] = None,
        grad_fn: Optional[GradFn] = None,
    ) -> None:
        self.value = float(value)
        self.store_grad = store_grad
        self.grad = 0.0
        self.grad_fn = grad_fn
        self.op1 = op1
        self.op2 = op2

    def accumulate_grad(self, grad: float) -> None:
        """Add ``grad`` to the stored gradient if this value keeps one."""
        if self.store_grad:
            self.grad += grad

    def backward(self) -> None:
        """Propagate a unit gradient from this value through its graph."""
        pending = [(self, 1.0)]
        while pending:
            node, upstream = pending.pop()
            node.accumulate_grad(upstream)
            operands = [op for op in (node.op1, node.op2) if op is not None]
            if operands and node.grad_fn is None:
                raise AutogradError("a value with operands needs a grad_fn")
            children = [(op, upstream * node.grad_fn(node, op)) for op in operands]
            pending.extend(reversed(children))

    def __str__(self) -> str:
        text = f"<numeric: ({self.value:f})"
        if self.store_grad:
            text += f"\n    grad: ({self.grad:f})"
        return text + ">"

    def __repr__(self) -> str:
        return f"Numeric({self.value!r}, store_grad={self.store_grad!r})"


def backward(f: Optional[Numeric]) -> None:
    """Run back-propagation from ``f``; does nothing for ``None``."""
    if f is not None:
        f.backward()


def format_numeric(n: Optional[Numeric]) -> str:
    """Describe a value and, if it keeps one, its gradient."""
    if n is None:
        return "<numeric: (NULL)>"
    return str(n)