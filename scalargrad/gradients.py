"""Local derivatives of each operation with respect to one operand."""

from __future__ import annotations

import math
from typing import Callable, Optional

from .numeric import AutogradError, Numeric


def _ieee_div(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _ieee_log(x: float) -> float:
    if math.isnan(x) or x < 0:
        return math.nan
    if x == 0:
        return -math.inf
    return math.log(x)


def _ieee_trig(fn: Callable[[float], float], x: float) -> float:
    if math.isinf(x):
        return math.nan
    return fn(x)


def _check(output: Optional[Numeric], operand: Optional[Numeric]) -> None:
    if operand is None:
        raise AutogradError("operand cannot be None")
    if output is None:
        raise AutogradError("output cannot be None")
    if operand is not output.op1 and operand is not output.op2:
        raise AutogradError("operand of a gradient function must be an operand of output")


def add_grad(output: Numeric, operand: Numeric) -> float:
    """d(a + b)/da = d(a + b)/db = 1."""
    _check(output, operand)
    return 1.0


def mul_grad(output: Numeric, operand: Numeric) -> float:
    """d(a * b)/da = b and d(a * b)/db = a."""
    _check(output, operand)
    if operand is output.op1:
        return output.op2.value
    return output.op1.value


def pow_grad(output: Numeric, operand: Numeric) -> float:
    """d(a ** b)/da = b * a ** (b - 1) and d(a ** b)/db = a ** b * log(a)."""
    _check(output, operand)
    if operand is output.op1:
        return _ieee_div(output.value, output.op1.value) * output.op2.value
    return output.value * _ieee_log(output.op1.value)


def inv_grad(output: Numeric, operand: Numeric) -> float:
    """d(1 / a)/da = -1 / a ** 2."""
    _check(output, operand)
    return -(output.value * output.value)


def exp_grad(output: Numeric, operand: Numeric) -> float:
    """d(e ** a)/da = e ** a."""
    _check(output, operand)
    return output.value


def log_grad(output: Numeric, operand: Numeric) -> float:
    """d(log a)/da = 1 / a."""
    _check(output, operand)
    return _ieee_div(1.0, operand.value)


def abs_grad(output: Numeric, operand: Numeric) -> float:
    """d|a|/da = |a| / a."""
    _check(output, operand)
    return _ieee_div(output.value, operand.value)


def sin_grad(output: Numeric, operand: Numeric) -> float:
    """d(sin a)/da = cos a."""
    _check(output, operand)
    return _ieee_trig(math.cos, operand.value)


def cos_grad(output: Numeric, operand: Numeric) -> float:
    """d(cos a)/da = -sin a."""
    _check(output, operand)
    return -_ieee_trig(math.sin, operand.value)


def relu_grad(output: Numeric, operand: Numeric) -> float:
    """1 where the operand is positive, otherwise 0."""
    _check(output, operand)
    return 1.0 if operand.value > 0 else 0.0