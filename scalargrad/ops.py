"""Operations on :class:`Numeric` values that build a computation graph."""

from __future__ import annotations

import math
from typing import Callable, Optional

from .gradients import (
    abs_grad,
    add_grad,
    cos_grad,
    exp_grad,
    inv_grad,
    log_grad,
    mul_grad,
    pow_grad,
    relu_grad,
    sin_grad,
)
from .numeric import AutogradError, Numeric

GradFn = Callable[[Numeric, Numeric], float]

POS_ONE = Numeric(1.0)
NEG_ONE = Numeric(-1.0)


def _require(value: Optional[Numeric], name: str) -> Numeric:
    if value is None:
        raise AutogradError(f"{name} cannot be None")
    return value


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value == math.floor(value) and value % 2 == 1


def _ieee_pow(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        negative = base < 0 and _is_odd_integer(exponent)
        return -math.inf if negative else math.inf
    except ValueError:
        if base == 0 and exponent < 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def _ieee_log(value: float) -> float:
    if value == 0:
        return -math.inf
    if value < 0:
        return math.nan
    return math.log(value)


def _ieee_exp(value: float) -> float:
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def _ieee_trig(fn: Callable[[float], float], value: float) -> float:
    try:
        return fn(value)
    except ValueError:
        return math.nan


def create_result(
    value: float,
    op1: Optional[Numeric],
    op2: Optional[Numeric],
    grad_fn: Optional[GradFn],
) -> Numeric:
    """Build a result node linked to its operands and gradient function."""
    if op1 is None and op2 is None:
        raise AutogradError("op1 and op2 cannot both be None")
    if grad_fn is None:
        raise AutogradError("grad_fn cannot be None")
    return Numeric(value, store_grad=False, op1=op1, op2=op2, grad_fn=grad_fn)


def add(op1: Numeric, op2: Numeric) -> Numeric:
    """Return ``op1 + op2``."""
    op1 = _require(op1, "op1")
    op2 = _require(op2, "op2")
    return create_result(op1.value + op2.value, op1, op2, add_grad)


def sub(op1: Numeric, op2: Numeric) -> Numeric:
    """Return ``op1 - op2``."""
    op1 = _require(op1, "op1")
    op2 = _require(op2, "op2")
    return add(op1, mul(op2, NEG_ONE))


def mul(op1: Numeric, op2: Numeric) -> Numeric:
    """Return ``op1 * op2``."""
    op1 = _require(op1, "op1")
    op2 = _require(op2, "op2")
    return create_result(op1.value * op2.value, op1, op2, mul_grad)


def div(op1: Numeric, op2: Numeric) -> Numeric:
    """Return ``op1 / op2``."""
    return mul(op1, inv(op2))


def power(op1: Numeric, op2: Numeric) -> Numeric:
    """Return ``op1 ** op2``."""
    op1 = _require(op1, "op1")
    op2 = _require(op2, "op2")
    return create_result(_ieee_pow(op1.value, op2.value), op1, op2, pow_grad)


def inv(op1: Numeric) -> Numeric:
    """Return ``1 / op1``."""
    op1 = _require(op1, "op1")
    value = op1.value
    result = math.copysign(math.inf, value) if value == 0 else 1.0 / value
    return create_result(result, op1, None, inv_grad)


def exp(op1: Numeric) -> Numeric:
    """Return ``e ** op1``."""
    op1 = _require(op1, "op1")
    return create_result(_ieee_exp(op1.value), op1, None, exp_grad)


def log(op1: Numeric) -> Numeric:
    """Return the natural logarithm of ``op1``."""
    op1 = _require(op1, "op1")
    return create_result(_ieee_log(op1.value), op1, None, log_grad)


def absolute(op1: Numeric) -> Numeric:
    """Return ``|op1|``."""
    op1 = _require(op1, "op1")
    return create_result(math.fabs(op1.value), op1, None, abs_grad)


def sin(op1: Numeric) -> Numeric:
    """Return ``sin(op1)``."""
    op1 = _require(op1, "op1")
    return create_result(_ieee_trig(math.sin, op1.value), op1, None, sin_grad)


def cos(op1: Numeric) -> Numeric:
    """Return ``cos(op1)``."""
    op1 = _require(op1, "op1")
    return create_result(_ieee_trig(math.cos, op1.value), op1, None, cos_grad)


def relu(op1: Numeric) -> Numeric:
    """Return ``max(0, op1)``."""
    op1 = _require(op1, "op1")
    value = op1.value
    result = value if value > 0 else 0.0
    return create_result(result, op1, None, relu_grad)