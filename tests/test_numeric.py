import pytest

from scalargrad.numeric import AutogradError, Numeric, backward, format_numeric


def _const(value):
    return lambda output, operand: value


def test_new_value_has_no_operands_and_zero_grad():
    n = Numeric(2.5, store_grad=True)
    assert (n.value, n.grad, n.op1, n.op2, n.grad_fn) == (2.5, 0.0, None, None, None)


def test_accumulate_grad_ignored_without_store():
    n = Numeric(1.0)
    n.accumulate_grad(3.0)
    assert n.grad == 0.0


def test_accumulate_grad_adds_up():
    n = Numeric(1.0, store_grad=True)
    n.accumulate_grad(1.5)
    n.accumulate_grad(1.5)
    assert n.grad == pytest.approx(3.0)


def test_backward_on_leaf_sets_unit_grad():
    n = Numeric(4.0, store_grad=True)
    n.backward()
    assert n.grad == 1.0


def test_backward_multiplies_local_gradients():
    x = Numeric(1.0, store_grad=True)
    mid = Numeric(0.0, store_grad=True, op1=x, grad_fn=_const(3.0))
    top = Numeric(0.0, op1=mid, grad_fn=_const(2.0))
    top.backward()
    assert mid.grad == pytest.approx(2.0)
    assert x.grad == pytest.approx(6.0)


def test_backward_accumulates_on_shared_operand():
    x = Numeric(1.0, store_grad=True)
    top = Numeric(0.0, op1=x, op2=x, grad_fn=_const(1.0))
    top.backward()
    assert x.grad == pytest.approx(2.0)


def test_backward_handles_deep_chains():
    x = Numeric(0.0, store_grad=True)
    node = x
    for _ in range(20000):
        node = Numeric(0.0, op1=node, grad_fn=_const(1.0))
    node.backward()
    assert x.grad == 1.0


def test_backward_without_grad_fn_raises():
    x = Numeric(1.0)
    top = Numeric(0.0, op1=x)
    with pytest.raises(AutogradError):
        top.backward()


def test_module_backward_none_is_noop_and_value_works():
    assert backward(None) is None
    x = Numeric(1.0, store_grad=True)
    backward(x)
    assert x.grad == 1.0


def test_str_without_grad():
    assert str(Numeric(1.5)) == "<numeric: (1.500000)>"


def test_str_with_grad():
    n = Numeric(2.0, store_grad=True)
    assert str(n) == "<numeric: (2.000000)\n    grad: (0.000000)>"


def test_format_numeric_none_and_value():
    assert format_numeric(None) == "<numeric: (NULL)>"
    n = Numeric(-1.0, store_grad=True)
    assert format_numeric(n) == str(n)