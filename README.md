# scalargrad

A small reverse-mode automatic differentiation engine for scalar values.
Build an expression out of `Numeric` values, call `backward()` on the
result, and read the gradient of every input that asked to keep one.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Using it

```python
from scalargrad.numeric import Numeric
from scalargrad.ops import sub, div, cos, relu

a = Numeric(-3.6, store_grad=True)
b = Numeric(2.312, store_grad=True)
c = Numeric(2, store_grad=True)

loss = relu(div(cos(sub(a, b)), c))
loss.backward()

print(loss)
print(a.grad, b.grad, c.grad)
```

Only values made with `store_grad=True` accumulate a gradient; constants
and results of operations do not. Gradients add up across calls to
`backward()`, so start from fresh values to get gradients of a new pass.

`scalargrad.numeric` also offers `backward(f)`, which does the same as
`f.backward()` and does nothing when `f` is `None`.

### Operations

`scalargrad.ops` provides:

| Function          | Computes       |
|-------------------|----------------|
| `add(x, y)`       | x + y          |
| `sub(x, y)`       | x - y          |
| `mul(x, y)`       | x * y          |
| `div(x, y)`       | x / y          |
| `power(x, y)`     | x ^ y          |
| `inv(x)`          | 1 / x          |
| `exp(x)`          | e ^ x          |
| `log(x)`          | ln x           |
| `absolute(x)`     | \|x\|          |
| `sin(x)`          | sin x          |
| `cos(x)`          | cos x          |
| `relu(x)`         | max(0, x)      |

Each returns a new `Numeric` that remembers its operands and the local
derivative rule from `scalargrad.gradients` (`add_grad`, `mul_grad`,
`pow_grad`, `inv_grad`, `exp_grad`, `log_grad`, `abs_grad`, `sin_grad`,
`cos_grad`, `relu_grad`). Subtraction is built as `x + y * -1` and
division as `x * (1 / y)`. Out-of-range inputs give floating-point
results such as `inf` or `nan` instead of raising: `log(0)` is `-inf`,
`inv(0)` is an infinity.

Passing `None` to an operation, or handing a gradient rule a value that
is not one of the result's operands, raises
`scalargrad.numeric.AutogradError`.

`scalargrad.numeric.format_numeric(n)` renders a value (and its gradient,
when it keeps one) the same way `str(n)` does, and also accepts `None`.

## Command line

```
scalargrad
```

runs the built-in example, `ReLU(cos(a - b) / c)`, and prints the loss
and the gradients of `a`, `b` and `c`.

```
scalargrad --check
```

evaluates `ReLU(cos(a - b) / c) * d - sin(a / c) / e` and prints the loss
and the gradients of `a` to `e` as `name: value` lines, handy for
comparing against another autograd tool.

## What it does not do

It works on single scalars only: there are no vectors, tensors, operator
overloads on `Numeric`, optimisers or training loops.