"""Reverse-mode automatic differentiation on scalar values."""

__version__ = "0.1.0"
__all__ = ["numeric", "gradients", "ops", "cli"]