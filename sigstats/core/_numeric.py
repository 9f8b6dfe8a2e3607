"""
Numeric Resolution
==================

Turns any sample container into a one-dimensional numpy array and resolves
the working precision every estimator reduces in.

Native path:
    numpy dtypes and Python int/float/complex. Integers, booleans and
    float16 are promoted to float64; float32/float64/longdouble keep their
    dtype; complex dtypes reduce in their real component dtype.

Object path:
    mpmath.mpf / mpmath.mpc (binary multiprecision) and decimal.Decimal.
    Samples are held in an object array so numpy reductions dispatch to the
    element type's own arithmetic; transcendental functions go through
    np.frompyfunc wrappers of the element library.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal, getcontext
from typing import Any, Callable, Optional

import mpmath
import numpy as np


@dataclass(frozen=True)
class Arithmetic:
    """Scalar and elementwise operations for one working precision."""
    name: str
    real: Callable[[Any], Any]
    sqrt: Callable[[Any], Any]
    log: Callable[[Any], Any]
    log10: Callable[[Any], Any]
    epsilon: Callable[[], Any]
    dtype: Any

    def nan(self):
        return self.real("nan")

    def inf(self):
        return self.real("inf")

    def divide(self, num, den):
        """num / den with IEEE semantics for every working type."""
        if den == 0:
            if num != num or num == 0:
                return self.nan()
            return self.inf() if num > 0 else -self.inf()
        return self.real(num / den)


def _native(dtype: np.dtype) -> Arithmetic:
    scalar = dtype.type
    eps = np.finfo(dtype).eps
    return Arithmetic(
        name=dtype.name,
        real=scalar,
        sqrt=np.sqrt,
        log=np.log,
        log10=np.log10,
        epsilon=lambda: eps,
        dtype=dtype,
    )


MPMATH = Arithmetic(
    name="mpmath",
    real=mpmath.mpf,
    sqrt=np.frompyfunc(mpmath.sqrt, 1, 1),
    log=np.frompyfunc(mpmath.log, 1, 1),
    log10=np.frompyfunc(mpmath.log10, 1, 1),
    epsilon=lambda: mpmath.mp.eps,
    dtype=np.dtype(object),
)


def _to_decimal(x) -> Decimal:
    if isinstance(x, Decimal):
        return x
    return Decimal(str(x))


DECIMAL = Arithmetic(
    name="decimal",
    real=_to_decimal,
    sqrt=np.frompyfunc(Decimal.sqrt, 1, 1),
    log=np.frompyfunc(Decimal.ln, 1, 1),
    log10=np.frompyfunc(Decimal.log10, 1, 1),
    epsilon=lambda: Decimal(10) ** (1 - getcontext().prec),
    dtype=np.dtype(object),
)


@dataclass(frozen=True)
class Samples:
    """A materialized sample sequence plus its working arithmetic."""
    values: np.ndarray
    arith: Arithmetic
    is_complex: bool

    def __len__(self) -> int:
        return len(self.values)

    @property
    def native(self) -> bool:
        return self.values.dtype != object

    def magnitudes(self) -> np.ndarray:
        """|x_i| in the working precision (always a fresh array)."""
        if self.native:
            return np.abs(self.values).astype(self.arith.dtype, copy=False)
        return _object_array([self.arith.real(abs(v)) for v in self.values])

    def total(self, values: np.ndarray):
        """Sum of a working-precision array, 0 for empty input."""
        if len(values) == 0:
            return self.arith.real(0)
        return self.arith.real(values.sum())

    def mean(self, values: Optional[np.ndarray] = None):
        values = self.values if values is None else values
        return values.sum() / self.arith.real(len(values))


def _object_array(items) -> np.ndarray:
    out = np.empty(len(items), dtype=object)
    out[:] = items
    return out


def _working_dtype(dtype: np.dtype) -> np.dtype:
    if dtype.kind == "c":
        return np.empty(0, dtype=dtype).real.dtype
    if dtype.kind == "f":
        return dtype
    raise TypeError(f"Unsupported sample dtype: {dtype}")


def _resolve_objects(items: list) -> Samples:
    """Pick the arithmetic for a list of Python objects."""
    if any(isinstance(v, (mpmath.mpf, mpmath.mpc)) for v in items):
        is_complex = any(isinstance(v, (mpmath.mpc, complex)) for v in items)
        convert = mpmath.mpc if is_complex else mpmath.mpf
        return Samples(_object_array([convert(v) for v in items]), MPMATH, is_complex)

    if any(isinstance(v, Decimal) for v in items):
        return Samples(_object_array([_to_decimal(v) for v in items]), DECIMAL, False)

    values = np.asarray(items).reshape(-1)
    if values.dtype == object:
        # Python ints too wide for int64, Fractions and the like
        is_complex = any(isinstance(v, complex) for v in items)
        values = values.astype(np.complex128 if is_complex else np.float64)
    return _from_array(values)


def _from_array(values: np.ndarray) -> Samples:
    if values.dtype == object:
        return _resolve_objects(list(values))
    if values.dtype == np.float16 or values.dtype.kind in "biu":
        values = values.astype(np.float64)
    working = _working_dtype(values.dtype)
    return Samples(values, _native(working), values.dtype.kind == "c")


def as_samples(data: Any) -> Samples:
    """
    Materialize samples without touching the caller's container.

    Args:
        data: numpy array, sequence, or single-pass iterable of numbers

    Returns:
        Samples wrapping a one-dimensional array. For numpy input the array
        may be a read-only view of the caller's data; estimators never write
        to it.
    """
    if isinstance(data, np.ndarray):
        return _from_array(data.reshape(-1))

    if not isinstance(data, Iterable):
        raise TypeError(f"Expected a sequence of samples, got {type(data).__name__}")

    items = list(data)
    if not items:
        return Samples(np.empty(0, dtype=np.float64), _native(np.dtype(np.float64)), False)
    return _resolve_objects(items)
