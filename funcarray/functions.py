"""Functions of a single real variable: polynomial, power and logarithmic."""

from __future__ import annotations

import math
import warnings
from abc import ABC, abstractmethod
from collections.abc import Iterable


def _fmt(number: float) -> str:
    """Format a number the way a default-precision stream would."""
    return f"{number:g}"


class Function(ABC):
    """A real function of one real variable."""

    @abstractmethod
    def value(self, x: float) -> float:
        """Return the value of the function at ``x``."""

    @abstractmethod
    def describe(self) -> str:
        """Return a human-readable description of the function's state."""

    def __call__(self, x: float) -> float:
        return self.value(x)

    def __str__(self) -> str:
        return self.describe()


class Polynomial(Function):
    """A polynomial c0 + c1*x + c2*x^2 + ..."""

    def __init__(self, coefficients: Iterable[float] | None = None) -> None:
        self._coefficients: tuple[float, ...] = ()
        if coefficients is not None:
            self.set_coefficients(coefficients)

    @property
    def coefficients(self) -> tuple[float, ...]:
        """The coefficients, lowest power first; empty when uninitialized."""
        return self._coefficients

    @property
    def degree(self) -> int:
        """The degree of the polynomial, -1 when uninitialized."""
        return len(self._coefficients) - 1

    def set_coefficients(self, coefficients: Iterable[float]) -> None:
        """Replace the coefficients (lowest power first)."""
        values = tuple(float(c) for c in coefficients)
        if not values:
            raise ValueError("the degree of the polynomial cannot be negative")
        self._coefficients = values

    def reset(self) -> None:
        """Drop all coefficients, leaving an uninitialized polynomial."""
        self._coefficients = ()

    def value(self, x: float) -> float:
        if not self._coefficients:
            raise ValueError("polynomial has no coefficients")
        result = 0.0
        power = 1.0
        for c in self._coefficients:
            result += c * power
            power *= x
        return result

    def describe(self) -> str:
        lines = ["---Polynomial---"]
        if not self._coefficients:
            lines.append("Uninitialized polynomial")
            return "\n".join(lines)
        terms = []
        for i, c in enumerate(self._coefficients):
            if c == 0.0:
                continue
            term = (" +" if c > 0 and i > 0 else " ") + _fmt(c)
            if i > 0:
                term += "x"
                if i > 1:
                    term += f"^{i}"
            terms.append(term)
        lines.append("".join(terms))
        return "\n".join(lines)

    def __add__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        size = max(len(self._coefficients), len(other._coefficients))
        summed = [0.0] * size
        for i, c in enumerate(self._coefficients):
            summed[i] += c
        for i, c in enumerate(other._coefficients):
            summed[i] += c
        return Polynomial(summed)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coefficients == other._coefficients

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Polynomial({list(self._coefficients)!r})"


class Power(Function):
    """A power function k * x^e."""

    def __init__(self, k: float = 0.0, exponent: float = 0.0) -> None:
        self.k = 0.0
        self.exponent = 0.0
        self.set_coefficients(k, exponent)

    def set_coefficients(self, k: float, exponent: float) -> None:
        """Set the constant ``k`` and the exponent."""
        self.k = float(k)
        self.exponent = float(exponent)

    def reset(self) -> None:
        """Set both coefficients back to zero."""
        self.k = 0.0
        self.exponent = 0.0

    def value(self, x: float) -> float:
        return self.k * self._pow(float(x), self.exponent)

    @staticmethod
    def _pow(base: float, exponent: float) -> float:
        odd_integer = exponent.is_integer() and int(exponent) % 2 == 1
        try:
            return math.pow(base, exponent)
        except ValueError:
            if base == 0.0:
                return math.copysign(math.inf, base) if odd_integer else math.inf
            return math.nan
        except OverflowError:
            return -math.inf if base < 0 and odd_integer else math.inf

    def describe(self) -> str:
        return "\n".join(
            [
                "---Power---",
                "",
                f"k coeff = {_fmt(self.k)}",
                f"e coeff = {_fmt(self.exponent)}",
            ]
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Power):
            return NotImplemented
        return self.k == other.k and self.exponent == other.exponent

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Power(k={self.k!r}, exponent={self.exponent!r})"


class Logarithmic(Function):
    """A logarithmic function k * log_b(x)."""

    DEFAULT_BASE = 10.0
    DEFAULT_K = 1.0

    def __init__(self, base: float = DEFAULT_BASE, k: float = DEFAULT_K) -> None:
        self.base = self.DEFAULT_BASE
        self.k = self.DEFAULT_K
        try:
            self.set_coefficients(base, k)
        except ValueError as exc:
            warnings.warn(str(exc), stacklevel=2)
            self.reset()

    def set_coefficients(self, base: float, k: float) -> None:
        """Set the base and the constant ``k``; the base must be positive and not 1."""
        base = float(base)
        if base <= 0 or base == 1:
            raise ValueError("invalid value of base (must be > 0 and != 1)")
        self.base = base
        self.k = float(k)

    def reset(self) -> None:
        """Restore base 10 and k = 1."""
        self.base = self.DEFAULT_BASE
        self.k = self.DEFAULT_K

    def value(self, x: float) -> float:
        if x <= 0:
            warnings.warn("invalid value (<= 0)", stacklevel=2)
            return 0.0
        return self.k * (math.log2(x) / math.log2(self.base))

    def describe(self) -> str:
        return "\n".join(
            [
                "---Logarithmic---",
                "",
                f"k coeff = {_fmt(self.k)}",
                f"b coeff = {_fmt(self.base)}",
            ]
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Logarithmic):
            return NotImplemented
        return self.base == other.base and self.k == other.k

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Logarithmic(base={self.base!r}, k={self.k!r})"