from __future__ import annotations
from fractions import Fraction
from numbers import Integral, Real
from typing import Protocol, Tuple, runtime_checkable
import logging
import math
import numpy as np
from rational_errors import DivisionByZero, InvalidArgument

LOG = logging.getLogger(__name__)

# Default for exp_real(strict=...); when set, negative bases with a
# non-integer exponent are rejected instead of yielding nan.
STRICT_REAL_POWER = False


@runtime_checkable
class RationalLike(Protocol):
	"""Anything exposing integer ``numerator`` and ``denominator`` accessors.

	``RationalNumber``, ``int`` and ``fractions.Fraction`` all qualify.
	"""
	@property
	def numerator(self) -> int: ...
	@property
	def denominator(self) -> int: ...


def _to_float(value: Real) -> float:
	# values past the float range saturate to a signed infinity, as pow overflow does
	try:
		return float(value)
	except OverflowError:
		return math.inf if value > 0 else -math.inf


def _operand(other: object, op: str) -> Tuple[int, int]:
	if other is None:
		LOG.debug("%s called without an operand", op)
		raise InvalidArgument(f"{op}: number cannot be None")
	if not isinstance(other, RationalLike):
		LOG.debug("%s called with non-rational operand %r", op, other)
		raise InvalidArgument(f"{op}: expected a rational number, got {type(other).__name__}")
	n, d = int(other.numerator), int(other.denominator)
	if d == 0:
		LOG.debug("%s called with zero-denominator operand %r", op, other)
		raise InvalidArgument(f"{op}: operand has a zero denominator")
	return n, d


class RationalNumber:
	"""Immutable rational number kept in lowest terms with a positive denominator.

	Zero is stored as 0/1 and the sign always lives in the numerator.

	>>> RationalNumber(4, -6)
	RationalNumber(-2, 3)
	"""
	__slots__ = ("_f",)
	def __init__(self, numerator: int | RationalLike = 0, denominator: int = 1) -> None:
		if not isinstance(denominator, Integral):
			LOG.debug("rejecting denominator %r", denominator)
			raise InvalidArgument(f"denominator must be an integer, got {type(denominator).__name__}")
		if denominator == 0:
			LOG.debug("rejecting zero denominator for numerator %r", numerator)
			raise InvalidArgument("Denominator must not be zero.")
		if isinstance(numerator, Integral):
			num: int | Fraction = int(numerator)
		elif isinstance(numerator, RationalLike):
			num = Fraction(*_operand(numerator, "RationalNumber"))
		else:
			LOG.debug("rejecting numerator %r", numerator)
			raise InvalidArgument(f"numerator must be an integer, got {type(numerator).__name__}")
		# Fraction moves the sign onto the numerator and divides out the gcd
		self._f = Fraction(num, int(denominator))

	@property
	def numerator(self) -> int:
		return self._f.numerator
	@property
	def denominator(self) -> int:
		return self._f.denominator

	def add(self, number: RationalLike) -> RationalNumber:
		c, d = _operand(number, "add")
		a, b = self.numerator, self.denominator
		return RationalNumber(a * d + b * c, b * d)
	def subtract(self, number: RationalLike) -> RationalNumber:
		c, d = _operand(number, "subtract")
		a, b = self.numerator, self.denominator
		return RationalNumber(a * d - b * c, b * d)
	def multiply(self, number: RationalLike) -> RationalNumber:
		c, d = _operand(number, "multiply")
		return RationalNumber(self.numerator * c, self.denominator * d)
	def divide(self, number: RationalLike) -> RationalNumber:
		c, d = _operand(number, "divide")
		if c == 0:
			LOG.debug("divide: %s by zero", self)
			raise DivisionByZero("Number cannot be zero.")
		return RationalNumber(self.numerator * d, self.denominator * c)

	def abs(self) -> RationalNumber:
		return RationalNumber(abs(self.numerator), abs(self.denominator))

	def exp_rational(self, power: int) -> RationalNumber:
		"""Raise this number to an integer power, exactly.

		Any value to the power 0 is 1/1, zero included. A negative power
		inverts the fraction first, so zero cannot take one.
		"""
		if not isinstance(power, Integral):
			LOG.debug("exp_rational: rejecting power %r", power)
			raise InvalidArgument(f"power must be an integer, got {type(power).__name__}")
		power = int(power)
		if power == 0:
			return RationalNumber(1, 1)
		if power < 0:
			if self.is_zero():
				LOG.debug("exp_rational: zero to the power %d", power)
				raise InvalidArgument("Cannot raise zero to a negative power.")
			p = -power
			return RationalNumber(self.denominator ** p, self.numerator ** p)
		return RationalNumber(self.numerator ** power, self.denominator ** power)

	def exp_real(self, base: Real, *, strict: bool | None = None) -> float:
		"""Raise ``base`` to this rational number.

		The power is taken with numpy's IEEE-754 ``pow``, so a negative base
		with a non-integer exponent gives nan and overflow gives inf. Pass
		``strict=True`` (or set ``STRICT_REAL_POWER``) to reject the
		negative-base case instead.
		"""
		if not isinstance(base, Real):
			LOG.debug("exp_real: rejecting base %r", base)
			raise InvalidArgument(f"base must be a real number, got {type(base).__name__}")
		if base == 0 and self.numerator < 0:
			LOG.debug("exp_real: zero to the power %s", self)
			raise InvalidArgument("Cannot raise 0 to a negative rational number.")
		if strict is None:
			strict = STRICT_REAL_POWER
		if strict and base < 0 and not self.is_int():
			LOG.debug("exp_real: negative base %r to the power %s", base, self)
			raise InvalidArgument("Cannot raise a negative number to a non-integer power.")
		with np.errstate(invalid="ignore", over="ignore"):
			result = np.power(np.float64(_to_float(base)), np.float64(_to_float(self._f)))
		return float(result)

	def is_zero(self) -> bool:
		return self.numerator == 0
	def is_int(self) -> bool:
		return self.denominator == 1
	def to_int(self) -> int:
		return self.numerator // self.denominator
	def to_string(self) -> str:
		return f"{self.numerator}/{self.denominator}"

	def __add__(self, other: object) -> RationalNumber:
		if not isinstance(other, RationalLike):
			return NotImplemented
		return self.add(other)
	def __radd__(self, other: object) -> RationalNumber:
		if not isinstance(other, RationalLike):
			return NotImplemented
		return self.add(other)
	def __sub__(self, other: object) -> RationalNumber:
		if not isinstance(other, RationalLike):
			return NotImplemented
		return self.subtract(other)
	def __rsub__(self, other: object) -> RationalNumber:
		if not isinstance(other, RationalLike):
			return NotImplemented
		return RationalNumber(other).subtract(self)
	def __mul__(self, other: object) -> RationalNumber:
		if not isinstance(other, RationalLike):
			return NotImplemented
		return self.multiply(other)
	def __rmul__(self, other: object) -> RationalNumber:
		if not isinstance(other, RationalLike):
			return NotImplemented
		return self.multiply(other)
	def __truediv__(self, other: object) -> RationalNumber:
		if not isinstance(other, RationalLike):
			return NotImplemented
		return self.divide(other)
	def __rtruediv__(self, other: object) -> RationalNumber:
		if not isinstance(other, RationalLike):
			return NotImplemented
		return RationalNumber(other).divide(self)
	def __pow__(self, power: object) -> RationalNumber:
		if not isinstance(power, Integral):
			return NotImplemented
		return self.exp_rational(power)
	def __rpow__(self, base: object) -> float:
		if not isinstance(base, Real):
			return NotImplemented
		return self.exp_real(base)
	def __neg__(self) -> RationalNumber:
		return RationalNumber(-self.numerator, self.denominator)
	def __abs__(self) -> RationalNumber:
		return self.abs()
	def __float__(self) -> float:
		return self.numerator / self.denominator

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, RationalNumber):
			return False
		return self.numerator == other.numerator and self.denominator == other.denominator
	def __hash__(self) -> int:
		# numerator**2 - denominator; CPython reports a hash of -1 as -2 (e.g. 1/2)
		return self.numerator * self.numerator - self.denominator

	def _coerce(self, other: object) -> RationalNumber | None:
		if isinstance(other, RationalNumber):
			return other
		if isinstance(other, RationalLike):
			return RationalNumber(other)
		return None
	def __lt__(self, other: object) -> bool:
		o = self._coerce(other)
		if o is None:
			return NotImplemented
		return self._f < o._f
	def __le__(self, other: object) -> bool:
		o = self._coerce(other)
		if o is None:
			return NotImplemented
		return self._f <= o._f
	def __gt__(self, other: object) -> bool:
		o = self._coerce(other)
		if o is None:
			return NotImplemented
		return self._f > o._f
	def __ge__(self, other: object) -> bool:
		o = self._coerce(other)
		if o is None:
			return NotImplemented
		return self._f >= o._f

	def __str__(self) -> str:
		return self.to_string()
	def __repr__(self) -> str:
		return f"RationalNumber({self.numerator}, {self.denominator})"


def make(numerator: int | RationalLike, denominator: int = 1) -> RationalNumber:
	return RationalNumber(numerator, denominator)


def exp_real(base: Real, exponent: RationalLike, *, strict: bool | None = None) -> float:
	"""Raise a plain int or float to a rational exponent.

	>>> exp_real(4, make(1, 2))
	2.0
	"""
	if not isinstance(exponent, RationalNumber):
		n, d = _operand(exponent, "exp_real")
		exponent = RationalNumber(n, d)
	return exponent.exp_real(base, strict=strict)
