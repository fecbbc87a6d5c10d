"""Fixed-width unsigned integers whose operations run as boolean circuits."""

from __future__ import annotations

import operator
from dataclasses import dataclass

from garbled.bitwise import BitwiseOps
from garbled.builder import (
    build_and_execute_addition,
    build_and_execute_comparator,
    build_and_execute_division,
    build_and_execute_multiplication,
    build_and_execute_mux,
    build_and_execute_remainder,
    build_and_execute_subtraction,
)


def _check_width(width) -> int:
    value = operator.index(width)
    if value < 0:
        raise ValueError("width must not be negative")
    return value


@dataclass(eq=False)
class GarbledUint(BitwiseOps):
    """An unsigned integer of ``width`` bits, stored least significant bit first.

    Arithmetic, bitwise operators and comparisons are evaluated by building
    and running a circuit over the bits. Results wrap modulo ``2 ** width``.
    """

    bits: list[bool]
    width: int | None = None

    def __post_init__(self) -> None:
        self.bits = [bool(bit) for bit in self.bits]
        self.width = _check_width(len(self.bits) if self.width is None else self.width)

    # Construction and conversion.

    @classmethod
    def zero(cls, width: int) -> GarbledUint:
        """The single-bit value 0 typed as a ``width``-bit integer."""
        return cls([False], width)

    @classmethod
    def one(cls, width: int) -> GarbledUint:
        """The single-bit value 1 typed as a ``width``-bit integer."""
        return cls([True], width)

    @classmethod
    def from_int(cls, value: int, width: int) -> GarbledUint:
        """The low ``width`` bits of a non-negative integer."""
        number = operator.index(value)
        if number < 0:
            raise ValueError("an unsigned value must not be negative")
        size = _check_width(width)
        return cls([bool((number >> position) & 1) for position in range(size)], size)

    @classmethod
    def from_bool(cls, value: bool, width: int) -> GarbledUint:
        """A single bit holding ``value``, typed as a ``width``-bit integer."""
        return cls([bool(value)], width)

    def to_int(self) -> int:
        """The integer the bits encode."""
        return sum(1 << position for position, bit in enumerate(self.bits) if bit)

    def to_bool(self) -> bool:
        """The lowest bit."""
        if not self.bits:
            raise ValueError("an empty value has no bits")
        return self.bits[0]

    def __int__(self) -> int:
        return self.to_int()

    def __str__(self) -> str:
        return str(self.to_int())

    # Arithmetic.

    def _binary(self, other, operation):
        if not isinstance(other, GarbledUint) or other.width != self.width:
            return NotImplemented
        return self._with_bits(operation(self.bits, other.bits))

    def __add__(self, other):
        return self._binary(other, build_and_execute_addition)

    def __sub__(self, other):
        return self._binary(other, build_and_execute_subtraction)

    def __mul__(self, other):
        return self._binary(other, build_and_execute_multiplication)

    def __floordiv__(self, other):
        return self._binary(other, build_and_execute_division)

    def __mod__(self, other):
        return self._binary(other, build_and_execute_remainder)

    def __divmod__(self, other):
        quotient = self.__floordiv__(other)
        if quotient is NotImplemented:
            return NotImplemented
        return quotient, self.__mod__(other)

    # Comparison.

    def _compare(self, other) -> int:
        if not isinstance(other, GarbledUint):
            raise TypeError(
                f"cannot compare GarbledUint with {type(other).__name__}"
            )
        if other.width != self.width:
            raise TypeError(
                f"cannot compare {self.width}-bit and {other.width}-bit values"
            )
        return build_and_execute_comparator(self.bits, other.bits)

    def __eq__(self, other) -> bool:
        if not isinstance(other, GarbledUint):
            return NotImplemented
        if other.width != self.width:
            return False
        return build_and_execute_comparator(self.bits, other.bits) == 0

    def __hash__(self) -> int:
        return hash((self.width, self.to_int()))

    def __lt__(self, other) -> bool:
        return self._compare(other) < 0

    def __le__(self, other) -> bool:
        return self._compare(other) <= 0

    def __gt__(self, other) -> bool:
        return self._compare(other) > 0

    def __ge__(self, other) -> bool:
        return self._compare(other) >= 0

    # Selection.

    @staticmethod
    def mux(condition, if_true: GarbledUint, if_false: GarbledUint) -> GarbledUint:
        """Return ``if_true`` when the condition bit is set, else ``if_false``."""
        if isinstance(condition, bool):
            condition = GarbledUint.from_bool(condition, 1)
        if not isinstance(if_true, GarbledUint) or not isinstance(if_false, GarbledUint):
            raise TypeError("mux operands must be GarbledUint values")
        if if_true.width != if_false.width:
            raise TypeError("mux operands must have the same width")
        bits = build_and_execute_mux(condition, if_true.bits, if_false.bits)
        return type(if_true)(bits, if_true.width)