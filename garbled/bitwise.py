"""Bitwise operators for fixed-width garbled values, evaluated as circuits."""

from __future__ import annotations

import operator
from collections.abc import Sequence

from garbled.builder import (
    build_and_execute_and,
    build_and_execute_nand,
    build_and_execute_nor,
    build_and_execute_not,
    build_and_execute_or,
    build_and_execute_xnor,
    build_and_execute_xor,
)


def _shift_amount(shift) -> int:
    amount = operator.index(shift)
    if amount < 0:
        raise ValueError("shift amount must not be negative")
    return amount


def shift_bits_left(bits: Sequence[bool], width: int, shift: int) -> list[bool]:
    """Shift bits (least significant first) towards the top of a ``width``-bit value.

    Each step drops the bit at position ``width - 1`` and feeds a zero in at
    the bottom. The input is left untouched.
    """
    amount = _shift_amount(shift)
    result = [bool(bit) for bit in bits]
    if amount == 0:
        return result
    if width < 1 or len(result) < width:
        raise ValueError(
            f"cannot shift {len(result)} bits as a {width}-bit value"
        )
    steps = min(amount, width)
    return [False] * steps + result[: width - steps] + result[width:]


def shift_bits_right(bits: Sequence[bool], shift: int) -> list[bool]:
    """Shift bits (least significant first) towards the bottom.

    Each step drops the lowest bit and feeds a zero in at the top. The input
    is left untouched.
    """
    amount = _shift_amount(shift)
    result = [bool(bit) for bit in bits]
    if amount == 0:
        return result
    if not result:
        raise ValueError("cannot shift an empty bit sequence")
    steps = min(amount, len(result))
    return result[steps:] + [False] * steps


class BitwiseOps:
    """Mixin giving bitwise operators to values with ``bits`` and ``width``.

    Classes using it hold ``bits`` (least significant first) and ``width``,
    and build new values through ``_with_bits``; by default that calls the
    class with ``(bits, width)``.
    """

    bits: list[bool]
    width: int

    def _with_bits(self, bits: list[bool]):
        return type(self)(bits, self.width)

    def _binary(self, other, operation):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._with_bits(operation(self.bits, other.bits))

    def __xor__(self, other):
        return self._binary(other, build_and_execute_xor)

    def __and__(self, other):
        return self._binary(other, build_and_execute_and)

    def __or__(self, other):
        return self._binary(other, build_and_execute_or)

    def __invert__(self):
        return self._with_bits(build_and_execute_not(self.bits, self.width))

    def __lshift__(self, shift):
        try:
            amount = operator.index(shift)
        except TypeError:
            return NotImplemented
        return self._with_bits(shift_bits_left(self.bits, self.width, amount))

    def __rshift__(self, shift):
        try:
            amount = operator.index(shift)
        except TypeError:
            return NotImplemented
        return self._with_bits(shift_bits_right(self.bits, amount))

    def _checked(self, rhs):
        if not isinstance(rhs, type(self)):
            raise TypeError(
                f"expected {type(self).__name__}, got {type(rhs).__name__}"
            )
        return rhs

    def nand(self, rhs):
        """Bitwise NOT of AND."""
        rhs = self._checked(rhs)
        return self._with_bits(build_and_execute_nand(self.bits, rhs.bits))

    def nor(self, rhs):
        """Bitwise NOT of OR."""
        rhs = self._checked(rhs)
        return self._with_bits(build_and_execute_nor(self.bits, rhs.bits))

    def xnor(self, rhs):
        """Bitwise NOT of XOR."""
        rhs = self._checked(rhs)
        return self._with_bits(build_and_execute_xnor(self.bits, rhs.bits))