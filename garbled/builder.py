"""Construction of boolean circuits for integer operations, and their execution."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from garbled.circuit import Circuit, CircuitError, Gate

GateIndex = int


def _bits(value) -> list[bool]:
    """Bits of a value given as a sequence of bools or as an object with ``bits``."""
    return [bool(bit) for bit in getattr(value, "bits", value)]


def _pairs(a: Sequence[int], b: Sequence[int]) -> Iterable[tuple[int, int]]:
    if len(b) < len(a):
        raise CircuitError(
            f"right operand has {len(b)} wires, left operand has {len(a)}"
        )
    return zip(a, b)


class CircuitBuilder:
    """Collects contributor inputs and gates, then compiles them into a circuit."""

    def __init__(self) -> None:
        self._inputs: list[bool] = []
        self._gates: list[Gate] = []

    def __len__(self) -> int:
        return len(self._gates)

    @property
    def inputs(self) -> list[bool]:
        """The contributor input bits registered so far."""
        return list(self._inputs)

    @property
    def gates(self) -> tuple[Gate, ...]:
        """The gates added so far."""
        return tuple(self._gates)

    def input(self, bits) -> list[GateIndex]:
        """Register input bits (least significant first) and return their wires."""
        values = _bits(bits)
        offset = len(self._inputs)
        for _ in values:
            self._gates.insert(0, Gate.in_contrib())
        self._inputs.extend(values)
        return list(range(offset, offset + len(values)))

    def _push(self, gate: Gate) -> GateIndex:
        index = len(self._gates)
        self._gates.append(gate)
        return index

    # Single gates and their bitwise forms.

    def push_xor(self, a: GateIndex, b: GateIndex) -> GateIndex:
        return self._push(Gate.xor(a, b))

    def xor(self, a: Sequence[int], b: Sequence[int]) -> list[GateIndex]:
        return [self.push_xor(x, y) for x, y in _pairs(a, b)]

    def push_and(self, a: GateIndex, b: GateIndex) -> GateIndex:
        return self._push(Gate.and_(a, b))

    def and_(self, a: Sequence[int], b: Sequence[int]) -> list[GateIndex]:
        return [self.push_and(x, y) for x, y in _pairs(a, b)]

    def land(self, a: GateIndex, b: GateIndex) -> GateIndex:
        """Logical AND of two single wires."""
        return self.push_and(a, b)

    def push_not(self, a: GateIndex) -> GateIndex:
        return self._push(Gate.not_(a))

    def not_(self, a: Sequence[int]) -> list[GateIndex]:
        return [self.push_not(x) for x in a]

    def push_or(self, a: GateIndex, b: GateIndex) -> GateIndex:
        """OR(a, b) = (a XOR b) XOR (a AND b)."""
        xor_gate = self.push_xor(a, b)
        and_gate = self.push_and(a, b)
        return self.push_xor(xor_gate, and_gate)

    def or_(self, a: Sequence[int], b: Sequence[int]) -> list[GateIndex]:
        return [self.push_or(x, y) for x, y in _pairs(a, b)]

    def lor(self, a: Sequence[int], b: Sequence[int]) -> GateIndex:
        """Bitwise OR of the operands, returning the wire of the lowest bit."""
        return self.or_(a, b)[0]

    def push_nand(self, a: GateIndex, b: GateIndex) -> GateIndex:
        return self.push_not(self.push_and(a, b))

    def nand(self, a: Sequence[int], b: Sequence[int]) -> list[GateIndex]:
        return [self.push_nand(x, y) for x, y in _pairs(a, b)]

    def push_nor(self, a: GateIndex, b: GateIndex) -> GateIndex:
        return self.push_not(self.push_or(a, b))

    def nor(self, a: Sequence[int], b: Sequence[int]) -> list[GateIndex]:
        return [self.push_nor(x, y) for x, y in _pairs(a, b)]

    def push_xnor(self, a: GateIndex, b: GateIndex) -> GateIndex:
        return self.push_not(self.push_xor(a, b))

    def xnor(self, a: Sequence[int], b: Sequence[int]) -> list[GateIndex]:
        return [self.push_xnor(x, y) for x, y in _pairs(a, b)]

    # Selection.

    def mux(self, s: GateIndex, a: Sequence[int], b: Sequence[int]) -> list[GateIndex]:
        """Select ``a`` when the wire ``s`` is set and ``b`` otherwise."""
        return [self.push_mux(s, y, x) for x, y in _pairs(a, b)]

    def mux_lookahead(self, a: Sequence[int]) -> list[GateIndex]:
        """Predict output wires for a multiplexer over ``a`` without adding gates."""
        start = len(self) + 5 + 1
        return [start + position * (6 + 1) for position in range(len(a))]

    def push_mux(self, s: GateIndex, a: GateIndex, b: GateIndex) -> GateIndex:
        """MUX(a, b, s) = (a AND NOT s) OR (b AND s)."""
        not_s = self.push_not(s)
        and_a_not_s = self.push_and(a, not_s)
        and_b_s = self.push_and(b, s)
        return self.push_or(and_a_not_s, and_b_s)

    # Arithmetic.

    def _full_adder(
        self, a: GateIndex, b: GateIndex, carry: GateIndex | None
    ) -> tuple[GateIndex, GateIndex]:
        xor_ab = self.push_xor(a, b)
        total = xor_ab if carry is None else self.push_xor(xor_ab, carry)
        and_ab = self.push_and(a, b)
        if carry is None:
            return total, and_ab
        and_xor_carry = self.push_and(xor_ab, carry)
        return total, self.push_xor(and_ab, and_xor_carry)

    def _full_subtractor(
        self, a: GateIndex, b: GateIndex, borrow: GateIndex | None
    ) -> tuple[GateIndex, GateIndex]:
        xor_ab = self.push_xor(a, b)
        diff = xor_ab if borrow is None else self.push_xor(xor_ab, borrow)
        not_a = self.push_not(a)
        and_not_a_b = self.push_and(not_a, b)
        if borrow is None:
            return diff, and_not_a_b
        and_a_borrow = self.push_and(a, borrow)
        not_b = self.push_not(b)
        and_not_b_borrow = self.push_and(not_b, borrow)
        parts = self.push_xor(and_not_a_b, and_a_borrow)
        return diff, self.push_xor(parts, and_not_b_borrow)

    def add(self, a: Sequence[int], b: Sequence[int]) -> list[GateIndex]:
        """Ripple-carry sum of two equal-width operands, wrapping on overflow."""
        carry = None
        output = []
        for x, y in _pairs(a, b):
            total, carry = self._full_adder(x, y, carry)
            output.append(total)
        return output

    def sub(self, a: Sequence[int], b: Sequence[int]) -> list[GateIndex]:
        """Ripple-borrow difference of two operands, wrapping on underflow."""
        borrow = None
        output = []
        for x, y in _pairs(a, b):
            diff, borrow = self._full_subtractor(x, y, borrow)
            output.append(diff)
        return output

    def _partial_product(
        self, lhs: Sequence[int], rhs: Sequence[int], shift: int
    ) -> list[GateIndex]:
        shifted = []
        for position in range(len(lhs)):
            if position < shift:
                zero_bit = self.push_not(rhs[0])
                shifted.append(self.push_and(rhs[0], zero_bit))
            else:
                shifted.append(self.push_and(lhs[position - shift], rhs[shift]))
        return shifted

    def mul(self, a: Sequence[int], b: Sequence[int]) -> list[GateIndex]:
        """Shift-and-add product, truncated to the operand width."""
        partials = [self._partial_product(a, b, shift) for shift in range(len(a))]
        result = partials[0]
        for partial in partials[1:]:
            result = self.add(result, partial)
        return result

    def _div_inner(
        self, a: Sequence[int], b: Sequence[int]
    ) -> tuple[list[GateIndex], list[GateIndex]]:
        n = len(a)
        quotient: list[GateIndex] = []
        # Wire index 0 stands for the builder's default (unset) wire.
        remainder: list[GateIndex] = [0] * n
        for position in reversed(range(n)):
            remainder.insert(0, a[position])
            del remainder[n:]
            greater_or_equal = self.ge(remainder, b)
            if greater_or_equal != 0:
                new_remainder = self.sub(remainder, b)
                remainder = self.mux(greater_or_equal, new_remainder, remainder)
                quotient.insert(0, greater_or_equal)
            else:
                quotient.insert(0, 0)
            del quotient[n:]
        return quotient, remainder

    def div(self, a: Sequence[int], b: Sequence[int]) -> list[GateIndex]:
        return self._div_inner(a, b)[0]

    def rem(self, a: Sequence[int], b: Sequence[int]) -> list[GateIndex]:
        return self._div_inner(a, b)[1]

    # Comparison.

    def eq(self, a: Sequence[int], b: Sequence[int]) -> GateIndex:
        if not a:
            raise CircuitError("cannot compare empty operands")
        top = len(a) - 1
        equal = self.push_xnor(a[top], b[top])
        for position in reversed(range(top)):
            same = self.push_xnor(a[position], b[position])
            equal = self.push_and(equal, same)
        return equal

    def ne(self, a: Sequence[int], b: Sequence[int]) -> GateIndex:
        return self.push_not(self.eq(a, b))

    def gt(self, a: Sequence[int], b: Sequence[int]) -> GateIndex:
        lt, eq = self.compare(a, b)
        return self.push_not(self.push_or(lt, eq))

    def ge(self, a: Sequence[int], b: Sequence[int]) -> GateIndex:
        return self.push_not(self.lt(a, b))

    def lt(self, a: Sequence[int], b: Sequence[int]) -> GateIndex:
        return self.compare(a, b)[0]

    def le(self, a: Sequence[int], b: Sequence[int]) -> GateIndex:
        return self.push_not(self.gt(a, b))

    def compare(self, a: Sequence[int], b: Sequence[int]) -> tuple[GateIndex, GateIndex]:
        """Wires for ``a < b`` and ``a == b``, scanning from the top bit."""
        if not a:
            raise CircuitError("cannot compare empty operands")
        top = len(a) - 1
        equal = self.push_xnor(a[top], b[top])
        less = self.push_and(self.push_not(a[top]), b[top])
        for position in reversed(range(top)):
            same = self.push_xnor(a[position], b[position])
            next_equal = self.push_and(equal, same)
            not_a = self.push_not(a[position])
            bit_less = self.push_and(not_a, b[position])
            temp_less = self.push_and(equal, bit_less)
            less = self.push_or(less, temp_less)
            equal = next_equal
        return less, equal

    # Compilation and execution.

    def compile(self, outputs: Iterable[int]) -> Circuit:
        return Circuit(tuple(self._gates), tuple(outputs))

    def execute(self, circuit: Circuit) -> list[bool]:
        """Evaluate ``circuit`` on the registered inputs."""
        return circuit.evaluate(self._inputs, ())

    def compile_and_execute(self, outputs: Iterable[int]) -> list[bool]:
        return self.execute(self.compile(outputs))


def _run_binary(
    lhs, rhs, operation: Callable[[CircuitBuilder, Sequence[int], Sequence[int]], list[int]]
) -> list[bool]:
    builder = CircuitBuilder()
    a = builder.input(lhs)
    b = builder.input(rhs)
    return builder.compile_and_execute(operation(builder, a, b))


def build_and_execute_xor(lhs, rhs) -> list[bool]:
    return _run_binary(lhs, rhs, CircuitBuilder.xor)


def build_and_execute_and(lhs, rhs) -> list[bool]:
    return _run_binary(lhs, rhs, CircuitBuilder.and_)


def build_and_execute_or(lhs, rhs) -> list[bool]:
    return _run_binary(lhs, rhs, CircuitBuilder.or_)


def build_and_execute_nand(lhs, rhs) -> list[bool]:
    return _run_binary(lhs, rhs, CircuitBuilder.nand)


def build_and_execute_nor(lhs, rhs) -> list[bool]:
    return _run_binary(lhs, rhs, CircuitBuilder.nor)


def build_and_execute_xnor(lhs, rhs) -> list[bool]:
    return _run_binary(lhs, rhs, CircuitBuilder.xnor)


def build_and_execute_addition(lhs, rhs) -> list[bool]:
    return _run_binary(lhs, rhs, CircuitBuilder.add)


def build_and_execute_subtraction(lhs, rhs) -> list[bool]:
    return _run_binary(lhs, rhs, CircuitBuilder.sub)


def build_and_execute_multiplication(lhs, rhs) -> list[bool]:
    return _run_binary(lhs, rhs, CircuitBuilder.mul)


def build_and_execute_division(lhs, rhs) -> list[bool]:
    return _run_binary(lhs, rhs, CircuitBuilder.div)


def build_and_execute_remainder(lhs, rhs) -> list[bool]:
    return _run_binary(lhs, rhs, CircuitBuilder.rem)


def build_and_execute_equality(lhs, rhs) -> bool:
    builder = CircuitBuilder()
    a = builder.input(lhs)
    b = builder.input(rhs)
    return builder.compile_and_execute([builder.eq(a, b)])[0]


def build_and_execute_comparator(lhs, rhs) -> int:
    """Return -1, 0 or 1 as ``lhs`` is less than, equal to or greater than ``rhs``."""
    builder = CircuitBuilder()
    a = builder.input(lhs)
    b = builder.input(rhs)
    lt, eq = builder.compare(a, b)
    less, equal = builder.compile_and_execute([lt, eq])
    if less:
        return -1
    if equal:
        return 0
    return 1


def build_and_execute_not(value, width: int | None = None) -> list[bool]:
    """Invert the first ``width`` input bits (all of them by default)."""
    builder = CircuitBuilder()
    wires = builder.input(value)
    count = len(wires) if width is None else width
    outputs = [builder.push_not(index) for index in range(count)]
    return builder.compile_and_execute(outputs)


def build_and_execute_mux(condition, if_true, if_false) -> list[bool]:
    """Return ``if_true`` when the first condition bit is set, else ``if_false``."""
    builder = CircuitBuilder()
    a = builder.input(if_true)
    b = builder.input(if_false)
    s = builder.input(condition)
    return builder.compile_and_execute(builder.mux(s[0], a, b))