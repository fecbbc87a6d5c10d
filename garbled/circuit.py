"""Boolean circuits made of XOR, AND and NOT gates, and their plain evaluation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum


class CircuitError(ValueError):
    """Raised when a circuit is malformed or cannot be evaluated."""


class GateKind(Enum):
    """The kinds of gate a circuit may hold."""

    IN_CONTRIB = "in_contrib"
    IN_EVAL = "in_eval"
    XOR = "xor"
    AND = "and"
    NOT = "not"

    @property
    def arity(self) -> int:
        """Number of wires the gate reads."""
        return _ARITY[self]


_ARITY = {
    GateKind.IN_CONTRIB: 0,
    GateKind.IN_EVAL: 0,
    GateKind.XOR: 2,
    GateKind.AND: 2,
    GateKind.NOT: 1,
}


@dataclass(frozen=True)
class Gate:
    """A single gate; its operands are indices of earlier gates."""

    kind: GateKind
    operands: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "operands", tuple(self.operands))
        if len(self.operands) != self.kind.arity:
            raise CircuitError(
                f"{self.kind.name} gate takes {self.kind.arity} operands, "
                f"got {len(self.operands)}"
            )
        if any(index < 0 for index in self.operands):
            raise CircuitError("gate operands must be non-negative indices")

    @classmethod
    def in_contrib(cls) -> Gate:
        return cls(GateKind.IN_CONTRIB)

    @classmethod
    def in_eval(cls) -> Gate:
        return cls(GateKind.IN_EVAL)

    @classmethod
    def xor(cls, a: int, b: int) -> Gate:
        return cls(GateKind.XOR, (a, b))

    @classmethod
    def and_(cls, a: int, b: int) -> Gate:
        return cls(GateKind.AND, (a, b))

    @classmethod
    def not_(cls, a: int) -> Gate:
        return cls(GateKind.NOT, (a,))

    @property
    def is_input(self) -> bool:
        return self.kind in (GateKind.IN_CONTRIB, GateKind.IN_EVAL)


@dataclass(frozen=True)
class Circuit:
    """An ordered list of gates and the indices of the gates read as output."""

    gates: tuple[Gate, ...]
    outputs: tuple[int, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "gates", tuple(self.gates))
        object.__setattr__(self, "outputs", tuple(self.outputs))
        for position, gate in enumerate(self.gates):
            for operand in gate.operands:
                if operand >= position:
                    raise CircuitError(
                        f"gate {position} reads wire {operand}, "
                        "which is not an earlier gate"
                    )
        for output in self.outputs:
            if not 0 <= output < len(self.gates):
                raise CircuitError(f"output wire {output} does not exist")

    def __len__(self) -> int:
        return len(self.gates)

    @property
    def contributor_input_count(self) -> int:
        return sum(gate.kind is GateKind.IN_CONTRIB for gate in self.gates)

    @property
    def evaluator_input_count(self) -> int:
        return sum(gate.kind is GateKind.IN_EVAL for gate in self.gates)

    @property
    def and_count(self) -> int:
        return sum(gate.kind is GateKind.AND for gate in self.gates)

    def evaluate(
        self,
        contributor_inputs: Iterable[bool],
        evaluator_inputs: Iterable[bool] = (),
    ) -> list[bool]:
        """Evaluate the circuit in the clear and return the output bits."""
        contrib = [bool(bit) for bit in contributor_inputs]
        evaluator = [bool(bit) for bit in evaluator_inputs]
        if len(contrib) != self.contributor_input_count:
            raise CircuitError(
                f"expected {self.contributor_input_count} contributor inputs, "
                f"got {len(contrib)}"
            )
        if len(evaluator) != self.evaluator_input_count:
            raise CircuitError(
                f"expected {self.evaluator_input_count} evaluator inputs, "
                f"got {len(evaluator)}"
            )

        contrib_iter = iter(contrib)
        eval_iter = iter(evaluator)
        wires: list[bool] = []
        for gate in self.gates:
            wires.append(_apply(gate, wires, contrib_iter, eval_iter))
        return [wires[index] for index in self.outputs]


def _apply(gate: Gate, wires: Sequence[bool], contrib, evaluator) -> bool:
    kind = gate.kind
    if kind is GateKind.IN_CONTRIB:
        return next(contrib)
    if kind is GateKind.IN_EVAL:
        return next(evaluator)
    if kind is GateKind.XOR:
        a, b = gate.operands
        return wires[a] != wires[b]
    if kind is GateKind.AND:
        a, b = gate.operands
        return wires[a] and wires[b]
    (a,) = gate.operands
    return not wires[a]