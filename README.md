# garbled

Fixed-width unsigned integers in which every operation is computed by
building a boolean circuit of XOR, AND and NOT gates and then evaluating it.

## Contents

- `garbled.circuit`: `Gate`, `GateKind`, `Circuit` and `CircuitError`.
  `Circuit.evaluate(contributor_inputs, evaluator_inputs)` runs a circuit on
  input bits and returns its output bits.
- `garbled.builder`: `CircuitBuilder`. It builds circuits for bitwise logic
  (`xor`, `and_`, `or_`, `not_`, `nand`, `nor`, `xnor`), addition,
  subtraction, multiplication, division and remainder (`add`, `sub`, `mul`,
  `div`, `rem`), comparison (`eq`, `ne`, `lt`, `le`, `gt`, `ge`, `compare`)
  and selection (`mux`). It also has one-shot helpers such as
  `build_and_execute_addition`, `build_and_execute_comparator` (which returns
  -1, 0 or 1) and `build_and_execute_mux`.
- `garbled.bitwise`: `shift_bits_left` and `shift_bits_right`, and the
  `BitwiseOps` mixin. The mixin provides `^`, `&`, `|`, `~`, `<<`, `>>` and
  the `nand`, `nor` and `xnor` methods.
- `garbled.uint`: `GarbledUint`, a fixed-width unsigned integer. It supports
  `+`, `-`, `*`, `//`, `%`, `divmod`, the bitwise and shift operators, and
  comparisons.
- `garbled.framing`: `prepare` and `extract` for messages that start with a
  4-byte little-endian length. Errors raise `FramingError`.

## Installation

```
pip install .
```

## Usage

```python
from garbled.uint import GarbledUint

a = GarbledUint.from_int(170, 8)
b = GarbledUint.from_int(85, 8)

print((a + b).to_int())    # 255
print((a ^ b).to_int())    # 255
print((a - b).to_int())    # 85
print((a << 1).to_int())   # 84
print(a > b)               # True

choice = GarbledUint.mux(GarbledUint.from_bool(True, 1), a, b)
print(choice.to_int())     # 170
```

Bits are stored least significant first, and results wrap modulo
`2 ** width`. How width is handled:

- `from_int` keeps the low `width` bits and rejects negative numbers.
- `zero`, `one` and `from_bool` give a single bit typed as a `width`-bit
  value.
- Arithmetic between values of different widths raises `TypeError`.
- Ordering comparisons between values of different widths raise
  `TypeError`, and `==` between them is `False`.

### Building circuits by hand

```python
from garbled.builder import CircuitBuilder

builder = CircuitBuilder()
x = builder.input([False, True, False, False, False, False, False, False])  # 2
y = builder.input([True, False, True, False, False, False, False, False])   # 5
product = builder.mul(x, y)
circuit = builder.compile(product)
bits = builder.execute(circuit)   # list of bools, least significant first
```

### Framing messages

```python
from garbled.framing import prepare, extract

frame = prepare(b"hello")
length, payload = extract(frame)   # (5, b"hello")
```

`extract` returns the length from the header together with every byte that
follows the header. It does not check that the two agree. It raises
`FramingError` if the frame is shorter than 4 bytes.

## What this package does not do

- Circuits are evaluated in the clear by `Circuit.evaluate`. No garbling,
  oblivious transfer or other cryptographic protocol is carried out.
- There is no network client or server. `garbled.framing` only builds and
  reads frames; sending them is up to the caller.
- There is no signed integer type. `GarbledUint` is the only integer type.
- There is no command-line program.

## Running the tests

```
pip install ".[test]"
pytest
```