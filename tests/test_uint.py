import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from garbled.uint import GarbledUint

U64_MAX = 18446744073709551615
U128_MAX = (1 << 128) - 1


def u(value, width):
    return GarbledUint.from_int(value, width)


# Construction and conversion.


def test_from_int_round_trip_values():
    assert u(170, 8).to_int() == 170
    assert u(12297829382473034410, 64).to_int() == 12297829382473034410


def test_from_int_bit_order_is_least_significant_first():
    assert u(1, 4).bits == [True, False, False, False]


def test_from_int_truncates_to_width():
    assert u(255, 4).to_int() == 15


def test_from_int_rejects_negative():
    with pytest.raises(ValueError):
        GarbledUint.from_int(-1, 8)


def test_zero_and_one():
    assert GarbledUint.zero(8).to_int() == 0
    assert GarbledUint.one(8).to_int() == 1
    assert GarbledUint.zero(8).bits == [False]
    assert GarbledUint.one(8).width == 8


def test_from_bool_and_to_bool():
    assert GarbledUint.from_bool(True, 1).to_bool() is True
    assert GarbledUint.from_bool(False, 1).to_bool() is False


def test_to_bool_of_empty_raises():
    with pytest.raises(ValueError):
        GarbledUint([], 0).to_bool()


def test_str_and_int():
    value = u(42, 8)
    assert str(value) == "42"
    assert int(value) == 42


def test_width_defaults_to_bit_count():
    assert GarbledUint([True, False, True]).width == 3


# Arithmetic carried over from the source tests.


def test_uint16_add_then_sub():
    assert (u(11, 16) + u(2, 16) - u(3, 16)).to_int() == 10


@pytest.mark.parametrize(
    "a, b, width, expected",
    [
        (170, 85, 8, 255),
        (4370, 2184, 16, 6554),
        (2863311530, 1431655765, 32, 4294967295),
        (12297829382473034410, 6148914691236517205, 64, U64_MAX),
        (12297829382473034410, 6148914691236517205, 128, U64_MAX),
    ],
)
def test_uint_add(a, b, width, expected):
    assert (u(a, width) + u(b, width)).to_int() == expected


@pytest.mark.parametrize(
    "a, b, width, expected",
    [
        (170, 85, 8, 255),
        (4370, 2184, 16, 6554),
        (12297829382473034410, 6148914691236517205, 64, U64_MAX),
    ],
)
def test_uint_add_assign(a, b, width, expected):
    value = u(a, width)
    value += u(b, width)
    assert value.to_int() == expected


@pytest.mark.parametrize(
    "a, b, width, expected",
    [
        (170, 100, 8, 70),
        (43707, 21845, 16, 21862),
        (2863311530, 1431655765, 32, 1431655765),
        (12297829382473034410, 6148914691236517205, 64, 6148914691236517205),
        (12297829382473034410, 6148914691236517205, 128, 6148914691236517205),
    ],
)
def test_uint_subtract(a, b, width, expected):
    assert (u(a, width) - u(b, width)).to_int() == expected


def test_uint_sub_assign():
    value = u(170, 8)
    value -= u(100, 8)
    assert value.to_int() == 70


@pytest.mark.parametrize(
    "a, b, width, expected",
    [(3, 2, 8, 6), (7, 5, 8, 35), (300, 7, 16, 2100)],
)
def test_uint_mul(a, b, width, expected):
    assert (u(a, width) * u(b, width)).to_int() == expected


def test_uint_mul_assign():
    value = u(7, 8)
    value *= u(5, 8)
    assert value.to_int() == 35


def test_multiple_additions():
    total = u(170, 32) + u(85, 32) + u(42, 32) + u(21, 32) + u(10, 32)
    assert total.to_int() == 328


@pytest.mark.parametrize(
    "a, b, width, expected", [(6, 2, 8, 3), (300, 7, 16, 42)]
)
def test_uint_div(a, b, width, expected):
    assert (u(a, width) // u(b, width)).to_int() == expected


def test_uint_div_assign():
    value = u(300, 16)
    value //= u(7, 16)
    assert value.to_int() == 42


@pytest.mark.parametrize(
    "a, b, width, expected", [(6, 2, 8, 0), (300, 7, 16, 6)]
)
def test_uint_rem(a, b, width, expected):
    assert (u(a, width) % u(b, width)).to_int() == expected


def test_uint_rem_assign():
    value = u(300, 16)
    value %= u(7, 16)
    assert value.to_int() == 6


def test_divmod():
    quotient, remainder = divmod(u(10, 8), u(3, 8))
    assert (quotient.to_int(), remainder.to_int()) == (3, 1)


def test_mismatched_widths_are_rejected():
    with pytest.raises(TypeError):
        u(1, 8) + u(1, 16)


# Bitwise cases carried over from the source tests.


@pytest.mark.parametrize(
    "a, b, width, expected",
    [
        (170, 85, 8, 255),
        (43690, 21845, 16, 65535),
        (2863311530, 1431655765, 32, 4294967295),
        (12297829382473034410, 6148914691236517205, 64, U64_MAX),
        (170, 85, 128, 255),
    ],
)
def test_uint_xor(a, b, width, expected):
    assert (u(a, width) ^ u(b, width)).to_int() == expected


def test_uint_xor_assign():
    value = u(43690, 16)
    value ^= u(21845, 16)
    assert value.to_int() == 65535


@pytest.mark.parametrize(
    "a, b, width, expected",
    [
        (17, 85, 8, 17),
        (43690, 21845, 16, 0),
        (2863311530, 1431655765, 32, 0),
        (12297829382473034410, 6148914691236517205, 64, 0),
        (170, 85, 128, 0),
    ],
)
def test_uint_and(a, b, width, expected):
    assert (u(a, width) & u(b, width)).to_int() == expected


@pytest.mark.parametrize(
    "a, b, width, expected",
    [
        (170, 85, 8, 255),
        (43707, 21845, 16, 65535),
        (2863311530, 1431655765, 32, 4294967295),
        (12297829382473034410, 6148914691236517205, 64, U64_MAX),
        (170, 85, 128, 255),
    ],
)
def test_uint_or(a, b, width, expected):
    assert (u(a, width) | u(b, width)).to_int() == expected


def test_uint_or_assign():
    value = u(43707, 16)
    value |= u(21845, 16)
    assert value.to_int() == 65535


@pytest.mark.parametrize(
    "a, width, expected",
    [
        (170, 8, 85),
        (43690, 16, 21845),
        (2863311530, 32, 1431655765),
        (12297829382473034410, 64, 6148914691236517205),
        (170, 128, U128_MAX - 170),
    ],
)
def test_uint_not(a, width, expected):
    assert (~u(a, width)).to_int() == expected


@pytest.mark.parametrize("shift, expected", [(1, 2), (2, 4), (3, 8)])
def test_uint_left_shift(shift, expected):
    assert (u(1, 8) << shift).to_int() == expected


@pytest.mark.parametrize("shift, expected", [(2, 4), (3, 8)])
def test_uint_left_shift_four_bits(shift, expected):
    value = GarbledUint([True, False, False, False], 4)
    assert (value << shift).to_int() == expected


def test_uint_left_shift_assign():
    value = GarbledUint([True, False, False, False], 4)
    value <<= 3
    assert value.to_int() == 8


@pytest.mark.parametrize("shift, expected", [(1, 4), (2, 2), (3, 1)])
def test_uint_right_shift(shift, expected):
    value = GarbledUint([False, False, False, True], 4)
    assert (value >> shift).to_int() == expected


def test_uint_right_shift_assign():
    value = GarbledUint([False, False, False, True], 4)
    value >>= 2
    assert value.to_int() == 2


@pytest.mark.parametrize(
    "a, b, width, expected",
    [
        (170, 85, 8, 255),
        (43690, 21845, 16, 65535),
        (2863311530, 1431655765, 32, 4294967295),
        (12297829382473034410, 6148914691236517205, 64, U64_MAX),
        (170, 85, 128, U128_MAX),
    ],
)
def test_uint_nand(a, b, width, expected):
    assert u(a, width).nand(u(b, width)).to_int() == expected


@pytest.mark.parametrize(
    "a, b, width, expected",
    [
        (170, 85, 8, 0),
        (43707, 21845, 16, 0),
        (2863311530, 1431655765, 32, 0),
        (12297829382473034410, 6148914691236517205, 64, 0),
        (170, 85, 128, U128_MAX - 255),
    ],
)
def test_uint_nor(a, b, width, expected):
    assert u(a, width).nor(u(b, width)).to_int() == expected


@pytest.mark.parametrize(
    "a, b, width, expected",
    [
        (170, 85, 8, 0),
        (43690, 21845, 16, 0),
        (2863311530, 1431655765, 32, 0),
        (12297829382473034410, 6148914691236517205, 64, 0),
        (170, 85, 128, U128_MAX - 255),
    ],
)
def test_uint_xnor(a, b, width, expected):
    assert u(a, width).xnor(u(b, width)).to_int() == expected


# Comparison.


def test_equality():
    assert u(42, 8) == u(42, 8)
    assert not (u(123, 8) == u(124, 8))
    assert u(123, 8) != u(124, 8)


def test_equality_with_other_width_is_false():
    assert (u(42, 8) == u(42, 16)) is False


def test_ordering():
    assert u(42, 8) < u(43, 8)
    assert not (u(43, 8) < u(42, 8))
    assert u(43, 8) > u(42, 8)
    assert u(42, 8) <= u(42, 8)
    assert u(42, 8) >= u(42, 8)


def test_sorting():
    values = [u(v, 8) for v in (9, 3, 200, 0, 17)]
    assert [v.to_int() for v in sorted(values)] == [0, 3, 9, 17, 200]


def test_ordering_across_widths_raises():
    with pytest.raises(TypeError):
        u(1, 8) < u(2, 16)


def test_hash_matches_equality():
    assert len({u(5, 8), u(5, 8), u(6, 8)}) == 2


# Multiplexer.


def test_mux_single_bit():
    a = GarbledUint.from_bool(False, 1)
    b = GarbledUint.from_bool(True, 1)
    assert GarbledUint.mux(GarbledUint.from_bool(True, 1), a, b) == a
    assert GarbledUint.mux(GarbledUint.from_bool(False, 1), a, b) == b


def test_mux32():
    a = u(28347823, 32)
    b = u(8932849, 32)
    assert GarbledUint.mux(GarbledUint.from_bool(True, 1), a, b).to_int() == 28347823
    assert GarbledUint.mux(False, a, b).to_int() == 8932849


def test_mux64():
    a = u(23948323290804923, 64)
    b = u(834289823983634323, 64)
    assert GarbledUint.mux(True, a, b).to_int() == 23948323290804923
    assert GarbledUint.mux(False, a, b).to_int() == 834289823983634323


def test_mux_rejects_mismatched_widths():
    with pytest.raises(TypeError):
        GarbledUint.mux(True, u(1, 8), u(1, 16))


# Invariants.

byte = st.integers(min_value=0, max_value=255)


@settings(max_examples=30, deadline=None)
@given(byte)
def test_round_trip(value):
    assert u(value, 8).to_int() == value


@settings(max_examples=30, deadline=None)
@given(byte, byte)
def test_add_then_sub_restores(x, y):
    assert ((u(x, 8) + u(y, 8)) - u(y, 8)).to_int() == x


@settings(max_examples=30, deadline=None)
@given(byte)
def test_double_invert_restores(x):
    assert (~~u(x, 8)).to_int() == x