import pytest

from pqtypes.int_arrays import Int32Array, Int64Array

CASES = [
    ([], b"{}"),
    ([1], b"{1}"),
    ([1, 0, -3], b"{1,0,-3}"),
    ([-3, 0, 1], b"{-3,0,1}"),
]


@pytest.mark.parametrize("items, encoded", CASES)
def test_value(items, encoded):
    assert Int32Array(items).value() == encoded
    assert Int64Array(items).value() == encoded


@pytest.mark.parametrize("items, encoded", CASES)
def test_scan_bytes(items, encoded):
    result32 = Int32Array.scan(encoded)
    result64 = Int64Array.scan(encoded)
    assert result32 == items
    assert result64 == items
    assert type(result32) is Int32Array
    assert type(result64) is Int64Array


@pytest.mark.parametrize("items, encoded", CASES)
def test_scan_str(items, encoded):
    assert Int32Array.scan(encoded.decode()) == items
    assert Int64Array.scan(encoded.decode()) == items


def test_scan_none():
    assert Int32Array.scan(None) is None
    assert Int64Array.scan(None) is None


def test_empty_round_trip():
    assert Int32Array.scan(Int32Array().value()) == []
    assert Int64Array.scan(Int64Array().value()) == []


@pytest.mark.parametrize("bad", [b"", b"{", b"1,2", b"[1,2]", b"{1,2"])
def test_scan_malformed(bad):
    with pytest.raises(ValueError):
        Int32Array.scan(bad)
    with pytest.raises(ValueError):
        Int64Array.scan(bad)


@pytest.mark.parametrize("bad", [b"{a}", b"{1, 2}", b"{1_0}"])
def test_scan_bad_number(bad):
    with pytest.raises(ValueError):
        Int32Array.scan(bad)
    with pytest.raises(ValueError):
        Int64Array.scan(bad)


def test_scan_wrong_type():
    with pytest.raises(TypeError):
        Int32Array.scan(42)
    with pytest.raises(TypeError):
        Int64Array.scan(42)


def test_scan_skips_empty_elements():
    assert Int32Array.scan(b"{1,,2,}") == [1, 2]
    assert Int64Array.scan(b"{1,,2,}") == [1, 2]


def test_int32_scan_wraps():
    assert Int32Array.scan(b"{2147483648}") == [-2147483648]


def test_int64_scan_out_of_range():
    with pytest.raises(ValueError):
        Int64Array.scan(b"{9223372036854775808}")


def test_int64_scan_limits():
    assert Int64Array.scan(b"{-9223372036854775808,9223372036854775807}") == [
        -(1 << 63),
        (1 << 63) - 1,
    ]


def test_int32_value_overflow():
    with pytest.raises(OverflowError):
        Int32Array([1 << 31]).value()


def test_int64_value_overflow():
    with pytest.raises(OverflowError):
        Int64Array([1 << 63]).value()


@pytest.mark.parametrize(
    "left, right, expected",
    [
        ([1, 0, -3], [-3, 0, 1], True),
        ([1, 0, -3], [1], False),
        ([1, 0, -3], [1, 0, 42], False),
        ([], [], True),
        ([], [1], False),
    ],
)
def test_equal_without_order(left, right, expected):
    assert Int32Array(left).equal_without_order(Int32Array(right)) is expected
    assert Int64Array(left).equal_without_order(Int64Array(right)) is expected