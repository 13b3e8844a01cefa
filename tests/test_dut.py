import pytest

from hlsflow.dut import compute, run_dut, to_uint


def test_compute_zero_and_one():
    assert compute(0) == 0
    assert compute(1) == 7


def test_to_uint_wraps():
    assert to_uint(256, 8) == 0
    assert to_uint(-1, 8) == 255


def test_to_uint_keeps_in_range_values():
    for v in (0, 1, 100, 2047):
        assert to_uint(v, 11) == v


def test_to_uint_rejects_bad_width():
    with pytest.raises(ValueError):
        to_uint(5, 0)


@pytest.mark.parametrize("value", range(0, 256, 17))
def test_compute_is_multiple_of_seven_and_fits(value):
    result = compute(value)
    assert result % 7 == 0
    assert result < 1 << 11
    assert result // 7 == value


@pytest.mark.parametrize("value", [0, 5, 255])
def test_compute_input_truncated_to_eight_bits(value):
    assert compute(value + 256) == compute(value)


def test_run_dut_preserves_order():
    values = [3, 1, 2, 255]
    assert list(run_dut(values)) == [compute(v) for v in values]


def test_run_dut_empty():
    assert list(run_dut([])) == []