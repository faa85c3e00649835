import pytest

from bundle_sim.utils.misc import to_int, to_quantity


@pytest.mark.parametrize(
    "value,expected",
    [("0x5208", 21000), ("0X10", 16), ("0x", 0), ("0x0", 0), (21000, 21000), ("21000", "21000")],
)
def test_to_int(value, expected):
    assert to_int(value) == expected


def test_to_int_not_hex():
    assert to_int("0xzz") == "0xzz"


@pytest.mark.parametrize(
    "value,expected", [(0, "0x0"), (21000, "0x5208"), (10**18, "0xde0b6b3a7640000")]
)
def test_to_quantity(value, expected):
    assert to_quantity(value) == expected
