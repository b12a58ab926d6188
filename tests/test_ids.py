import pytest

from candle.ids import UUID


def test_explicit_value_round_trip():
    uid = UUID(42)
    assert uid == 42
    assert int(uid) == 42
    assert hash(uid) == hash(42)


def test_usable_as_dict_key_with_int():
    table = {UUID(7): "seven"}
    assert table[7] == "seven"
    assert table[UUID(7)] == "seven"


def test_random_values_in_range_and_distinct():
    values = {UUID() for _ in range(200)}
    assert len(values) == 200
    assert all(0 <= v < 2**64 for v in values)


def test_max_value_accepted():
    assert UUID(2**64 - 1) == 2**64 - 1


@pytest.mark.parametrize("bad", [-1, 2**64])
def test_out_of_range_rejected(bad):
    with pytest.raises(ValueError):
        UUID(bad)


def test_repr():
    assert repr(UUID(5)) == "UUID(5)"