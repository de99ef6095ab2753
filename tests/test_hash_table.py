import pytest

from bitsy import HashTable


def test_set_get_remove():
    table = HashTable()
    table.set("foo", "bar")
    assert table.get("foo") == "bar"
    table.remove("foo")
    assert table.get("foo") is None


def test_remove_on_empty_slot_is_noop():
    table = HashTable()
    table.remove("missing")
    assert table.get("missing") is None


def test_hash_key_is_deterministic_and_bounded():
    table = HashTable()
    for key in ["", "abc", "xyz", "a much longer key than the others", 12345, b"raw"]:
        address = table.hash_key(key)
        assert address == table.hash_key(key)
        assert 0 <= address < table.capacity


def test_hash_key_matches_rolling_hash():
    table = HashTable()
    # "abc": ((97 * 31 + 98) * 31 + 99) = 96354
    assert table.hash_key("abc") == 96354 % 100


def test_colliding_keys_overwrite_each_other():
    table = HashTable()
    target = table.hash_key("foo")
    other = next(
        candidate
        for candidate in (f"key{i}" for i in range(10000))
        if table.hash_key(candidate) == target
    )
    table.set("foo", "first")
    table.set(other, "second")
    assert table.get("foo") == "second"
    assert table.get(other) == "second"


def test_custom_capacity():
    table = HashTable(capacity=1)
    table.set("a", 1)
    table.set("b", 2)
    assert table.get("a") == 2
    with pytest.raises(ValueError):
        HashTable(capacity=0)


def test_equal_keys_share_a_slot():
    table = HashTable()
    table.set(1, "one")
    assert table.get(1.0) == "one"
    assert table.get(True) == "one"
    assert table.hash_key((1, 2)) == table.hash_key((1.0, 2))


def test_none_value_is_refused():
    table = HashTable()
    with pytest.raises(ValueError):
        table.set("foo", None)
    assert table.get("foo") is None
