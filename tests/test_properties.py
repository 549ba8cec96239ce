import pytest

from gfcsprites.properties import Property, PropertyStore


def test_get_missing_returns_none():
    store = PropertyStore()
    assert store.get("missing") is None
    assert "missing" not in store


def test_set_and_get_round_trip():
    store = PropertyStore()
    store.set("speed", 42)
    assert store.get("speed") == 42
    assert "speed" in store


def test_set_replaces_previous_value():
    store = PropertyStore()
    store.set("name", "first")
    store.set("name", "second")
    assert store.get("name") == "second"
    assert len(store) == 1


def test_set_clears_indexed_values():
    store = PropertyStore()
    store.add("walk", "frame")
    store.set("walk", "still")
    assert store.index_count("walk") == 0
    assert store.get("walk") == "still"


def test_add_appends_in_order():
    store = PropertyStore()
    indices = [store.add("walk", name) for name in ("a", "b", "c")]
    assert indices == [0, 1, 2]
    assert [store.get_indexed("walk", i) for i in range(3)] == ["a", "b", "c"]
    assert store.index_count("walk") == 3


def test_get_indexed_out_of_range_returns_none():
    store = PropertyStore()
    store.add("walk", "a")
    assert store.get_indexed("walk", 1) is None
    assert store.get_indexed("walk", -1) is None
    assert store.get_indexed("other", 0) is None


def test_set_indexed_grows_with_gaps():
    store = PropertyStore()
    store.set_indexed("frames", 3, "last")
    assert store.index_count("frames") == 4
    assert store.get_indexed("frames", 3) == "last"
    assert store.get_indexed("frames", 0) is None


def test_set_indexed_overwrites_existing():
    store = PropertyStore()
    store.add("frames", "old")
    store.set_indexed("frames", 0, "new")
    assert store.get_indexed("frames", 0) == "new"
    assert store.index_count("frames") == 1


def test_set_indexed_keeps_unindexed_value():
    store = PropertyStore()
    store.set("frames", "base")
    store.set_indexed("frames", 0, "x")
    assert store.get("frames") == "base"


def test_set_indexed_negative_raises():
    store = PropertyStore()
    with pytest.raises(ValueError):
        store.set_indexed("frames", -1, "x")


def test_index_count_missing_is_zero():
    assert PropertyStore().index_count("nothing") == 0


def test_copy_is_independent():
    store = PropertyStore()
    store.set("data", [1, 2])
    store.add("list", {"k": "v"})
    clone = store.copy()
    store.get("data").append(3)
    store.get_indexed("list", 0)["k"] = "changed"
    store.add("list", "more")
    assert clone.get("data") == [1, 2]
    assert clone.get_indexed("list", 0) == {"k": "v"}
    assert clone.index_count("list") == 1


def test_property_copy_is_deep():
    prop = Property([1], [[2]])
    dup = prop.copy()
    prop.value.append(9)
    prop.indexed[0].append(9)
    assert dup == Property([1], [[2]])


def test_iteration_lists_labels():
    store = PropertyStore()
    store.set("a", 1)
    store.add("b", 2)
    assert sorted(store) == ["a", "b"]