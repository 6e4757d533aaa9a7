from json_convert.flattener import flatten_into, flatten_record, flatten_records


def test_flatten_nested_object_and_array() -> None:
    assert flatten_record({"a": {"b": 1}, "c": [10, 20]}) == {"a.b": 1, "c.0": 10, "c.1": 20}


def test_flatten_array_of_objects_keeps_index_segment() -> None:
    record = {"items": [{"name": "x", "tags": ["t1"]}, {"name": "y"}]}

    assert flatten_record(record) == {
        "items.0.name": "x",
        "items.0.tags.0": "t1",
        "items.1.name": "y",
    }


def test_flatten_into_writes_under_prefix() -> None:
    out: dict[str, object] = {"existing": True}

    result = flatten_into({"a": None, "b": {"c": False}}, "root", out)

    assert result is None
    assert out == {"existing": True, "root.a": None, "root.b.c": False}


def test_flatten_is_idempotent() -> None:
    flat = flatten_record({"a": {"b": [1, {"c": "d"}]}, "e": "f"})

    assert flatten_record(flat) == flat


def test_flatten_drops_empty_containers() -> None:
    assert flatten_record({"a": {}, "b": [], "c": 1}) == {"c": 1}


def test_flatten_keeps_key_order() -> None:
    flat = flatten_record({"z": 1, "a": {"y": 2, "b": 3}})

    assert list(flat) == ["z", "a.y", "a.b"]


def test_flatten_records_maps_each_record() -> None:
    assert flatten_records([{"a": {"b": 1}}, {"a": {"b": 2}}]) == [{"a.b": 1}, {"a.b": 2}]
