# tests/unit/domain/test_json_model.py
from __future__ import annotations

from decimal import Decimal

import pytest

from jsonbind.domain.json_model import (
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)


def test_from_python_builds_structurally_equal_trees() -> None:
    data = {"a": [1, 2.5, None, True], "b": {"c": "x"}}
    tree = JsonValue.from_python(data)

    assert tree == JsonObject.of(
        "a",
        JsonArray.of(JsonNumber(1), JsonNumber(2.5), JsonNull.INSTANCE, JsonBoolean.TRUE),
        "b",
        JsonObject.of("c", JsonString("x")),
    )
    assert tree.to_python() == data


def test_object_preserves_key_order_and_looks_up_by_key() -> None:
    obj = JsonObject.of("z", JsonNumber(1), "a", JsonNumber(2))

    assert obj.keys() == ["z", "a"]
    assert list(obj) == ["z", "a"]
    assert obj["a"] == JsonNumber(2)
    assert obj.get("missing") is None
    assert "z" in obj
    assert len(obj) == 2


def test_object_keys_are_case_sensitive_and_unique() -> None:
    obj = JsonObject.of("key", JsonNull.INSTANCE, "Key", JsonNull.INSTANCE)
    assert len(obj) == 2

    with pytest.raises(ValueError, match="duplicate key"):
        JsonObject.of("key", JsonNull.INSTANCE, "key", JsonBoolean.TRUE)


def test_object_of_requires_pairs() -> None:
    with pytest.raises(ValueError):
        JsonObject.of("lonely")


def test_values_never_hold_none() -> None:
    with pytest.raises(TypeError):
        JsonArray((None,))  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        JsonObject((("a", None),))  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        JsonString(None)  # type: ignore[arg-type]


def test_number_rejects_bool_and_non_finite_values() -> None:
    with pytest.raises(TypeError):
        JsonNumber(True)
    with pytest.raises(ValueError):
        JsonNumber(float("nan"))
    with pytest.raises(ValueError):
        JsonNumber(Decimal("Infinity"))


@pytest.mark.parametrize(
    ("value", "integral"),
    [
        (12, True),
        (12.0, True),
        (Decimal("12.000"), True),
        (12.5, False),
        (Decimal("0.1"), False),
        (Decimal("1e100000000"), True),
        (Decimal("1e-100000000"), False),
    ],
)
def test_number_is_integral(value: int | float | Decimal, integral: bool) -> None:
    assert JsonNumber(value).is_integral is integral


def test_render_is_compact_json() -> None:
    tree = JsonValue.from_python({"s": 'say "hi"', "n": [1, Decimal("1.50")], "t": False})
    assert tree.render() == '{"s":"say \\"hi\\"","n":[1,1.50],"t":false}'
    assert str(JsonNull.INSTANCE) == "null"


def test_equality_is_structural() -> None:
    assert JsonArray.of(JsonString("a")) == JsonArray((JsonString("a"),))
    assert JsonBoolean.of(True) is JsonBoolean.TRUE
    assert JsonNull() == JsonNull.INSTANCE
    assert hash(JsonString("a")) == hash(JsonString("a"))


def test_from_python_rejects_unknown_objects() -> None:
    with pytest.raises(TypeError, match="no JSON equivalent"):
        JsonValue.from_python({"when": object()})
