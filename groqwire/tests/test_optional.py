"""Unit tests for the tri-state ``Opt`` wrapper and its pydantic integration."""
from __future__ import annotations

import copy
import pickle

import pytest

from groqwire.base.options import Opt, OptState, is_unset, unwrap
from groqwire.types.chat import ChatCompletionCreateParams, ResponseFormat


def test_states_and_accessors():
    value = Opt.of(0)
    null = Opt.null()
    absent = Opt.absent()

    assert value.state is OptState.VALUE and value.is_set and value.value == 0  # nosec B101 - asserts are appropriate in unit tests
    assert null.is_null and not null.is_set and null.value is None  # nosec B101 - asserts are appropriate in unit tests
    assert absent.is_absent and absent.get("fallback") == "fallback"  # nosec B101 - asserts are appropriate in unit tests
    assert Opt.of(None).is_set  # nosec B101 - explicit None value is still VALUE


def test_equality_hash_and_immutability():
    assert Opt.of(3) == Opt.of(3)  # nosec B101 - asserts are appropriate in unit tests
    assert Opt.null() != Opt.absent()  # nosec B101 - asserts are appropriate in unit tests
    assert len({Opt.of("a"), Opt.of("a"), Opt.null()}) == 2  # nosec B101 - asserts are appropriate in unit tests
    with pytest.raises(AttributeError):
        Opt.of(1)._value = 2  # type: ignore[misc]


def test_copy_and_pickle_preserve_state():
    original = Opt.of([1, 2])
    assert copy.deepcopy(original) is original  # nosec B101 - immutable wrapper is shared
    restored = pickle.loads(pickle.dumps(Opt.null()))  # nosec B301 - local round trip
    assert restored.is_null  # nosec B101 - asserts are appropriate in unit tests


def test_json_helpers():
    assert Opt.of({"a": 1}).to_json() == '{"a":1}'  # nosec B101 - asserts are appropriate in unit tests
    assert Opt.absent().to_json() == "null"  # nosec B101 - asserts are appropriate in unit tests
    assert Opt.from_json("null").is_null  # nosec B101 - asserts are appropriate in unit tests
    assert Opt.from_json("5") == Opt.of(5)  # nosec B101 - asserts are appropriate in unit tests
    with pytest.raises(ValueError):
        Opt.from_json("{not json")


def test_helpers_unwrap_and_is_unset():
    assert unwrap(Opt.of("x")) == "x"  # nosec B101 - asserts are appropriate in unit tests
    assert unwrap("plain") == "plain"  # nosec B101 - asserts are appropriate in unit tests
    assert is_unset(None) and is_unset(Opt.absent()) and is_unset(Opt.null())  # nosec B101 - asserts are appropriate in unit tests
    assert not is_unset(Opt.of(False))  # nosec B101 - asserts are appropriate in unit tests


def test_request_model_wire_form_distinguishes_null_and_absent():
    params = ChatCompletionCreateParams(
        model="m",
        messages=[{"role": "user", "content": "hi"}],
        temperature=0.5,
        seed=None,
    )
    wire = params.to_wire()

    assert wire["temperature"] == 0.5  # nosec B101 - raw values are wrapped as Opt.of
    assert "seed" in wire and wire["seed"] is None  # nosec B101 - None means explicit null
    assert "top_p" not in wire  # nosec B101 - absent fields are omitted
    assert wire["messages"] == [{"role": "user", "content": "hi"}]  # nosec B101 - asserts are appropriate in unit tests


def test_request_model_keeps_false_and_zero_values():
    params = ChatCompletionCreateParams(model="m", messages=[], stream=False, n=0)
    wire = params.to_wire()
    assert wire["stream"] is False and wire["n"] == 0  # nosec B101 - asserts are appropriate in unit tests


def test_schema_alias_round_trips_to_wire():
    fmt = ResponseFormat.model_validate(
        {"type": "json_schema", "json_schema": {"name": "out", "schema": {"type": "object"}}}
    )
    wire = fmt.to_wire()
    assert wire["json_schema"]["schema"] == {"type": "object"}  # nosec B101 - asserts are appropriate in unit tests
    assert "description" not in wire["json_schema"]  # nosec B101 - asserts are appropriate in unit tests


def test_unknown_request_field_rejected():
    with pytest.raises(ValueError):
        ChatCompletionCreateParams(model="m", messages=[], not_a_field=1)
