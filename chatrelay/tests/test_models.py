"""Unit tests for the message, option and response value objects."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from chatrelay.base.models import AIResponse, Message, MessageCollection, RequestOptions


@pytest.mark.parametrize("role", ["system", "user", "assistant"])
def test_message_accepts_valid_roles(role):
    msg = Message(role, "hi")
    assert msg.role == role
    assert msg.content == "hi"


@pytest.mark.parametrize("role", ["tool", "bot", "", "USER"])
def test_message_rejects_unknown_roles(role):
    with pytest.raises(ValidationError):
        Message(role, "hi")


def test_message_is_immutable():
    msg = Message.user("hi")
    with pytest.raises(ValidationError):
        msg.content = "changed"  # type: ignore[misc]


def test_message_constructors_and_to_dict():
    assert Message.user("a", name="bob").to_dict() == {"role": "user", "content": "a", "name": "bob"}
    assert Message.assistant("b").to_dict() == {"role": "assistant", "content": "b"}
    assert Message.system("c").to_dict() == {"role": "system", "content": "c"}
    assert Message.from_dict({"role": "user", "content": "d"}) == Message.user("d")


def test_collection_round_trip_preserves_order():
    items = [
        {"role": "system", "content": "Be terse."},
        {"role": "user", "content": "Hi"},
        {"role": "assistant", "content": "Hello"},
        {"role": "user", "content": "Bye"},
    ]
    assert MessageCollection.from_list(items).to_list() == items


def test_collection_fluent_builders_and_container_protocol():
    coll = MessageCollection().system("s").user("u").assistant("a")
    assert len(coll) == 3
    assert [m.role for m in coll] == ["system", "user", "assistant"]
    assert coll[1].content == "u"
    assert [m.content for m in coll[1:]] == ["u", "a"]
    coll[2] = {"role": "assistant", "content": "replaced"}
    assert isinstance(coll[2], Message)
    assert coll[2].content == "replaced"
    del coll[0]
    assert [m.role for m in coll] == ["user", "assistant"]
    assert not coll.is_empty()
    assert MessageCollection().is_empty()


def test_collection_all_returns_a_copy():
    coll = MessageCollection().user("u")
    snapshot = coll.all()
    snapshot.append(Message.system("x"))
    assert len(coll) == 1


def test_collection_rejects_invalid_items():
    with pytest.raises(ValidationError):
        MessageCollection([{"role": "robot", "content": "x"}])
    with pytest.raises(TypeError):
        MessageCollection().add(42)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"temperature": -0.1},
        {"temperature": 2.1},
        {"top_p": 1.5},
        {"top_p": -0.01},
        {"max_tokens": 0},
        {"n": 0},
        {"presence_penalty": 2.5},
        {"frequency_penalty": -2.5},
    ],
)
def test_request_options_reject_out_of_range(kwargs):
    with pytest.raises(ValidationError):
        RequestOptions(**kwargs)


def test_request_options_accept_bounds():
    opts = RequestOptions(temperature=2.0, top_p=0.0, max_tokens=1, n=1, presence_penalty=-2.0, frequency_penalty=2.0)
    assert opts.temperature == 2.0
    assert opts.max_tokens == 1


def test_request_options_presets():
    assert RequestOptions.creative().temperature == 1.2
    assert RequestOptions.deterministic().temperature == 0.0
    assert RequestOptions.balanced().temperature == 0.7
    assert RequestOptions.with_model("gpt-4o").model == "gpt-4o"


def test_request_options_merge_is_right_biased():
    a = RequestOptions(model="a", temperature=0.2, max_tokens=10)
    b = RequestOptions(temperature=0.9, stop=["\n"])
    merged = a.merge(b)
    assert merged.model == "a"
    assert merged.temperature == 0.9
    assert merged.max_tokens == 10
    assert merged.stop == ["\n"]
    # originals untouched
    assert a.temperature == 0.2
    assert a.merge(None) is a


def test_request_options_from_dict_ignores_unknown_keys_and_to_dict_drops_unset():
    opts = RequestOptions.from_dict({"model": "m", "system_prompt": "x", "max_tokens": 5})
    assert opts.to_dict() == {"model": "m", "max_tokens": 5}


def test_request_options_from_dict_validates():
    with pytest.raises(ValidationError):
        RequestOptions.from_dict({"temperature": 3})


def test_ai_response_serialization_excludes_raw():
    resp = AIResponse(content="hi", model="m", usage={"total_tokens": 3}, raw={"secret": "payload"})
    assert str(resp) == "hi"
    assert resp.to_dict() == {"content": "hi", "model": "m", "usage": {"total_tokens": 3}}
    assert json.loads(resp.to_json()) == resp.to_dict()


def test_ai_response_normalized_usage_maps_anthropic_keys():
    resp = AIResponse(content="", usage={"input_tokens": 4, "output_tokens": 6})
    assert resp.normalized_usage() == {"prompt_tokens": 4, "completion_tokens": 6, "total_tokens": 10}


def test_ai_response_normalized_usage_keeps_openai_keys_and_unknowns():
    resp = AIResponse(content="", usage={"prompt_tokens": 1, "completion_tokens": 2, "total_tokens": 5})
    assert resp.normalized_usage() == {"prompt_tokens": 1, "completion_tokens": 2, "total_tokens": 5}
    assert AIResponse(content="").normalized_usage() == {
        "prompt_tokens": None,
        "completion_tokens": None,
        "total_tokens": None,
    }
