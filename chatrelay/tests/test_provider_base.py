"""Contract tests for BaseProvider: normalization, defaults, wrapping and logging."""

from __future__ import annotations

import json
import logging

import pytest
from pydantic import ValidationError

from chatrelay.base.errors import ErrorCode, ProviderError
from chatrelay.base.interfaces import AIProvider
from chatrelay.base.models import Message, MessageCollection, RequestOptions
from chatrelay.tests.conftest import EchoProvider, LocalEchoProvider


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.events: list[dict] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.events.append(json.loads(record.getMessage()))


@pytest.fixture()
def events():
    logger = logging.getLogger("chatrelay.echo")
    handler = _ListHandler()
    logger.addHandler(handler)
    yield handler.events
    logger.removeHandler(handler)


def test_satisfies_protocol():
    assert isinstance(EchoProvider({"api_key": "k"}), AIProvider)


def test_config_is_copied_on_construction():
    cfg = {"api_key": "k", "model": "m1"}
    provider = EchoProvider(cfg)
    cfg["model"] = "m2"
    cfg["api_key"] = ""
    assert provider.model == "m1"
    assert provider.validate_config() is True


def test_defaults_from_config_and_fallbacks():
    provider = EchoProvider({"temperature": 0, "max_tokens": "12"})
    assert provider.model == "echo-1"
    assert provider.temperature == 0.0
    assert provider.max_tokens == 12
    assert provider.provider_name == "echo"
    assert provider.get_available_models() == ["echo-1"]


def test_validate_config_depends_on_credential():
    assert EchoProvider({}).validate_config() is False
    assert EchoProvider({"api_key": "x"}).validate_config() is True
    assert LocalEchoProvider({}).validate_config() is True


def test_fluent_setters_return_self_and_apply():
    provider = EchoProvider({"api_key": "k"})
    assert provider.set_model("m").set_temperature(1.5).set_max_tokens(42) is provider
    provider.send_message([{"role": "user", "content": "hi"}])
    request = provider.calls[-1]["request"]
    assert (request.model, request.temperature, request.max_tokens) == ("m", 1.5, 42)


def test_per_call_options_override_instance_defaults():
    provider = EchoProvider({"api_key": "k", "model": "base", "temperature": 0.3})
    provider.send_message(MessageCollection().user("hi"), {"model": "other", "max_tokens": 7, "top_p": 0.5})
    request = provider.calls[-1]["request"]
    assert request.model == "other"
    assert request.temperature == 0.3
    assert request.max_tokens == 7
    assert request.options.top_p == 0.5


def test_accepts_all_message_and_option_shapes():
    provider = EchoProvider({"api_key": "k"})
    as_dicts = [{"role": "user", "content": "a"}]
    as_messages = [Message.user("a")]
    as_collection = MessageCollection().user("a")
    for messages in (as_dicts, as_messages, as_collection):
        for options in (None, {"temperature": 0.1}, RequestOptions(temperature=0.1)):
            assert provider.send_message(messages, options).content == "echo: a"
    assert len(provider.calls) == 9


def test_validation_errors_surface_before_the_call():
    provider = EchoProvider({"api_key": "k"})
    with pytest.raises(ValidationError):
        provider.send_message([{"role": "robot", "content": "x"}])
    with pytest.raises(ValidationError):
        provider.send_message([{"role": "user", "content": "x"}], {"temperature": 9})
    with pytest.raises(TypeError):
        provider.send_message("just a string")  # type: ignore[arg-type]
    assert provider.calls == []


def test_underlying_exceptions_are_wrapped():
    provider = EchoProvider({"api_key": "k"})
    cause = KeyError("choices")
    provider.fail_with = cause
    with pytest.raises(ProviderError) as excinfo:
        provider.send_message([{"role": "user", "content": "x"}])
    err = excinfo.value
    assert err.provider == "echo"
    assert err.model == "echo-1"
    assert err.code is ErrorCode.INTERNAL
    assert err.message.startswith("Error processing Echo response:")
    assert err.raw is cause
    assert err.__cause__ is cause


def test_status_bearing_exceptions_are_reported_as_api_errors():
    class _Http(Exception):
        status_code = 429

    provider = EchoProvider({"api_key": "k"})
    provider.fail_with = _Http("slow down")
    with pytest.raises(ProviderError) as excinfo:
        provider.send_message([{"role": "user", "content": "x"}])
    err = excinfo.value
    assert err.message == "Echo API Error: slow down"
    assert err.code is ErrorCode.RATE_LIMIT
    assert err.status == 429
    assert err.retryable is True


def test_provider_errors_pass_through_unchanged():
    provider = EchoProvider({"api_key": "k"})
    original = ProviderError(code=ErrorCode.VALIDATION, message="nope", provider="echo")
    provider.fail_with = original
    with pytest.raises(ProviderError) as excinfo:
        provider.send_message([{"role": "user", "content": "x"}])
    assert excinfo.value is original


def test_emits_start_and_end_events_without_content(events):
    provider = EchoProvider({"api_key": "secret-key"})
    provider.send_message([{"role": "user", "content": "very private"}])
    names = [e["event"] for e in events]
    assert names == ["chat.start", "chat.end"]
    start, end = events
    assert start["provider"] == "echo"
    assert start["message_count"] == 1
    assert end["tokens"]["total_tokens"] == 2
    assert "latency_ms" in end
    assert start["request_id"] == end["request_id"]
    blob = json.dumps(events)
    assert "very private" not in blob
    assert "secret-key" not in blob


def test_emits_error_event(events):
    provider = EchoProvider({"api_key": "k"})
    provider.fail_with = RuntimeError("boom")
    with pytest.raises(ProviderError):
        provider.send_message([{"role": "user", "content": "x"}])
    assert events[-1]["event"] == "chat.error"
    assert events[-1]["error_code"] == "internal"


def test_logging_disabled_by_config_file(write_config, events):
    write_config({"logging": {"enabled": False}})
    provider = EchoProvider({"api_key": "k"})
    provider.send_message([{"role": "user", "content": "x"}])
    assert events == []
