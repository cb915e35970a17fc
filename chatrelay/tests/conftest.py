"""Pytest configuration for the chatrelay test suite.

Every test runs with provider credentials and chatrelay settings removed from
the environment and with the config-file cache reset, so results never depend
on the developer's shell.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional

import httpx
import pytest

from chatrelay.base.models import AIResponse, MessageCollection
from chatrelay.base.provider_base import BaseProvider, ResolvedRequest
from chatrelay.config import reset_config_cache

_PROVIDER_PREFIXES = ("OPENAI", "ANTHROPIC", "GROK", "GEMINI", "GROQ", "OLLAMA", "ECHO")
_FIELDS = ("API_KEY", "API_URL", "MODEL", "TEMPERATURE", "MAX_TOKENS", "TIMEOUT")


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Strip provider/chatrelay env vars and reset the config-file cache."""
    for prefix in _PROVIDER_PREFIXES:
        for field in _FIELDS:
            monkeypatch.delenv(f"{prefix}_{field}", raising=False)
    for name in ("CHATRELAY_CONFIG_FILE", "CHATRELAY_PROVIDER", "CHATRELAY_SYSTEM_PROMPT", "CHATRELAY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def write_config(tmp_path, monkeypatch: pytest.MonkeyPatch) -> Callable[..., Any]:
    """Write a config file (JSON by default) and point CHATRELAY_CONFIG_FILE at it."""

    def _write(data: Any, name: str = "chatrelay.json", raw: Optional[str] = None):
        path = tmp_path / name
        path.write_text(raw if raw is not None else json.dumps(data), encoding="utf-8")
        monkeypatch.setenv("CHATRELAY_CONFIG_FILE", str(path))
        reset_config_cache()
        return path

    return _write


class Recorder:
    """Collects requests seen by an ``httpx.MockTransport`` handler."""

    def __init__(self, reply: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []
        self._reply = reply

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._reply(request)

    @property
    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture()
def recorder() -> Callable[..., Recorder]:
    """Build a :class:`Recorder` returning a fixed JSON body (or a custom reply)."""

    def _make(body: Any = None, status: int = 200, reply: Optional[Callable] = None) -> Recorder:
        if reply is None:

            def reply(_request: httpx.Request) -> httpx.Response:
                return httpx.Response(status, json=body)

        return Recorder(reply)

    return _make


class EchoProvider(BaseProvider):
    """In-memory adapter used by manager, conversation, factory and CLI tests.

    Each call stores a snapshot of the transcript and options it received and
    answers with ``"echo: <last user content>"``.
    """

    name = "echo"
    vendor_label = "Echo"
    default_model = "echo-1"
    available_models = ("echo-1",)

    def __init__(self, config: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        super().__init__(config, **kwargs)
        self.calls: List[Dict[str, Any]] = []
        self.fail_with: Optional[BaseException] = None

    def _send(self, messages: MessageCollection, request: ResolvedRequest) -> AIResponse:
        self.calls.append({"messages": messages.to_list(), "request": request})
        if self.fail_with is not None:
            raise self.fail_with
        users = [m.content for m in messages if m.role == "user"]
        return AIResponse(
            content=f"echo: {users[-1] if users else ''}",
            model=request.model,
            usage={"prompt_tokens": 1, "completion_tokens": 1, "total_tokens": 2},
        )


class LocalEchoProvider(EchoProvider):
    name = "local-echo"
    requires_api_key = False


@pytest.fixture()
def echo_factory():
    """A ProviderFactory with ``echo`` and ``local-echo`` registered and configured."""
    from chatrelay.base.factory import ProviderFactory

    configs = {"echo": {"api_key": "k"}, "local-echo": {}}
    factory = ProviderFactory(config_source=configs.get)
    factory.extend("echo", EchoProvider).extend("local-echo", LocalEchoProvider)
    return factory
