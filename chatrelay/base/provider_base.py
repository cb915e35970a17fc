"""Shared adapter behaviour for every chat provider.

``BaseProvider`` implements the whole :class:`~chatrelay.base.interfaces.AIProvider`
contract except the vendor call itself. Subclasses provide ``_send`` and a
few class attributes (name, vendor label, defaults, vendor exception types).

Call flow for :meth:`BaseProvider.send_message`:

1. normalize ``messages`` to a ``MessageCollection`` and ``options`` to
   ``RequestOptions`` (validation errors surface here, unwrapped, before any
   network activity);
2. resolve the effective model / temperature / max tokens (per call, else
   instance default);
3. call ``_send`` and wrap any failure into a single ``ProviderError``;
4. emit ``chat.start`` / ``chat.end`` / ``chat.error`` structured events.

No retries are attempted; a failed call never yields an empty response.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

from ..config import get_logging_settings
from ..config.defaults import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, DEFAULT_TIMEOUT
from .errors import ErrorCode, ProviderError, classify_exception, extract_status
from .interfaces import MessagesInput, OptionsInput
from .logging import LogContext, get_logger, normalized_log_event
from .models import AIResponse, MessageCollection, RequestOptions


@dataclass(frozen=True)
class ResolvedRequest:
    """Effective generation parameters for one call.

    ``options`` keeps the remaining per-call fields (top_p, stop, ...) so
    adapters can forward the ones their vendor supports.
    """

    model: str
    temperature: float
    max_tokens: int
    options: RequestOptions = field(default_factory=RequestOptions)


class BaseProvider:
    """Base class for chat adapters.

    Class attributes configured by subclasses:
        name: Registry key, also used as log ``provider`` field.
        vendor_label: Human name used in error messages (``"OpenAI"``).
        api_error_label: Suffix for vendor-reported failures.
        requires_api_key: ``False`` exempts the adapter from credential checks.
        default_model / default_api_url / default_max_tokens: Fallbacks
            when the config does not set them.
        vendor_errors: Exception types raised by the vendor SDK or transport;
            these become ``"<Vendor> API Error: ..."`` messages.
        available_models: Informative list returned by ``get_available_models``.
    """

    name: str = "base"
    vendor_label: str = "Provider"
    api_error_label: str = "API Error"
    requires_api_key: bool = True
    default_model: str = ""
    default_api_url: Optional[str] = None
    default_max_tokens: int = DEFAULT_MAX_TOKENS
    vendor_errors: Tuple[Type[BaseException], ...] = ()
    available_models: Tuple[str, ...] = ()

    def __init__(self, config: Optional[Mapping[str, Any]] = None, **_: Any) -> None:
        # Private copy: later changes to the caller's mapping are not seen.
        self._config: Dict[str, Any] = dict(config or {})
        cfg = self._config
        self._api_key: str = cfg.get("api_key") or ""
        self._api_url: Optional[str] = cfg.get("api_url") or cfg.get("base_uri") or self.default_api_url
        self._model: str = cfg.get("model") or self.default_model
        temperature = cfg.get("temperature")
        self._temperature: float = float(temperature) if temperature is not None else DEFAULT_TEMPERATURE
        self._max_tokens: int = int(cfg.get("max_tokens") or self.default_max_tokens)
        self._timeout: float = float(cfg.get("timeout") or DEFAULT_TIMEOUT)
        self._logger = get_logger(f"chatrelay.{self.name}")
        self._log_enabled = bool(get_logging_settings().get("enabled", True))

    # ------------------------------------------------------------------ contract

    def send_message(self, messages: MessagesInput, options: OptionsInput = None) -> AIResponse:
        """Send ``messages`` and return the normalized :class:`AIResponse`.

        Raises:
            pydantic.ValidationError: invalid message role or option value.
            TypeError: unsupported input shapes.
            ProviderError: any failure of the vendor call or response parsing.
        """
        collection = self._normalize_messages(messages)
        request = self._resolve(self._normalize_options(options))
        ctx = LogContext.for_call(self.name, request.model)
        self._emit(
            "chat.start",
            ctx,
            phase="start",
            temperature=request.temperature,
            max_tokens=request.max_tokens,
            message_count=len(collection),
        )
        t0 = time.perf_counter()
        try:
            response = self._send(collection, request)
        except ProviderError as exc:
            self._emit_error(ctx, exc)
            raise
        except Exception as exc:
            err = self._wrap_exception(exc, request.model)
            self._emit_error(ctx, err)
            raise err from exc
        self._emit(
            "chat.end",
            ctx,
            phase="finalize",
            latency_ms=round((time.perf_counter() - t0) * 1000.0, 2),
            tokens=response.normalized_usage(),
        )
        return response

    def set_model(self, model: str) -> "BaseProvider":
        self._model = model
        return self

    def set_temperature(self, temperature: float) -> "BaseProvider":
        self._temperature = float(temperature)
        return self

    def set_max_tokens(self, max_tokens: int) -> "BaseProvider":
        self._max_tokens = int(max_tokens)
        return self

    def validate_config(self) -> bool:
        """Return whether a credential is present (always ``True`` when none is needed)."""
        if not self.requires_api_key:
            return True
        return bool(self._api_key)

    # ---------------------------------------------------------------- accessors

    @property
    def provider_name(self) -> str:
        return self.name

    @property
    def model(self) -> str:
        return self._model

    @property
    def temperature(self) -> float:
        return self._temperature

    @property
    def max_tokens(self) -> int:
        return self._max_tokens

    def get_available_models(self) -> List[str]:
        return list(self.available_models)

    # ------------------------------------------------------------ subclass hook

    def _send(self, messages: MessageCollection, request: ResolvedRequest) -> AIResponse:
        raise NotImplementedError

    # ---------------------------------------------------------------- internals

    @staticmethod
    def _normalize_messages(messages: MessagesInput) -> MessageCollection:
        if isinstance(messages, (str, bytes)):
            raise TypeError("messages must be a MessageCollection or a sequence of messages, not a string")
        return MessageCollection(messages)

    @staticmethod
    def _normalize_options(options: OptionsInput) -> RequestOptions:
        if options is None:
            return RequestOptions()
        if isinstance(options, RequestOptions):
            return options
        if isinstance(options, Mapping):
            return RequestOptions.from_dict(options)
        raise TypeError(f"options must be RequestOptions, a mapping or None, not {type(options).__name__}")

    def _resolve(self, options: RequestOptions) -> ResolvedRequest:
        return ResolvedRequest(
            model=options.model or self._model,
            temperature=options.temperature if options.temperature is not None else self._temperature,
            max_tokens=options.max_tokens or self._max_tokens,
            options=options,
        )

    def _wrap_exception(self, exc: Exception, model: Optional[str]) -> ProviderError:
        """Convert any exception raised during a call into a ``ProviderError``."""
        status = extract_status(exc)
        vendor_reported = isinstance(exc, self.vendor_errors) or status is not None
        code = classify_exception(exc)
        if vendor_reported:
            message = f"{self.vendor_label} {self.api_error_label}: {exc}"
        else:
            message = f"Error processing {self.vendor_label} response: {exc}"
            if code is ErrorCode.UNKNOWN:
                code = ErrorCode.INTERNAL
        return ProviderError(
            code=code,
            message=message,
            provider=self.name,
            model=model,
            status=status,
            retryable=code.retryable,
            raw=exc,
        )

    def _processing_error(self, detail: str, code: ErrorCode, model: Optional[str]) -> ProviderError:
        """Build a ``ProviderError`` for a response the adapter itself rejects."""
        return ProviderError(
            code=code,
            message=f"Error processing {self.vendor_label} response: {detail}",
            provider=self.name,
            model=model,
            retryable=code.retryable,
        )

    def _client_setup_error(self, exc: Exception, model: Optional[str]) -> ProviderError:
        """Build the ``auth`` error raised when the vendor SDK refuses to create a client."""
        return ProviderError(
            code=ErrorCode.AUTH,
            message=f"{self.vendor_label} {self.api_error_label}: could not create client: {exc}",
            provider=self.name,
            model=model,
            raw=exc,
        )

    def _emit(self, event: str, ctx: LogContext, *, phase: str, **fields: Any) -> None:
        if self._log_enabled:
            normalized_log_event(self._logger, event, ctx, phase=phase, **fields)

    def _emit_error(self, ctx: LogContext, err: ProviderError) -> None:
        if self._log_enabled:
            normalized_log_event(
                self._logger,
                "chat.error",
                ctx,
                phase="finalize",
                error_code=err.code.value,
                status=err.status,
                error=err.message,
            )


__all__ = ["BaseProvider", "ResolvedRequest"]
