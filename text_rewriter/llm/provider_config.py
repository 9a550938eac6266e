"""Provider/runtime configuration for the LLM layer.

Architectural role:
    Centralizes endpoint constants, fixed generation parameters and credential
    lookup for `request_builder`, `client` and the API adapters.

Resolution model:
    `load_settings()` reads the process environment each time it is called and
    returns an immutable `Settings` value. Adapters call it per request, so the
    credential is never cached across requests and tests can change the
    environment between calls.

Failure behavior:
    Missing credential material is represented as `None`. Validation happens in
    `request_builder.validate_credential`, not here.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

API_KEY_ENV = "GEMINI_API_KEY"

DEFAULT_MODEL_NAME = "gemini-1.5-flash"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080

GEMINI_URL_TEMPLATE = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "{model}:generateContent"
)

# Fixed sampling parameters; not caller-configurable.
GENERATION_CONFIG = {
    "temperature": 0.7,
    "maxOutputTokens": 500,
    "topP": 0.9,
    "topK": 40,
}

API_KEY_PREVIEW_CHARS = 8


@dataclass(frozen=True)
class Settings:
    """Immutable per-request configuration snapshot.

    Attributes:
        api_key: Raw credential as configured, or `None` when unset.
        model_name: Gemini model used in the endpoint path.
        timeout: Outbound request timeout in seconds.
        host: Bind address for the HTTP server.
        port: Bind port for the HTTP server.
    """

    api_key: str | None = None
    model_name: str = DEFAULT_MODEL_NAME
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    def __repr__(self) -> str:
        key_state = "unset" if self.api_key is None else f"<{len(self.api_key)} chars>"
        return (
            f"Settings(api_key={key_state}, model_name={self.model_name!r}, "
            f"timeout={self.timeout!r}, host={self.host!r}, port={self.port!r})"
        )

    @property
    def endpoint_url(self) -> str:
        return GEMINI_URL_TEMPLATE.format(model=self.model_name)


def _float_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def load_settings() -> Settings:
    """Build `Settings` from the current process environment.

    Environment variables:
        GEMINI_API_KEY: upstream credential (required for `/rewrite`).
        GEMINI_MODEL: model name, defaults to `gemini-1.5-flash`.
        GEMINI_TIMEOUT: outbound timeout in seconds, defaults to 30.
        HOST / PORT: server bind address, default `127.0.0.1:8080`.

    Edge cases:
        - Unparseable numeric values fall back to their defaults.
        - An empty `GEMINI_MODEL` falls back to the default model.
    """
    return Settings(
        api_key=os.getenv(API_KEY_ENV),
        model_name=os.getenv("GEMINI_MODEL") or DEFAULT_MODEL_NAME,
        timeout=_float_env("GEMINI_TIMEOUT", DEFAULT_TIMEOUT_SECONDS),
        host=os.getenv("HOST") or DEFAULT_HOST,
        port=_int_env("PORT", DEFAULT_PORT),
    )


def describe_api_key(settings: Settings) -> dict:
    """Summarize credential configuration without exposing the full value.

    Returns:
        Report dict for the `/check-api-key` endpoint. When a key is present it
        includes the trimmed length and the first eight characters followed by
        `...`.

    Edge cases:
        - Whitespace-only values are reported as not configured.
        - The minimum-length heuristic is not applied here.
    """
    api_key = (settings.api_key or "").strip()
    if not api_key:
        return {
            "status": "error",
            "message": f"{API_KEY_ENV} environment variable is not set or is empty",
            "api_key_configured": False,
        }

    return {
        "status": "ok",
        "message": "API key is configured",
        "api_key_configured": True,
        "api_key_length": len(api_key),
        "api_key_preview": f"{api_key[:API_KEY_PREVIEW_CHARS]}...",
    }
