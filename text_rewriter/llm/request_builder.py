"""Credential validation and upstream payload construction.

Architectural role:
    First stage of the rewrite pipeline. Turns caller text plus `Settings` into
    an `UpstreamRequest` or raises `ConfigError`. No network access.

Credential checks:
    - Absent or blank after trimming -> `ConfigError`.
    - Trimmed length below `MIN_API_KEY_LENGTH` -> `ConfigError`.
    These are sanity heuristics only; the key is never checked semantically.

Logging:
    The caller text and the credential length are logged. The credential value
    is never logged.
"""

import logging

from text_rewriter.core.errors import ConfigError
from text_rewriter.core.types import UpstreamRequest
from text_rewriter.llm.provider_config import API_KEY_ENV, GENERATION_CONFIG, Settings
from text_rewriter.prompting.prompt_builder import build_rewrite_prompt


logger = logging.getLogger(__name__)

MIN_API_KEY_LENGTH = 10

MISSING_KEY_MESSAGE = (
    f"{API_KEY_ENV} environment variable is not configured. "
    "Please set your Google Gemini API key."
)
MALFORMED_KEY_MESSAGE = (
    f"Invalid API key format. Please check your {API_KEY_ENV} environment variable."
)


def validate_credential(raw_key: str | None, log: logging.Logger | None = None) -> str:
    """Return the trimmed credential or raise `ConfigError`.

    Args:
        raw_key: Credential as configured, possibly `None`.
        log: Diagnostic sink, defaults to this module's logger.
    """
    log = log or logger

    api_key = raw_key.strip() if raw_key is not None else ""
    if not api_key:
        log.error("%s environment variable is not set or is empty", API_KEY_ENV)
        raise ConfigError(MISSING_KEY_MESSAGE)

    if len(api_key) < MIN_API_KEY_LENGTH:
        log.error("API key appears to be too short or invalid (length: %d)", len(api_key))
        raise ConfigError(MALFORMED_KEY_MESSAGE)

    return api_key


def build_payload(text: str) -> dict:
    """Build the `generateContent` body for one rewrite.

    The body has a single content with a single text part holding the prompt,
    plus a copy of the fixed `GENERATION_CONFIG`.
    """
    return {
        "contents": [
            {
                "parts": [
                    {"text": build_rewrite_prompt(text)},
                ]
            }
        ],
        "generationConfig": dict(GENERATION_CONFIG),
    }


def prepare_request(
    text: str,
    settings: Settings,
    log: logging.Logger | None = None,
) -> UpstreamRequest:
    """Validate configuration and build the upstream request for `text`.

    Raises:
        ConfigError: credential missing, blank or too short.
    """
    log = log or logger

    api_key = validate_credential(settings.api_key, log)

    log.info("Received rewrite request for text: %r", text)
    log.info("API key configured: YES (length: %d)", len(api_key))

    return UpstreamRequest(api_key=api_key, payload=build_payload(text))
