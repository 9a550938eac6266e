"""Transport client for the Gemini `generateContent` endpoint.

Model invocation flow:
    `engine.rewrite_text` -> `send_request(request, settings)` -> `UpstreamReply`.

Retry behavior:
    No retry loop is implemented. Each call is attempted once with the timeout
    from `Settings.timeout`.

Failure handling model:
    - Any `requests` exception before a response arrives is raised as
      `UpstreamUnreachable`.
    - A body that cannot be read after the status line arrived is replaced with
      `UNREADABLE_BODY_PLACEHOLDER`; status interpretation is left to
      `response_interpreter`.
"""

import logging

import requests

from text_rewriter.core.errors import UpstreamUnreachable
from text_rewriter.core.types import UpstreamReply, UpstreamRequest
from text_rewriter.llm.provider_config import Settings


logger = logging.getLogger(__name__)

UNREADABLE_BODY_PLACEHOLDER = "Failed to get response text"


def _read_body(response: requests.Response, log: logging.Logger) -> str:
    try:
        return response.text
    except requests.exceptions.RequestException as err:
        log.warning("Failed to read Gemini response body: %s", err)
        return UNREADABLE_BODY_PLACEHOLDER


def send_request(
    request: UpstreamRequest,
    settings: Settings,
    log: logging.Logger | None = None,
) -> UpstreamReply:
    """POST one payload upstream and return the raw exchange.

    Args:
        request: Validated credential and payload from `request_builder`.
        settings: Supplies the endpoint model and timeout.
        log: Diagnostic sink, defaults to this module's logger.

    Returns:
        `UpstreamReply` for any HTTP status, success or not.

    Raises:
        UpstreamUnreachable: DNS, connection, TLS or timeout failure.
    """
    log = log or logger

    headers = {
        "x-goog-api-key": request.api_key,
        "Content-Type": "application/json",
    }

    log.info("Sending request to Gemini API (model: %s)", settings.model_name)

    try:
        with requests.post(
            settings.endpoint_url,
            headers=headers,
            json=request.payload,
            timeout=settings.timeout,
            stream=True,
        ) as response:
            body = _read_body(response, log)
            reply = UpstreamReply(
                status_code=response.status_code,
                reason=response.reason or "",
                body=body,
            )
    except requests.exceptions.RequestException as err:
        log.error("Failed to call Gemini API: %s", err)
        raise UpstreamUnreachable(f"Failed to call Gemini API: {err}") from err

    log.info("Gemini API Response Status: %s", reply.status_line)
    return reply
