"""Interpretation of upstream replies into rewritten text or errors.

Architectural role:
    Last stage of the rewrite pipeline. Consumes an `UpstreamReply` produced by
    `client.send_request` and either returns the single rewritten string or
    raises a `RewriteError` subclass. Transport failures never reach this
    module; the client raises `UpstreamUnreachable` for them.

Decision flow:
    1. Non-2xx status -> `UpstreamRejected`. The message uses
       `error.message` from a JSON body when present, else the raw body.
    2. 2xx with a body that is not JSON -> `MalformedUpstreamResponse`.
    3. 2xx JSON -> walk `candidates[0].content.parts[0].text`.
       - Any missing or mistyped link -> `MalformedUpstreamResponse` carrying
         the raw body and the failing step as `reason`.
       - Text that trims to empty -> the original caller text is returned.
       - Otherwise the trimmed text is returned.

Shape checks:
    Every link is checked for presence and type explicitly. Empty lists are
    detected by length, never by truthiness of the container.

Logging:
    Status code, each traversal failure point and the empty-text fallback are
    logged through the injected logger.
"""

import json
import logging
from typing import Any

from text_rewriter.core.errors import MalformedUpstreamResponse, UpstreamRejected
from text_rewriter.core.types import UpstreamReply


logger = logging.getLogger(__name__)

NO_CANDIDATES_ARRAY = "No candidates array found in response"
NO_CANDIDATES = "No candidates found in response"
CANDIDATE_NOT_OBJECT = "First candidate is not an object"
NO_CONTENT = "No content field found in first candidate"
NO_PARTS_ARRAY = "No parts array found in content"
NO_PARTS = "No parts found in content"
PART_NOT_OBJECT = "First part is not an object"
NO_TEXT = "No text field found in first part"
INVALID_JSON = "Response body is not valid JSON"


def _upstream_error_message(body: str) -> str | None:
    """Return `error.message` from a JSON error body, or `None`."""
    try:
        data = json.loads(body)
    except (ValueError, RecursionError):
        return None

    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if not isinstance(error, dict):
        return None
    message = error.get("message")
    if not isinstance(message, str):
        return None
    return message


def _shape_error(reason: str, body: str, log: logging.Logger) -> MalformedUpstreamResponse:
    log.warning(reason)
    log.warning("Failed to extract text from response structure")
    return MalformedUpstreamResponse(
        f"Failed to parse Gemini response: {body}",
        body=body,
        reason=reason,
    )


def extract_candidate_text(data: Any, body: str, log: logging.Logger | None = None) -> str:
    """Resolve `candidates[0].content.parts[0].text` in parsed JSON.

    Args:
        data: Parsed upstream JSON value of any type.
        body: Raw body text, attached to the error for diagnosis.
        log: Diagnostic sink.

    Returns:
        The untrimmed text value.

    Raises:
        MalformedUpstreamResponse: with `reason` naming the first missing link.
    """
    log = log or logger

    candidates = data.get("candidates") if isinstance(data, dict) else None
    if not isinstance(candidates, list):
        raise _shape_error(NO_CANDIDATES_ARRAY, body, log)
    if len(candidates) == 0:
        raise _shape_error(NO_CANDIDATES, body, log)

    candidate = candidates[0]
    if not isinstance(candidate, dict):
        raise _shape_error(CANDIDATE_NOT_OBJECT, body, log)

    content = candidate.get("content")
    if not isinstance(content, dict):
        raise _shape_error(NO_CONTENT, body, log)

    parts = content.get("parts")
    if not isinstance(parts, list):
        raise _shape_error(NO_PARTS_ARRAY, body, log)
    if len(parts) == 0:
        raise _shape_error(NO_PARTS, body, log)

    part = parts[0]
    if not isinstance(part, dict):
        raise _shape_error(PART_NOT_OBJECT, body, log)

    text = part.get("text")
    if not isinstance(text, str):
        raise _shape_error(NO_TEXT, body, log)

    return text


def interpret_response(
    reply: UpstreamReply,
    original_text: str,
    log: logging.Logger | None = None,
) -> str:
    """Turn an upstream reply into the rewritten text.

    Args:
        reply: Completed upstream exchange.
        original_text: Caller input, returned when the model text is blank.
        log: Diagnostic sink, defaults to this module's logger.

    Raises:
        UpstreamRejected: non-2xx status.
        MalformedUpstreamResponse: 2xx body that is not JSON or lacks the text.
    """
    log = log or logger

    if not reply.ok:
        log.error("Gemini API returned error status: %s", reply.status_line)
        log.error("Error response: %s", reply.body)

        message = _upstream_error_message(reply.body)
        detail = message if message is not None else reply.body
        raise UpstreamRejected(
            f"Gemini API error: {reply.status_line} - {detail}",
            status_code=reply.status_code,
        )

    try:
        data = json.loads(reply.body)
    except (ValueError, RecursionError) as err:
        log.error("Failed to parse JSON response: %s", err)
        raise MalformedUpstreamResponse(
            f"Failed to parse Gemini response JSON: {err} - {reply.body}",
            body=reply.body,
            reason=INVALID_JSON,
        ) from err

    log.debug("Successfully parsed JSON response")

    text = extract_candidate_text(data, reply.body, log)

    if not text.strip():
        log.warning("Gemini returned empty text, using original text as fallback")
        return original_text

    log.info("Gemini returned text: %r", text)
    return text.strip()
