"""Per-request rewrite pipeline.

Request lifecycle:
    1. `request_builder.prepare_request`: validate credential, build payload.
    2. `client.send_request`: one blocking POST, bounded by `Settings.timeout`.
    3. `response_interpreter.interpret_response`: reply -> text or error.

Error handling strategy:
    Every stage raises a `RewriteError` subclass; nothing is caught here.
    A `ConfigError` in stage 1 means stage 2 is never reached.

Concurrency:
    No shared mutable state. Safe to call from any number of worker threads.
"""

import logging

from text_rewriter.llm.client import send_request
from text_rewriter.llm.provider_config import Settings
from text_rewriter.llm.request_builder import prepare_request
from text_rewriter.llm.response_interpreter import interpret_response


logger = logging.getLogger(__name__)


def rewrite_text(text: str, settings: Settings, log: logging.Logger | None = None) -> str:
    """Rewrite `text` through the upstream model and return the result.

    Args:
        text: Caller text, any content including empty.
        settings: Configuration snapshot for this request.
        log: Diagnostic sink shared by all stages, defaults to this module's logger.

    Raises:
        ConfigError, UpstreamUnreachable, UpstreamRejected,
        MalformedUpstreamResponse.
    """
    log = log or logger

    request = prepare_request(text, settings, log)
    reply = send_request(request, settings, log)
    return interpret_response(reply, text, log)
