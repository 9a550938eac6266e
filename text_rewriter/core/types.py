"""Data contracts shared by the rewrite pipeline components.

These are purely structural and state-free. The request builder produces an
`UpstreamRequest`, the transport client turns it into an `UpstreamReply`, and
the response interpreter consumes the reply.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class UpstreamRequest:
    """Validated credential plus the JSON payload for `generateContent`.

    Attributes:
        api_key: Trimmed credential. Never logged.
        payload: `contents` / `generationConfig` body sent upstream.
    """

    api_key: str
    payload: dict[str, Any]

    def __repr__(self) -> str:
        return f"UpstreamRequest(api_key=<{len(self.api_key)} chars>, payload={self.payload!r})"


@dataclass(frozen=True)
class UpstreamReply:
    """Completed HTTP exchange with the upstream API.

    Attributes:
        status_code: HTTP status code.
        reason: Reason phrase reported by the server, may be empty.
        body: Response body text, or a placeholder if it could not be read.
    """

    status_code: int
    reason: str
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def status_line(self) -> str:
        if self.reason:
            return f"{self.status_code} {self.reason}"
        return str(self.status_code)
