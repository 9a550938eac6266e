"""Error taxonomy for the rewrite pipeline.

Every failure of a single rewrite request is raised as a `RewriteError`
subclass. Adapters catch the base class and render `str(err)` to the caller;
the subclass tells them (and tests) which stage failed.

Failure stages:
    - `ConfigError`: credential missing, blank or implausibly short.
      Raised before any outbound call.
    - `UpstreamUnreachable`: the outbound call could not complete.
    - `UpstreamRejected`: the upstream answered with a non-2xx status.
    - `MalformedUpstreamResponse`: a 2xx answer that is not JSON or lacks the
      expected `candidates[0].content.parts[0].text` shape.
"""


class RewriteError(Exception):
    """Base class for request-scoped rewrite failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigError(RewriteError):
    """Credential configuration is unusable."""


class UpstreamUnreachable(RewriteError):
    """Transport-level failure (DNS, connect, TLS, timeout)."""


class UpstreamRejected(RewriteError):
    """Upstream returned a non-success HTTP status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class MalformedUpstreamResponse(RewriteError):
    """Success status, but the body could not be turned into rewritten text.

    Attributes:
        body: Raw upstream body text, kept for diagnosis.
        reason: Short label of the failing parse or traversal step.
    """

    def __init__(self, message: str, body: str, reason: str):
        super().__init__(message)
        self.body = body
        self.reason = reason
