"""
HTTP API adapter for the text rewriter.

Endpoint responsibilities:
- `GET /health`: liveness probe, always 200.
- `GET /check-api-key`: reports whether the credential is configured, always 200.
- `POST /rewrite`: rewrite caller text through `text_rewriter.core.engine`.

API request lifecycle (`POST /rewrite`):
1. FastAPI parses `{"text": ...}` into `RewriteRequest` (missing field -> 422).
2. `get_settings` snapshots the environment for this request.
3. `rewrite_text` validates, calls upstream and interprets the reply.
4. Success -> 200 `{"rewritten": ...}`; any `RewriteError` -> 500 `{"error": ...}`.

Error handling strategy:
- Every rewrite failure kind maps to HTTP 500 (`REWRITE_ERROR_STATUS`).
- Unexpected exceptions are not wrapped here and follow FastAPI default handling.

CORS:
- Any origin, method and header; preflight responses cached for one hour.
"""

import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from text_rewriter.core.engine import rewrite_text
from text_rewriter.core.errors import RewriteError
from text_rewriter.llm.provider_config import Settings, describe_api_key, load_settings


logger = logging.getLogger(__name__)

REWRITE_ERROR_STATUS = 500
HEALTH_MESSAGE = "AI Text Editor Backend is running"

app = FastAPI(title="AI Text Editor Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=3600,
)


# ============================================================
# Request / Response Schemas
# ============================================================

class RewriteRequest(BaseModel):
    """Caller payload. `text` may be empty or of any length."""

    text: str


class RewriteResponse(BaseModel):
    rewritten: str


def get_settings() -> Settings:
    """Per-request settings dependency; override in tests via `dependency_overrides`."""
    return load_settings()


# ============================================================
# Endpoints
# ============================================================

@app.get("/health")
def health_check():
    return {"status": "ok", "message": HEALTH_MESSAGE}


@app.get("/check-api-key")
def check_api_key(settings: Settings = Depends(get_settings)):
    """Report credential configuration without exposing the full key."""
    return describe_api_key(settings)


@app.post("/rewrite", response_model=RewriteResponse)
def rewrite(req: RewriteRequest, settings: Settings = Depends(get_settings)):
    """
    Rewrite the caller text.

    Runs in FastAPI's threadpool since the upstream call blocks.

    Returns:
    - `RewriteResponse` on success.
    - 500 JSON `{"error": <message>}` for config, transport, upstream-status
      and malformed-response failures alike.
    """
    try:
        rewritten = rewrite_text(req.text, settings)
    except RewriteError as err:
        logger.error("Rewrite failed (%s): %s", type(err).__name__, err)
        return JSONResponse(
            status_code=REWRITE_ERROR_STATUS,
            content={"error": str(err)},
        )

    return RewriteResponse(rewritten=rewritten)
