"""LLM access package.

Architectural role:
    Provides settings resolution, upstream request construction, transport and
    response interpretation for the Gemini `generateContent` endpoint.

Module split:
    - `provider_config`: environment-driven settings and fixed endpoint constants.
    - `request_builder`: credential validation and payload construction.
    - `client`: HTTP transport.
    - `response_interpreter`: status/body to rewritten text or error.
"""
