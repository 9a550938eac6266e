"""Core orchestration package.

Architectural role:
    Sits between the API/CLI adapters and the LLM layer.

Composition:
    - `engine`: per-request rewrite pipeline.
    - `errors`: exception taxonomy surfaced to adapters.
    - `types`: data contracts passed between the LLM-layer components.
"""
