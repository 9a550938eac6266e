"""Text rewriter backend.

Architectural role:
    Relays caller text to the Gemini generative-language API wrapped in a fixed
    rewrite instruction and returns the single rewritten string.

Subpackages:
    - `api`: HTTP and CLI adapters.
    - `core`: orchestration, error taxonomy and shared data contracts.
    - `llm`: settings, request building, transport and response interpretation.
    - `prompting`: the rewrite instruction template.
"""
