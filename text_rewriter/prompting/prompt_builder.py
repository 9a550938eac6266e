"""Prompt assembly for the rewrite route.

Design constraints:
    - Deterministic construction for identical inputs.
    - Caller text is appended verbatim: no stripping, escaping or truncation.

Prompt safety model:
    Safety is instruction-led only. The instruction asks for exactly one
    rewrite with no alternatives and no commentary; nothing enforces it.
"""


REWRITE_INSTRUCTION = (
    "Rewrite the following text in a more polished and professional way. "
    "Provide only ONE improved version, not multiple options. "
    "Return only the rewritten text without any explanations or alternatives: "
)


def build_rewrite_prompt(text: str) -> str:
    """Return the rewrite instruction followed by the caller text.

    Edge cases:
        - Empty `text` still yields the full instruction.
    """
    return f"{REWRITE_INSTRUCTION}{text}"
