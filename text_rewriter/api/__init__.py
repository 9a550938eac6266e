"""Text rewriter adapter package.

Architectural role:
- Defines the external interaction boundary for HTTP and CLI interfaces.
- Performs transport-level validation and response shaping.
- Delegates the rewrite itself to `text_rewriter.core.engine.rewrite_text`.
"""
