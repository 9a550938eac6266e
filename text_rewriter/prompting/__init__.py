"""Prompting package.

Deterministic prompt-construction helpers. No validation, I/O or model
invocation happens here.
"""
