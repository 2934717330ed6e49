"""Outline tag helpers."""

from __future__ import annotations


def extract_tag(text: str) -> str:
    """Strip page-reference and tag decorations from a node label.

    ``#[[Cafe X]]``, ``[[Cafe X]]`` and ``#CafeX`` become the bare name, and a
    trailing ``::`` attribute marker is dropped. Anything else is returned
    unchanged.
    """

    if text.startswith("#[[") and text.endswith("]]"):
        return text[3:-2]
    if text.startswith("[[") and text.endswith("]]"):
        return text[2:-2]
    if text.startswith("#") and len(text) > 1:
        return text[1:]
    if text.endswith("::"):
        return text[:-2]
    return text
