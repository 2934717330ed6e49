"""File IO utilities."""

from __future__ import annotations

import json
import os
from pathlib import Path

import chardet


def detect_encoding(path: os.PathLike[str] | str) -> str:
    """Detect the encoding of a text file."""

    with open(path, "rb") as handle:
        raw = handle.read()
    detection = chardet.detect(raw)
    return detection.get("encoding") or "utf-8"


def load_json(path: os.PathLike[str] | str) -> object:
    """Load a JSON document exported by the host application."""

    encoding = detect_encoding(path)
    with open(path, "r", encoding=encoding, errors="replace") as handle:
        return json.load(handle)


def ensure_directory(path: os.PathLike[str] | str) -> Path:
    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory
