"""Text helpers for feeding punctuation models."""

from __future__ import annotations

from pathlib import Path


def split_string(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces between separators."""
    if not sep:
        raise ValueError("Separator must not be empty")
    pieces: list[str] = []
    start = 0
    found = text.find(sep)
    while found != -1:
        if found == start:
            start += 1
            found = text.find(sep, start)
            continue
        pieces.append(text[start:found])
        start = found + len(sep)
        found = text.find(sep, start)
    if start < len(text):
        pieces.append(text[start:])
    return pieces


def read_lines(path: str | Path) -> list[str]:
    """Return the lines of a UTF-8 text file without their newline."""
    with open(path, encoding="utf-8", newline="") as handle:
        data = handle.read()
    lines = data.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines