"""Result records returned by recognition, VAD and punctuation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any


@dataclass
class RecogResult:
    """Text, timestamps and audio duration of one recognition call."""

    msg: str = ""
    stamp: str = ""
    stamp_sents: str = ""
    tpass_msg: str = ""
    snippet_time: float = 0.0


@dataclass
class VadResult:
    """Speech segments in milliseconds and the audio duration."""

    segments: list[list[int]] = field(default_factory=list)
    snippet_time: float = 0.0


@dataclass
class PuncResult:
    """Punctuated text and the cache carried to the next online call."""

    msg: str = ""
    arr_cache: list[str] = field(default_factory=list)


def argmax(values: Iterable[Any]) -> int:
    """Return the index of the first largest value."""
    best_index = -1
    best_value = None
    for index, value in enumerate(values):
        if best_index < 0 or value > best_value:
            best_index, best_value = index, value
    if best_index < 0:
        raise ValueError("argmax of an empty sequence")
    return best_index