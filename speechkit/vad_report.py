"""Text rendering of VAD segments for logging."""

from __future__ import annotations

from collections.abc import Sequence


def format_segments(
    segments: Sequence[Sequence[int]], wav_id: str, skip_empty: bool = False
) -> str | None:
    """Render segments as ``"<wav_id>: [[a,b],[c,d]]"``.

    With ``skip_empty`` (the streaming report) nothing is rendered for an
    empty result, so None is returned. Empty segments are also left out,
    although a segment before one still keeps its trailing comma.
    """
    if skip_empty and not segments:
        return None
    parts = [f"{wav_id}: ["]
    last = len(segments) - 1
    for index, segment in enumerate(segments):
        if skip_empty and not segment:
            continue
        parts.append("[" + ",".join(str(value) for value in segment) + "]")
        if index != last:
            parts.append(",")
    parts.append("]")
    return "".join(parts)