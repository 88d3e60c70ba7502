"""Input lists, chunking and timing helpers shared by the recognition commands."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

DEFAULT_WAV_ID = "wav_default_id"


def is_target_file(filename: str, target: str) -> bool:
    """Return True when the text after the last dot equals ``target``."""
    dot = filename.rfind(".")
    if dot == -1:
        return False
    return filename[dot + 1 :] == target


def read_wav_list(path: str | Path) -> list[tuple[str, str]]:
    """Return ``(wav_id, wav_path)`` pairs for an input path.

    A ``.scp`` file lists one ``wav_id wav_path`` per line; any other path is
    taken as a single input with the default id.
    """
    path_text = str(path)
    if not is_target_file(path_text, "scp"):
        return [(DEFAULT_WAV_ID, path_text)]
    with open(path, encoding="utf-8", newline="") as handle:
        data = handle.read()
    lines = data.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    entries = []
    for line in lines:
        columns = line.split()
        wav_id = columns[0] if columns else ""
        wav_path = columns[1] if len(columns) > 1 else ""
        entries.append((wav_id, wav_path))
    return entries


def iter_chunks(buff_len: int, step: int) -> Iterator[tuple[int, int, bool]]:
    """Yield ``(offset, size, is_final)`` covering ``buff_len`` by ``step``.

    A tail of at most one unit is folded into the last chunk.
    """
    if step <= 0:
        raise ValueError(f"Chunk step must be positive, got {step}")
    offset = 0
    while offset < buff_len:
        if offset + step >= buff_len - 1:
            step = buff_len - offset
            is_final = True
        else:
            is_final = False
        yield offset, step, is_final
        offset += min(step, buff_len - offset)


def real_time_factor(compute_micros: float, audio_seconds: float) -> float:
    """Compute time divided by audio time; raises ZeroDivisionError on no audio."""
    return compute_micros / (audio_seconds * 1_000_000)