"""Reading of mono 16-bit PCM WAV files and raw PCM buffers."""

from __future__ import annotations

import struct
import sys
from array import array
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

HEADER_SIZE = 44
_HEADER_STRUCT = struct.Struct("<4si4s4sihhiihh4si")
_CHUNK_STRUCT = struct.Struct("<4si")

RIFF_TAG = b"RIFF"
WAVE_TAG = b"WAVE"
FMT_TAG = b"fmt "
DATA_TAG = b"data"


class WaveFormatError(ValueError):
    """Raised when a WAV header or payload is not usable."""


@dataclass
class WaveHeader:
    """The canonical 44-byte RIFF/WAVE header."""

    chunk_id: bytes
    chunk_size: int
    format: bytes
    subchunk1_id: bytes
    subchunk1_size: int
    audio_format: int
    num_channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    subchunk2_id: bytes
    subchunk2_size: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "WaveHeader":
        """Parse the first 44 bytes of ``data`` as a little-endian header."""
        if len(data) < HEADER_SIZE:
            raise WaveFormatError(
                f"WAV header needs {HEADER_SIZE} bytes, got {len(data)}"
            )
        return cls(*_HEADER_STRUCT.unpack_from(data))

    def validate(self) -> None:
        """Raise WaveFormatError unless this is mono 16-bit PCM."""
        if self.chunk_id != RIFF_TAG:
            raise WaveFormatError(f"Expected chunk_id RIFF. Given: {self.chunk_id!r}")
        if self.format != WAVE_TAG:
            raise WaveFormatError(f"Expected format WAVE. Given: {self.format!r}")
        if self.subchunk1_id != FMT_TAG:
            raise WaveFormatError(
                f"Expected subchunk1_id 'fmt '. Given: {self.subchunk1_id!r}"
            )
        if self.subchunk1_size != 16:
            raise WaveFormatError(
                f"Expected subchunk1_size 16. Given: {self.subchunk1_size}"
            )
        if self.audio_format != 1:
            raise WaveFormatError(
                f"Expected audio_format 1. Given: {self.audio_format}"
            )
        if self.num_channels != 1:
            raise WaveFormatError(
                f"Expected single channel. Given: {self.num_channels}"
            )
        expected_rate = self.sample_rate * self.num_channels * self.bits_per_sample // 8
        if self.byte_rate != expected_rate:
            raise WaveFormatError(
                f"Inconsistent byte_rate {self.byte_rate}, expected {expected_rate}"
            )
        expected_align = self.num_channels * self.bits_per_sample // 8
        if self.block_align != expected_align:
            raise WaveFormatError(
                f"Inconsistent block_align {self.block_align}, expected {expected_align}"
            )
        if self.bits_per_sample != 16:
            raise WaveFormatError(
                f"Expected bits_per_sample 16. Given: {self.bits_per_sample}"
            )


def read_wav_header(stream: BinaryIO) -> WaveHeader:
    """Read and validate a header, leaving ``stream`` at the data chunk payload.

    Chunks between ``fmt `` and ``data`` are skipped; the returned header's
    ``subchunk2_id``/``subchunk2_size`` describe the data chunk.
    """
    header = WaveHeader.from_bytes(stream.read(HEADER_SIZE))
    header.validate()
    while header.subchunk2_id != DATA_TAG:
        stream.seek(header.subchunk2_size, 1)
        raw = stream.read(_CHUNK_STRUCT.size)
        if len(raw) < _CHUNK_STRUCT.size:
            raise WaveFormatError("WAV file has no data chunk")
        header.subchunk2_id, header.subchunk2_size = _CHUNK_STRUCT.unpack(raw)
    return header


def read_wav(path: str | Path) -> tuple[int, bytes]:
    """Return the sample rate and raw 16-bit payload of a WAV file."""
    with open(path, "rb") as stream:
        header = read_wav_header(stream)
        size = header.subchunk2_size
        if size < 0:
            raise WaveFormatError(f"Negative data chunk size {size}")
        payload = stream.read(size)
    if len(payload) < size:
        raise WaveFormatError(
            f"Failed to read {path}: expected {size} data bytes, got {len(payload)}"
        )
    return header.sample_rate, payload


def read_pcm(path: str | Path) -> bytes:
    """Return the whole 16-bit samples of a headerless PCM file."""
    data = Path(path).read_bytes()
    return data[: len(data) - len(data) % 2]


def pcm16_to_floats(data: bytes, scale: float = 32768.0) -> list[float]:
    """Decode little-endian signed 16-bit samples, dividing each by ``scale``."""
    samples = array("h")
    samples.frombytes(bytes(data[: len(data) - len(data) % 2]))
    if sys.byteorder == "big":
        samples.byteswap()
    return [value / scale for value in samples]


def wav_bytes_payload(buf: bytes) -> tuple[int, bytes]:
    """Split an in-memory canonical WAV into its sample rate and payload.

    The header is taken as is, without validation, and the payload is
    assumed to start right after the 44-byte header.
    """
    header = WaveHeader.from_bytes(buf)
    sample_count = header.subchunk2_size // 2
    end = HEADER_SIZE + sample_count * 2
    if sample_count < 0 or len(buf) < end:
        raise WaveFormatError(
            f"WAV buffer holds {len(buf) - HEADER_SIZE} payload bytes, "
            f"header announces {header.subchunk2_size}"
        )
    return header.sample_rate, bytes(buf[HEADER_SIZE:end])