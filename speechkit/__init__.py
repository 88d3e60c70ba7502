"""WAV/PCM reading, hotword biasing, input lists, VAD reports and result records for speech recognition."""

__version__ = "0.1.0"

__all__ = [
    "bias_lm",
    "inputs",
    "punc_text",
    "results",
    "vad_report",
    "wave",
]