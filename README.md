# speechkit

Small building blocks for speech-recognition front ends, in plain Python with
no third-party dependencies.

## Modules

- **`speechkit.wave`**: reading mono 16-bit PCM WAV data.
  - `WaveHeader.from_bytes` parses the 44-byte little-endian header.
  - `WaveHeader.validate` raises `WaveFormatError` unless the data is mono,
    16-bit, format-1 PCM with a consistent byte rate and block align.
  - `read_wav_header(stream)` reads and validates a header. It skips chunks
    up to the `data` chunk and leaves the stream at the payload.
  - `read_wav(path)` returns `(sample_rate, payload_bytes)`.
  - `read_pcm(path)` returns the bytes of a headerless PCM file, trimmed to
    whole samples.
  - `pcm16_to_floats(data, scale=32768.0)` decodes little-endian signed
    16-bit samples to floats.
  - `wav_bytes_payload(buf)` splits an in-memory WAV into its sample rate and
    payload. It does not validate the header.
- **`speechkit.bias_lm`**: `BiasLm`, a hotword biasing automaton.
  - It builds a phone-level prefix tree with Aho–Corasick back-off arcs.
  - `BiasLm.from_hotwords` builds one from a `{hotword: weight}` table, a
    phone-id map, a lexicon function and a splitter. Hotwords that contain
    unknown phones are dropped.
  - `score(state, label)` returns `(bias, new_state)`.
  - `phone_label` and `vocab_word_to_phone_ids` map between ids and phones.
  - `load_increment_bias(path)` reads `bias_lm_conf.increment_weight` from a
    YAML config. It falls back to 20.0 when the value is absent.
- **`speechkit.inputs`**: input helpers.
  - `is_target_file(filename, target)` checks a file's extension.
  - `read_wav_list(path)` returns `(wav_id, wav_path)` pairs. A `.scp` file
    gives one pair per line; any other path gives `("wav_default_id", path)`.
  - `iter_chunks(buff_len, step)` yields `(offset, size, is_final)` for
    streaming.
  - `real_time_factor(compute_micros, audio_seconds)` computes the real-time
    factor.
- **`speechkit.vad_report`**: `format_segments(segments, wav_id, skip_empty=False)`
  renders VAD segments as one line, for example `utt1: [[0,500],[800,1500]]`.
- **`speechkit.punc_text`**: helpers for punctuation input files.
  - `split_string(text, sep)` splits text on a separator and drops empty
    pieces between separators.
  - `read_lines(path)` returns the lines of a UTF-8 file.
- **`speechkit.results`**: result records and a helper.
  - `RecogResult`, `VadResult` and `PuncResult` hold results.
  - `argmax(values)` returns the index of the first largest value.

## Examples

Reading a WAV file:

```python
from speechkit.wave import WaveFormatError, pcm16_to_floats, read_wav

try:
    rate, payload = read_wav("example.wav")
    samples = pcm16_to_floats(payload)
except WaveFormatError as err:
    print("unusable file:", err)
```

Going through an input list in streaming chunks:

```python
from speechkit.inputs import iter_chunks, read_wav_list

for wav_id, wav_path in read_wav_list("wav.scp"):
    print(wav_id, wav_path)

list(iter_chunks(10, 4))  # [(0, 4, False), (4, 4, False), (8, 2, True)]
```

Hotword biasing:

```python
from speechkit.bias_lm import BiasLm

phone_ids = {"<blank>": 0, "a": 1, "b": 2, "c": 3}
lm = BiasLm.from_hotwords(
    {"ab": 1.0},
    increment_bias=20,
    phone_ids=phone_ids,
    word_to_lex=lambda unit: unit,
    splitter=list,
)
bias, state = lm.score(0, 1)      # (20.0, 1)
bias, state = lm.score(state, 2)  # (21.0, 2): hotword completed
```

## What it does not do

The package does not run any neural model, so it does no recognition, no
voice-activity detection and no punctuation itself. It also does not:

- resample audio,
- decode compressed formats,
- keep queues of audio frames or cut audio into segments,
- provide command-line programs.

It supplies the file reading, input handling, biasing and reporting pieces
that such a pipeline uses.

## Running the tests

The tests use pytest, which is declared under the `test` extra:

```
pip install -e .[test]
pytest
```