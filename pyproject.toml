[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "speechkit"
version = "0.1.0"
description = "WAV/PCM reading, hotword biasing, input lists and result helpers for speech recognition pipelines"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "speech",
    "asr",
    "vad",
    "wav",
    "pcm",
    "hotwords",
    "aho-corasick",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Speech",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["speechkit"]

[tool.hatch.build.targets.sdist]
include = ["speechkit", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
