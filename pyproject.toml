[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minisynth"
version = "0.1.0"
description = "A small monophonic synthesizer: oscillators, ADSR envelope, note helpers and sample rendering."
requires-python = ">=3.10"
dependencies = []
keywords = ["synthesizer", "audio", "adsr", "oscillator", "midi", "dsp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minisynth"]

[tool.pytest.ini_options]
addopts = "-ra"
