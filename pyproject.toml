[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reencode"
version = "0.1.0"
description = "Building blocks for renaming, probing and re-encoding TV episode files with ffmpeg."
requires-python = ">=3.10"
dependencies = []
keywords = ["ffmpeg", "ffprobe", "video", "transcoding", "hevc", "media", "rename"]
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
    "Topic :: Multimedia :: Video :: Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["reencode"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
