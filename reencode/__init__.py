"""Naming, probe parsing, codec tables and process running for re-encoding video with ffmpeg."""

__version__ = "0.1.0"