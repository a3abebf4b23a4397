"""Properties gathered about a video and about the work done on it."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class VideoProperties:
    """What is known about the source video and the size it is converted to."""

    fps: float = 0.0
    total_frames: int = 0
    width: int = 0
    height: int = 0
    crf: int = 0
    converted_resolution: str = ""
    subtitle_provider: str = ""
    converted_height: str = ""
    converted_width: str = ""
    ratio: str = ""
    crop: str = ""


@dataclass
class WorkingProperties:
    """Progress reported by a running conversion or validation."""

    quality: float = 0.0
    bitrate: float = 0.0
    fps: float = 0.0
    completed_frames: int = 0