"""Output quality formats and resolution arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class MediaFormat:
    """An output quality: rate control values and target geometry."""

    name: str = ""
    crf: int = 0
    bitrate: float = 0.0
    min_bitrate: float = 0.0
    max_bitrate: float = 0.0
    width: int = 0
    height: int = 0
    crop: str = ""
    scale: str = ""


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two numbers."""
    while b != 0:
        a, b = b, a % b
    return a


def scaled_height(width: int, height: int, new_width: int) -> int:
    """Return the even height that keeps the aspect ratio at ``new_width``."""
    new_height = math.ceil(height / width * new_width)
    return new_height if new_height % 2 == 0 else new_height + 1


FORMATS: dict[str, MediaFormat] = {
    fmt.name: fmt
    for fmt in (
        MediaFormat("2160p", 24, 30, 30, 40, 3840, 2160, "3840:1600", "3840: 2160"),
        MediaFormat("1440p", 24, 20, 20, 27, 2560, 1440, "2560:1068", "2560:1440"),
        MediaFormat("1080p", 24, 2.0, 1.6, 2.2, 1920, 1080, "1920:800", "1920:1080"),
        MediaFormat("1080pm", 24, 2.0, 1.6, 2.2, 1920, 1080, "1920:870", "1920:1080"),
        MediaFormat("1080pn", 24, 2.0, 1.6, 2.2, 1920, 1080, "1920:960", "1920:1080"),
        MediaFormat("720p", 24, 1.4, 1.2, 1.8, 1280, 720, "1280:534", "1280:720"),
        MediaFormat("720pm", 24, 1.4, 1.2, 1.8, 1280, 720, "1280:580", "1280:720"),
        MediaFormat("720pn", 24, 1.4, 1.2, 1.8, 1280, 720, "1280:640", "1280:720"),
        MediaFormat("480p", 24, 0.6, 0.4, 0.8, 854, 480, "854:356", "854:480"),
        MediaFormat("480pc", 24, 0.6, 0.4, 0.8, 1138, 640, "854:720", "1138:640"),
    )
}


def add_custom_format(height: int) -> MediaFormat:
    """Register a 16:9 format of the given height and return it.

    The height is kept as given; width and crop height are rounded up to
    even numbers.
    """
    width = math.ceil(height * 1.777777777777778)
    if width % 2:
        width += 1
    crop_height = math.ceil(width / 2.4)
    if crop_height % 2:
        crop_height += 1
    fmt = MediaFormat(
        name=f"{height}p",
        crf=24,
        width=width,
        height=height,
        crop=f"{width}:{crop_height}",
        scale=f"{width}:{height}",
    )
    FORMATS[fmt.name] = fmt
    return fmt