"""Video streams, container format and the complete ffprobe result."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from reencode.log import debug
from reencode.probe_stream import (
    AudioStream,
    ProbeStream,
    SubtitleStream,
    _as_int,
    _as_str,
    _base_fields,
    _mapping,
    _required,
)
from reencode.text import is_match

_VIDEO_REQUIRED_INTS = (
    "width",
    "height",
    "coded_width",
    "coded_height",
    "closed_captions",
    "has_b_frames",
)
_VIDEO_REQUIRED_STRINGS = ("sample_aspect_ratio", "display_aspect_ratio", "pix_fmt")
_VIDEO_OPTIONAL_STRINGS = (
    "color_range",
    "color_space",
    "color_transfer",
    "color_primaries",
    "chroma_location",
    "field_order",
    "nal_length_size",
    "bits_per_raw_sample",
)


@dataclass
class VideoStream(ProbeStream):
    """A video stream with its geometry and colour properties."""

    profile: str = ""
    width: int = -1
    height: int = -1
    coded_width: int = -1
    coded_height: int = -1
    closed_captions: int = -1
    film_grain: int = -1
    has_b_frames: int = -1
    sample_aspect_ratio: str = ""
    display_aspect_ratio: str = ""
    pix_fmt: str = ""
    level: int = -1
    color_range: str = ""
    color_space: str = ""
    color_transfer: str = ""
    color_primaries: str = ""
    chroma_location: str = ""
    field_order: str = ""
    refs: int = -1
    is_avc: int = -1
    nal_length_size: str = ""
    bits_per_raw_sample: str = ""

    @classmethod
    def from_json(cls, data: Any) -> VideoStream:
        """Parse a video stream object.

        The common stream fields, the frame geometry, aspect ratios, pixel
        format and level are required; colour details are optional.
        """
        obj = _mapping(data, "video stream")
        debug("[VideoStream] parsing video stream")
        values = _base_fields(obj, required=True, with_extradata=False)

        raw_avc = obj.get("is_avc")
        if raw_avc is not None:
            values["is_avc"] = int(
                is_match(_as_str(raw_avc, "is_avc"), "true", re.IGNORECASE)
            )

        for key in _VIDEO_REQUIRED_INTS:
            values[key] = _as_int(_required(obj, key), key)
        for key in _VIDEO_REQUIRED_STRINGS:
            values[key] = _as_str(_required(obj, key), key)
        values["level"] = _as_int(_required(obj, "level"), "level")

        for key in _VIDEO_OPTIONAL_STRINGS:
            if obj.get(key) is not None:
                values[key] = _as_str(obj[key], key)
        if obj.get("refs") is not None:
            values["refs"] = _as_int(obj["refs"], "refs")
        return cls(**values)


@dataclass
class FormatTags:
    """Metadata tags of the container."""

    encoder: str = ""

    @classmethod
    def from_json(cls, data: Any) -> FormatTags:
        """Parse a container tags object; no tag is read from it yet."""
        _mapping(data, "format tags")
        debug("[FormatTags] parsing format tags")
        return cls()


_FORMAT_STRINGS = (
    "filename",
    "format_name",
    "format_long_name",
    "start_time",
    "duration",
    "size",
    "bit_rate",
)
_FORMAT_INTS = ("nb_streams", "nb_programs", "probe_score")


@dataclass
class ProbeFormat:
    """Container-level information reported by ffprobe."""

    filename: str = ""
    nb_streams: int = -1
    nb_programs: int = -1
    format_name: str = ""
    format_long_name: str = ""
    start_time: str = ""
    duration: str = ""
    bit_rate: str = ""
    size: str = ""
    probe_score: int = -1
    tags: FormatTags = field(default_factory=FormatTags)

    @classmethod
    def from_json(cls, data: Any) -> ProbeFormat:
        """Parse a format object; every field is optional."""
        obj = _mapping(data, "format")
        debug("[ProbeFormat] parsing format")
        values: dict[str, Any] = {}
        for key in _FORMAT_STRINGS:
            if obj.get(key) is not None:
                values[key] = _as_str(obj[key], key)
        for key in _FORMAT_INTS:
            if obj.get(key) is not None:
                values[key] = _as_int(obj[key], key)
        values["tags"] = FormatTags.from_json(obj.get("tags"))
        return cls(**values)


@dataclass
class ProbeResult:
    """The parsed output of ``ffprobe -show_format -show_streams``."""

    format: ProbeFormat = field(default_factory=ProbeFormat)
    video_streams: list[VideoStream] = field(default_factory=list)
    audio_streams: list[AudioStream] = field(default_factory=list)
    subtitle_streams: list[SubtitleStream] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> ProbeResult:
        """Parse ffprobe output given as a JSON object or as JSON text.

        Streams are sorted by ``codec_type``; streams of other types are
        ignored.
        """
        if isinstance(data, (str, bytes, bytearray)):
            data = json.loads(data)
        obj = _mapping(data, "probe result")
        result = cls(format=ProbeFormat.from_json(obj.get("format")))

        streams = obj.get("streams")
        if streams is None:
            streams = []
        if not isinstance(streams, list):
            raise TypeError("streams must be a JSON array")

        for stream in streams:
            if not isinstance(stream, Mapping):
                raise TypeError("each stream must be a JSON object")
            kind = stream.get("codec_type")
            if kind == "video":
                result.video_streams.append(VideoStream.from_json(stream))
            elif kind == "audio":
                result.audio_streams.append(AudioStream.from_json(stream))
            elif kind == "subtitle":
                result.subtitle_streams.append(SubtitleStream.from_json(stream))
        return result