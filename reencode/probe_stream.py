"""Stream records parsed from ffprobe JSON output."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from reencode.log import debug

_MISSING = object()


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError(f"{what} must be a JSON object, not {type(data).__name__}")
    return data


def _as_int(value: Any, key: str) -> int:
    if isinstance(value, (bool, int)):
        return int(value)
    if isinstance(value, float):
        return int(value)
    raise TypeError(f"field {key!r} must be a number, not {type(value).__name__}")


def _as_str(value: Any, key: str) -> str:
    if isinstance(value, str):
        return value
    raise TypeError(f"field {key!r} must be a string, not {type(value).__name__}")


def _required(data: Mapping[str, Any], key: str) -> Any:
    value = data.get(key)
    if value is None:
        raise ValueError(f"missing field {key!r}")
    return value


def _read(data: Mapping[str, Any], key: str, required: bool) -> Any:
    """Return the value at ``key``, or _MISSING when it is optional and absent."""
    if required:
        return _required(data, key)
    value = data.get(key)
    return _MISSING if value is None else value


_DISPOSITION_KEYS = (
    "default",
    "dub",
    "original",
    "comment",
    "lyrics",
    "karaoke",
    "forced",
    "hearing_impaired",
    "visual_impaired",
    "clean_effects",
    "attached_pic",
    "timed_thumbnails",
)


@dataclass
class StreamDisposition:
    """Disposition flags of a stream; -1 means the flag was not reported."""

    default: int = -1
    dub: int = -1
    original: int = -1
    comment: int = -1
    lyrics: int = -1
    karaoke: int = -1
    forced: int = -1
    hearing_impaired: int = -1
    visual_impaired: int = -1
    clean_effects: int = -1
    attached_pic: int = -1
    timed_thumbnails: int = -1
    captions: int = -1
    descriptions: int = -1
    metadata: int = -1
    dependent: int = -1
    still_image: int = -1

    @classmethod
    def from_json(cls, data: Any) -> StreamDisposition:
        """Parse a disposition object; every commonly reported flag is required."""
        obj = _mapping(data, "disposition")
        debug("[StreamDisposition] parsing disposition")
        return cls(**{key: _as_int(_required(obj, key), key) for key in _DISPOSITION_KEYS})


_TAG_KEYS = {
    "language": "language",
    "title": "title",
    "BPS": "bps",
    "NUMBER_OF_FRAMES": "number_of_frames",
    "NUMBER_OF_BYTES": "number_of_bytes",
    "_STATISTICS_WRITING_APP": "statistics_writing_app",
    "_STATISTICS_WRITING_DATE_UTC": "statistics_writing_date_utc",
    "_STATISTICS_TAGS": "statistics_tags",
    "ENCODER": "encoder",
    "DURATION": "duration",
}


@dataclass
class StreamTags:
    """Metadata tags of a stream; absent tags are empty strings."""

    language: str = ""
    title: str = ""
    bps: str = ""
    number_of_frames: str = ""
    number_of_bytes: str = ""
    statistics_writing_app: str = ""
    statistics_writing_date_utc: str = ""
    statistics_tags: str = ""
    encoder: str = ""
    duration: str = ""

    @classmethod
    def from_json(cls, data: Any) -> StreamTags:
        """Parse a tags object; a missing object gives empty tags."""
        obj = _mapping(data, "tags")
        debug("[StreamTags] parsing tags")
        values = {
            attr: _as_str(obj[key], key)
            for key, attr in _TAG_KEYS.items()
            if obj.get(key) is not None
        }
        return cls(**values)


_BASE_STRINGS = (
    "codec_name",
    "codec_long_name",
    "codec_tag_string",
    "codec_tag",
    "codec_type",
    "r_frame_rate",
    "avg_frame_rate",
    "time_base",
)


def _base_fields(
    data: Mapping[str, Any], required: bool, with_extradata: bool = True
) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for key in ("index", "start_pts"):
        raw = _read(data, key, required)
        if raw is not _MISSING:
            values[key] = _as_int(raw, key)
    for key in (*_BASE_STRINGS, "start_time"):
        raw = _read(data, key, required)
        if raw is not _MISSING:
            values[key] = _as_str(raw, key)
    if with_extradata:
        raw = data.get("extradata_size")
        if raw is not None:
            values["extradata_size"] = _as_int(raw, "extradata_size")
    values["disposition"] = StreamDisposition.from_json(data.get("disposition"))
    values["tags"] = StreamTags.from_json(data.get("tags"))
    return values


@dataclass
class ProbeStream:
    """Fields common to every ffprobe stream."""

    index: int = -1
    codec_name: str = ""
    codec_long_name: str = ""
    codec_tag_string: str = ""
    codec_tag: str = ""
    codec_type: str = ""
    r_frame_rate: str = ""
    avg_frame_rate: str = ""
    time_base: str = ""
    start_pts: int = -1
    start_time: str = ""
    extradata_size: int = -1
    disposition: StreamDisposition = field(default_factory=StreamDisposition)
    tags: StreamTags = field(default_factory=StreamTags)

    @classmethod
    def from_json(cls, data: Any) -> ProbeStream:
        """Parse a stream object; scalar fields are optional."""
        obj = _mapping(data, "stream")
        debug("[ProbeStream] parsing stream")
        return cls(**_base_fields(obj, required=False))


@dataclass
class AudioStream(ProbeStream):
    """An audio stream with its sample properties."""

    sample_fmt: str = ""
    sample_rate: str = ""
    channels: int = -1
    channel_layout: str = ""
    bits_per_sample: int = -1
    initial_padding: int = -1

    @classmethod
    def from_json(cls, data: Any) -> AudioStream:
        """Parse an audio stream object; every field is optional."""
        obj = _mapping(data, "audio stream")
        debug("[AudioStream] parsing audio stream")
        values = _base_fields(obj, required=False)
        for key in ("sample_fmt", "sample_rate", "channel_layout"):
            if obj.get(key) is not None:
                values[key] = _as_str(obj[key], key)
        for key in ("channels", "bits_per_sample", "initial_padding"):
            if obj.get(key) is not None:
                values[key] = _as_int(obj[key], key)
        return cls(**values)


@dataclass
class SubtitleStream(ProbeStream):
    """A subtitle stream with its duration."""

    duration_ts: int = -1
    duration: str = ""

    @classmethod
    def from_json(cls, data: Any) -> SubtitleStream:
        """Parse a subtitle stream object; the common scalar fields are required."""
        obj = _mapping(data, "subtitle stream")
        debug("[SubtitleStream] parsing subtitle stream")
        values = _base_fields(obj, required=True, with_extradata=False)
        if obj.get("duration_ts") is not None:
            values["duration_ts"] = _as_int(obj["duration_ts"], "duration_ts")
        if obj.get("duration") is not None:
            values["duration"] = _as_str(obj["duration"], "duration")
        return cls(**values)


def _field_names(cls: type) -> list[str]:
    return [f.name for f in fields(cls)]