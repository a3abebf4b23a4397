import pytest

from reencode.probe_stream import (
    AudioStream,
    ProbeStream,
    StreamDisposition,
    StreamTags,
    SubtitleStream,
)

DISPOSITION = {
    "default": 1,
    "dub": 0,
    "original": 0,
    "comment": 0,
    "lyrics": 0,
    "karaoke": 0,
    "forced": 1,
    "hearing_impaired": 0,
    "visual_impaired": 0,
    "clean_effects": 0,
    "attached_pic": 0,
    "timed_thumbnails": 0,
}

TAGS = {
    "language": "eng",
    "title": "Main",
    "BPS": "640000",
    "NUMBER_OF_FRAMES": "1234",
    "NUMBER_OF_BYTES": "98765",
    "_STATISTICS_WRITING_APP": "mkvmerge",
    "_STATISTICS_WRITING_DATE_UTC": "2024-01-01 00:00:00",
    "_STATISTICS_TAGS": "BPS DURATION",
    "ENCODER": "Lavc60",
    "DURATION": "00:42:10.500000000",
}


def _common(codec_type):
    return {
        "index": 2,
        "codec_name": "ac3",
        "codec_long_name": "ATSC A/52A (AC-3)",
        "codec_tag_string": "[0][0][0][0]",
        "codec_tag": "0x0000",
        "codec_type": codec_type,
        "r_frame_rate": "0/0",
        "avg_frame_rate": "0/0",
        "time_base": "1/1000",
        "start_pts": 7,
        "start_time": "0.007000",
        "disposition": dict(DISPOSITION),
        "tags": dict(TAGS),
    }


def test_disposition_reads_flags():
    disposition = StreamDisposition.from_json(DISPOSITION)
    assert disposition.default == 1
    assert disposition.forced == 1
    assert disposition.dub == 0
    assert disposition.captions == -1
    assert disposition.still_image == -1


def test_disposition_defaults_are_minus_one():
    disposition = StreamDisposition()
    assert disposition.default == -1
    assert disposition.timed_thumbnails == -1


def test_disposition_missing_flag_raises():
    data = dict(DISPOSITION)
    del data["karaoke"]
    with pytest.raises(ValueError):
        StreamDisposition.from_json(data)


def test_disposition_missing_object_raises():
    with pytest.raises(ValueError):
        StreamDisposition.from_json(None)


def test_disposition_string_flag_raises():
    data = dict(DISPOSITION, dub="yes")
    with pytest.raises(TypeError):
        StreamDisposition.from_json(data)


def test_tags_read_all_keys():
    tags = StreamTags.from_json(TAGS)
    assert tags.language == TAGS["language"]
    assert tags.title == TAGS["title"]
    assert tags.bps == TAGS["BPS"]
    assert tags.number_of_frames == TAGS["NUMBER_OF_FRAMES"]
    assert tags.number_of_bytes == TAGS["NUMBER_OF_BYTES"]
    assert tags.statistics_writing_app == TAGS["_STATISTICS_WRITING_APP"]
    assert tags.statistics_writing_date_utc == TAGS["_STATISTICS_WRITING_DATE_UTC"]
    assert tags.statistics_tags == TAGS["_STATISTICS_TAGS"]
    assert tags.encoder == TAGS["ENCODER"]
    assert tags.duration == TAGS["DURATION"]


def test_tags_absent_object_is_empty():
    assert StreamTags.from_json(None) == StreamTags()
    assert StreamTags.from_json({}).language == ""


def test_tags_partial_leaves_others_empty():
    tags = StreamTags.from_json({"language": "jpn"})
    assert tags.language == "jpn"
    assert tags.duration == ""


def test_tags_non_object_raises():
    with pytest.raises(TypeError):
        StreamTags.from_json(["eng"])


def test_probe_stream_reads_common_fields():
    data = _common("audio")
    data["extradata_size"] = 16
    stream = ProbeStream.from_json(data)
    assert stream.index == 2
    assert stream.codec_name == "ac3"
    assert stream.codec_type == "audio"
    assert stream.time_base == "1/1000"
    assert stream.start_pts == 7
    assert stream.start_time == "0.007000"
    assert stream.extradata_size == 16
    assert stream.disposition.forced == 1
    assert stream.tags.language == "eng"


def test_probe_stream_optional_fields_keep_defaults():
    stream = ProbeStream.from_json({"disposition": DISPOSITION})
    assert stream.index == -1
    assert stream.codec_name == ""
    assert stream.extradata_size == -1
    assert stream.tags == StreamTags()


def test_probe_stream_wrong_type_raises():
    data = _common("audio")
    data["codec_name"] = 5
    with pytest.raises(TypeError):
        ProbeStream.from_json(data)


def test_audio_stream_reads_sample_fields():
    data = _common("audio")
    data.update(
        sample_fmt="fltp",
        sample_rate="48000",
        channels=6,
        channel_layout="5.1(side)",
        bits_per_sample=0,
        initial_padding=0,
    )
    stream = AudioStream.from_json(data)
    assert stream.sample_fmt == "fltp"
    assert stream.sample_rate == "48000"
    assert stream.channels == 6
    assert stream.channel_layout == "5.1(side)"
    assert stream.bits_per_sample == 0
    assert stream.initial_padding == 0
    assert stream.codec_name == "ac3"


def test_audio_stream_missing_sample_fields_default():
    stream = AudioStream.from_json(_common("audio"))
    assert stream.channels == -1
    assert stream.bits_per_sample == -1
    assert stream.sample_rate == ""


def test_subtitle_stream_reads_duration():
    data = _common("subtitle")
    data.update(duration_ts=2530000, duration="2530.000000", extradata_size=99)
    stream = SubtitleStream.from_json(data)
    assert stream.codec_type == "subtitle"
    assert stream.duration_ts == 2530000
    assert stream.duration == "2530.000000"
    assert stream.extradata_size == -1


def test_subtitle_stream_without_duration():
    stream = SubtitleStream.from_json(_common("subtitle"))
    assert stream.duration_ts == -1
    assert stream.duration == ""


@pytest.mark.parametrize("key", ["index", "codec_name", "time_base", "start_pts"])
def test_subtitle_stream_requires_common_fields(key):
    data = _common("subtitle")
    del data[key]
    with pytest.raises(ValueError):
        SubtitleStream.from_json(data)


def test_subtitle_stream_requires_disposition():
    data = _common("subtitle")
    del data["disposition"]
    with pytest.raises(ValueError):
        SubtitleStream.from_json(data)


def test_stream_from_non_object_raises():
    with pytest.raises(TypeError):
        AudioStream.from_json("audio")