import pytest

from reencode.mediafile import MediaFile

CWD = "/data/shows"
DOTTED = "The.Big.Bang.Theory.S01E01.720p.HDTV.ReEnc-Max.mkv"
DASHED = "The Big Bang Theory - S01E01 - Pilot.mkv"
CROSSED = "The Big Bang Theory - 1x01 - Pilot.mkv"


def renamed(name, quality_name="720p"):
    media = MediaFile(name, CWD)
    media.rename(quality_name)
    return media


def test_new_file_starts_empty():
    media = MediaFile(DOTTED, CWD)
    assert media.original_file_name == DOTTED
    assert media.cwd == CWD
    assert media.conversion_path == ""
    assert media.size == 0 and media.new_size == 0 and media.season == 0


def test_full_path_joins_cwd_and_name():
    media = renamed(DOTTED)
    assert media.original_full_path == CWD + "/" + DOTTED


def test_dotted_name_series_season_episode():
    media = renamed(DOTTED)
    assert "." not in media.series
    assert media.series.replace(" ", ".") == "The.Big.Bang.Theory"
    assert media.season == 1
    assert media.episode == "E01".lower()
    assert media.ext == ".mkv"


def test_dotted_name_quality_is_read_from_name():
    media = renamed(DOTTED)
    assert media.quality == 720


def test_dashed_name_gives_same_series_as_dotted():
    assert renamed(DASHED).series == renamed(DOTTED).series
    assert renamed(DASHED).episode == renamed(DOTTED).episode


def test_modified_name_carries_quality_name():
    media = renamed(DOTTED, "1080p")
    assert media.modified_file_name.startswith(media.series + " - s")
    assert media.modified_file_name.endswith(" [1080p]")
    assert media.modified_file_name_ext == media.modified_file_name + ".mkv"


def test_modified_name_without_quality_name_has_no_brackets():
    media = renamed(DOTTED, "")
    assert "[" not in media.modified_file_name
    assert media.modified_file_name.endswith(media.episode)


def test_paths_are_built_from_names():
    media = renamed(DOTTED)
    assert media.rename_path == CWD + "/" + media.modified_file_name + media.ext
    assert media.conversion_name == media.modified_file_name + media.ext
    assert media.conversion_path.startswith(CWD + "/" + media.series + " Season ")
    assert media.conversion_path.endswith("/" + media.conversion_name)


def test_unmatched_name_goes_to_converted_folder():
    media = renamed(CROSSED)
    assert media.series == ""
    assert media.modified_file_name == CROSSED[: -len(".mkv")]
    assert media.conversion_name == media.modified_file_name + ".mkv"
    assert media.conversion_path == CWD + "/converted/" + media.conversion_name


def test_season_word_and_x_episode():
    media = renamed("Show Season 3 X04.mkv")
    assert media.series == "Show"
    assert media.season == 3
    assert media.episode == "e04"


def test_multiple_episodes_are_kept_together():
    media = renamed("Show.S02E01E02.mkv")
    assert media.episode == "e01e02"
    assert media.season == 2


def test_episode_range_keeps_dash():
    media = renamed("Show.S02E01-E02.mkv")
    assert media.episode == "e01-e02"


def test_avi_is_converted_to_mkv_name():
    media = renamed("Show.S01E05.avi")
    assert media.ext == ".avi"
    assert media.modified_file_name_ext.endswith(".mkv")
    assert media.rename_path.endswith(".avi")


def test_subtitle_keeps_its_extension():
    media = renamed("Show.S01E05.srt")
    assert media.modified_file_name_ext == media.modified_file_name + ".srt"


def test_uppercase_quality_is_read():
    media = renamed("Show.S01E05.1080P.mkv")
    assert media.quality == 1080


def test_missing_quality_leaves_zero():
    media = renamed("Show.S01E05.mkv")
    assert media.quality == 0


def test_unknown_extension_raises():
    with pytest.raises(ValueError):
        renamed("Show.S01E05.mp4")


def test_rename_is_repeatable():
    media = MediaFile(DOTTED, CWD)
    media.rename("720p")
    first = media.conversion_path
    media.rename("720p")
    assert media.conversion_path == first