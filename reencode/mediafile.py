"""Names and paths derived from a media file's original name."""

from __future__ import annotations

import re

from reencode.log import debug
from reencode.text import all_groups, first_match, replace_all, replace_pattern

# Matches names such as "The.Big.Bang.Theory.S01E01.720p.HDTV.ReEnc-Max.mkv"
# or "The Big Bang Theory - S01E01 - Pilot.mkv".
_MEDIA_PATTERN = re.compile(
    r"(.+?)(?:[-\. ]+)(season.?\d{1,}|s\d{1,}).?"
    r"((?:E|X)[0-9]{2}(?:-(?:E|X)[0-9]{2}|(?:E|X)[0-9]{2})*(?:-(?:E|X)[0-9]{2})?)",
    re.IGNORECASE,
)
_EXTENSION = re.compile(r"(\.mkv|\.avi|\.srt|\.idx|\.sub)", re.IGNORECASE)
_QUALITY = re.compile(r"(1080p|720p|480p)", re.IGNORECASE)
_SEASON_WORD = re.compile(r"season|s", re.IGNORECASE)
_EPISODE_MARK = re.compile(r"[XxE]")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    """Parse the integer at the start of ``text``, ignoring what follows it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    return int(match.group(1))


class MediaFile:
    """A media file's original name and the names it is renamed and converted to."""

    def __init__(self, name: str = "", path: str = "") -> None:
        self.cwd = path
        self.original_file_name = name
        self.original_full_path = ""
        self.modified_file_name = ""
        self.modified_file_name_ext = ""
        self.conversion_name = ""
        self.conversion_path = ""
        self.rename_path = ""
        self.episode = ""
        self.series = ""
        self.ext = ""
        self.number = 0
        self.size = 0
        self.new_size = 0
        self.validation_size = 0
        self.quality = 0
        self.season = 0

    def rename(self, quality_name: str = "") -> None:
        """Work out the standard names and paths for this file.

        Series files become ``{series} - s{season}{episode} [{quality_name}]``
        and are converted into ``{cwd}/{series} Season {season}/``; other
        files are converted to ``{cwd}/converted/{name}.mkv``. Raises
        ValueError when the name has no known extension.
        """
        name = self.original_file_name
        groups = all_groups(name, _MEDIA_PATTERN)

        self.original_full_path = f"{self.cwd}/{name}"
        self._resolve_extension(name)
        self._resolve_quality(name)

        if not groups:
            debug("[MediaFile] Could not match media name: ", name)
            self.modified_file_name = replace_all(name, self.ext, "")
            self.modified_file_name_ext = self.modified_file_name + ".mkv"
            self.conversion_name = self.modified_file_name_ext
            self.conversion_path = f"{self.cwd}/converted/{self.conversion_name}"
            return

        debug("[MediaFile] Matched media name: ", name)
        series_match, season_match, episode_match = groups[:3]
        self._resolve_series(series_match)
        self._resolve_season(season_match)
        self._resolve_episode(episode_match)

        season = str(self.season)
        if quality_name:
            self.modified_file_name = (
                f"{self.series} - s{season}{self.episode} [{quality_name}]"
            )
        else:
            self.modified_file_name = (
                f"{self.series.replace('.', '')} - s{season}{self.episode}"
            )

        if self.ext in (".mkv", ".avi"):
            self.modified_file_name_ext = self.modified_file_name + ".mkv"
        else:
            self.modified_file_name_ext = self.modified_file_name + self.ext

        self.rename_path = f"{self.cwd}/{self.modified_file_name}{self.ext}"
        self.conversion_name = self.modified_file_name + self.ext
        self.conversion_path = (
            f"{self.cwd}/{self.series} Season {season}/{self.conversion_name}"
        )
        debug("[MediaFile] Original file:", name)
        debug("[MediaFile] Renamed file:", self.conversion_name)

    def _resolve_extension(self, name: str) -> None:
        ext = first_match(name, _EXTENSION)
        if not ext:
            raise ValueError(f"Could not find extension for file: {name}")
        self.ext = ext

    def _resolve_series(self, series_match: str) -> None:
        if not series_match:
            raise ValueError(
                f"Could not find series name for file: {self.original_full_path}"
            )
        self.series = replace_all(series_match, ".", " ")

    def _resolve_season(self, season_match: str) -> None:
        if not season_match:
            raise ValueError(
                f"Could not find season number for file: {self.original_full_path}"
            )
        self.season = _leading_int(replace_pattern(season_match, _SEASON_WORD, ""))

    def _resolve_episode(self, episode_match: str) -> None:
        if not episode_match:
            raise ValueError(
                f"Could not find episode number for file: {self.original_full_path}"
            )
        self.episode = replace_pattern(episode_match, _EPISODE_MARK, "e")

    def _resolve_quality(self, name: str) -> None:
        quality = first_match(name, _QUALITY)
        if not quality:
            debug("[MediaFile] Could not find quality for file: ",
                  self.original_full_path)
            return
        self.quality = _leading_int(replace_all(quality, "p", ""))