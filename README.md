# reencode

Building blocks for batch re-encoding of TV episode files with `ffmpeg`.
The package works out a tidy name and output path for each episode, knows
the encoders, hardware accelerators, tunes and quality presets an encode
can use, reads `ffprobe` JSON output into typed records, and can run a
shell command while handing each line of its output to a parser.

Nothing here depends on anything outside the standard library.

## What is in the package

| Module | Contents |
| --- | --- |
| `reencode.text` | `join`, `splitv`, regex helpers (`is_match`, `first_match`, `all_matches`, `all_groups`), `truncate`, `replace_all`, `replace_pattern`, `to_lower`, `format_number` |
| `reencode.timefmt` | `epoch`, `duration_format`, `date_format`, `time_format` |
| `reencode.colors` | 256-colour terminal escapes (`fg_red`, `bright`, `dim`, ...) |
| `reencode.log` | `send`, `debug`, `set_debug`, and the line buffers `Log` and `LogBuffer` |
| `reencode.codecs` | `Encoder`, `Decoder`, `HWAccelerator` and `Tune` enums |
| `reencode.formats` | `MediaFormat`, the preset table `FORMATS`, `add_custom_format`, `scaled_height`, `gcd` |
| `reencode.probe_stream` | `ProbeStream`, `AudioStream`, `SubtitleStream`, `StreamTags`, `StreamDisposition` |
| `reencode.probe` | `ProbeResult`, `ProbeFormat`, `FormatTags`, `VideoStream` |
| `reencode.mediafile` | `MediaFile`: names and paths from names such as `Show.S01E02.720p.mkv` |
| `reencode.properties` | `VideoProperties` and `WorkingProperties` dataclasses |
| `reencode.process` | `MediaProcess` and `ProcessStatus`: run a command, parse its output line by line |

## Examples

Encoders and tunes are looked up by the names `ffmpeg` uses:

```python
from reencode.codecs import Encoder, Tune

encoder = Encoder.from_name("hevc_nvenc")
encoder.is_hevc()       # True
encoder.is_hardware()   # True
Encoder.from_name("nope") is Encoder.INVALID   # True

Tune.from_name("FILM") is Tune.FILM            # True, case does not matter
Tune.from_name("unknown") is Tune.DEFAULT      # True
```

Scaling keeps the aspect ratio and always gives an even height:

```python
from reencode.formats import FORMATS, scaled_height

scaled_height(1920, 1080, 1280)   # 720
FORMATS["720p"].crop              # "1280:534"
```

Working out the names for an episode:

```python
from reencode.mediafile import MediaFile

episode = MediaFile("The.Big.Bang.Theory.S01E01.720p.HDTV.mkv", "/videos")
episode.rename("720p")
episode.modified_file_name
# "The Big Bang Theory - s1e01 [720p]"
episode.conversion_path
# "/videos/The Big Bang Theory Season 1/The Big Bang Theory - s1e01 [720p].mkv"
```

A name with no known extension (`.mkv`, `.avi`, `.srt`, `.idx`, `.sub`)
makes `rename` raise `ValueError`. Names that are not in a season/episode
form are sent to `{cwd}/converted/{name}.mkv`.

Parsing a probe result, given either the JSON text or the decoded object:

```python
from reencode.probe import ProbeResult

result = ProbeResult.from_json(ffprobe_output)
result.video_streams[0].width
result.format.duration
```

Running a command and reacting to its output:

```python
from reencode.process import MediaProcess

class Printer(MediaProcess):
    def parse(self, data):
        print("got:", data.rstrip())

Printer(settings=None, media=None).start("echo hello")
```

Standard error is merged into standard output, and a line ends at either
`\n` or `\r`, so `ffmpeg`'s progress lines arrive one at a time. `stop()`
ends the run at the next character of output.

Debug output from the parsers is off until `reencode.log.set_debug(True)`.

## What the package does not do

There is no command-line program and no pipeline that carries a file from
probing through conversion to validation. The package does not build the
`ffmpeg` argument list for an encode, and it has no parsers for `ffmpeg`'s
progress or validation output: `MediaProcess.parse` only logs each line
unless a subclass overrides it. Those steps are left to the code that uses
these pieces.

## Tests

Install the `test` extra and run `pytest` from the project root.