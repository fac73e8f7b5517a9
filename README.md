# addic7ed

A small library for finding TV show subtitles on the Addic7ed website and
downloading them.

Give it the name of a video file, or any other search the site understands. It
finds the episode page and lists every subtitle available for that episode.
Given a language, it can also pick the subtitle whose release version is the
closest match to the file name.

## Installation

```
pip install addic7ed
```

To run the test suite, install the test extra:

```
pip install "addic7ed[test]"
pytest
```

## Usage

### Find the best subtitle for a file

```python
from addic7ed.client import Client

client = Client()
show_name, subtitle = client.search_best(
    "Shameless.US.S08E11.720p.HDTV.x264-BATV[ettv]", "English"
)
print(show_name)
print(subtitle.version)
subtitle.download_to("Shameless.US.S08E11.srt")
```

`search_best` returns the show name and one `Subtitle`. If only one subtitle
exists in the requested language, that one is returned. Otherwise the
subtitles are grouped by release version, and each version is scored against
the search text. The score combines the average Jaro-Winkler similarity of
their words with a bonus for near-exact word matches. Within the
best-scoring version, a subtitle whose link marks it as updated is preferred.

The scoring helpers can be used directly from `addic7ed.client`:

- `clean_title(title)` reduces a version title such as
  `"Version BATV, 0.00 MBs"` to `"BATV"`.
- `words_from_string(text)` splits text into runs of letters and digits.
- `score_versions(file_name, subtitles_by_version)` scores each version. A
  version or file name without any words scores NaN.
- `find_best_subtitle(scores, subtitles_by_version)` returns the chosen
  subtitle and its score.

String similarity is provided by `addic7ed.similarity.jaro_distance` and
`addic7ed.similarity.jaro_winkler_distance`. Both return 0 for nothing in
common and 1 for identical strings.

### List every subtitle of an episode

```python
from addic7ed.client import Client

show = Client().search_all("This is Us S01E02")
print(show.name)
for subtitle in show.subtitles:
    print(subtitle.language, subtitle.version, subtitle.link)
```

`search_all` returns a `Show` with a `name` and a `subtitles` list. If the
site answers with a list of search results instead of a show page, the first
result is followed.

### Filter and group subtitles

`Subtitles` is a `list` of `Subtitle` records with some helper methods:

```python
import re

from addic7ed.filters import with_language, with_version, with_version_regexp

english = show.subtitles.filter(with_language("english"))
batv = english.filter(with_version("BATV"))
web = show.subtitles.filter(with_version_regexp(re.compile(r"WEB")))

by_version = show.subtitles.group_by_version()
by_language = show.subtitles.group_by_language()
by_anything = show.subtitles.group_by(lambda s: s.link)
```

Language and version filters ignore case and surrounding whitespace.
`with_version_regexp` accepts a pattern string or a compiled pattern and keeps
versions that contain a match.

`Subtitle.is_updated()` is true when the link contains `updated`.
`Subtitle.is_original()` is its opposite.

### Downloading

`Subtitle.download()` returns the content of the subtitle file as bytes.
`Subtitle.download_to(path)` writes the content to a file.

### Errors

Failed searches raise `addic7ed.client.Addic7edError` or one of its
subclasses:

- `ShowNotFoundError`: the search did not lead to a show page.
- `SubtitleNotFoundError`: the show has no subtitle in the requested language.

If the server cannot be reached, searching and downloading raise the built-in
`ConnectionError`.

### Verbose output

Pass `debug=True` to print how pages are found and how versions are scored:

```python
client = Client(debug=True)
```

## What it does not do

This is a library only. It has no command-line tool, and it does not log in
to the site or cache pages.