"""Ready-made predicates for ``Subtitles.filter``."""

from __future__ import annotations

import re
from collections.abc import Callable

from addic7ed.subtitles import Subtitle


def with_language(lang: str) -> Callable[[Subtitle], bool]:
    """Keep subtitles in the given language, ignoring case and surrounding spaces."""
    wanted = lang.strip().casefold()
    return lambda sub: sub.language.strip().casefold() == wanted


def with_version(version: str) -> Callable[[Subtitle], bool]:
    """Keep subtitles of the given version, ignoring case and surrounding spaces."""
    wanted = version.strip().casefold()
    return lambda sub: sub.version.strip().casefold() == wanted


def with_version_regexp(pattern: str | re.Pattern[str]) -> Callable[[Subtitle], bool]:
    """Keep subtitles whose version contains a match for ``pattern``."""
    regex = re.compile(pattern)
    return lambda sub: regex.search(sub.version.strip()) is not None