"""Subtitle records, collections of them, and downloading."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from os import PathLike

import requests

USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64; rv:12.0) Gecko/20100101 Firefox/12.0"


@dataclass(frozen=True)
class Subtitle:
    """A TV-show subtitle as listed on the Addic7ed website."""

    language: str = ""
    version: str = ""
    link: str = ""

    def __str__(self) -> str:
        return f"Link: {self.link}, Version: {self.version}, Language: {self.language}"

    def is_updated(self) -> bool:
        """Whether this is the updated variant of a subtitle with several variants."""
        return "updated" in self.link

    def is_original(self) -> bool:
        """Whether this is the original variant of a subtitle with several variants."""
        return not self.is_updated()

    def download(self) -> bytes:
        """Fetch the subtitle file and return its content."""
        headers = {
            # Avoid getting cached pages
            "Cache-Control": "no-cache",
            "User-Agent": USER_AGENT,
            # Without it the server redirects to the web page instead of the file
            "Referer": self.link,
        }
        try:
            response = requests.get(self.link, headers=headers)
        except requests.RequestException as exc:
            raise ConnectionError(f"Unable to reach addic7ed server: {exc}") from exc
        return response.content

    def download_to(self, path: str | PathLike[str]) -> None:
        """Fetch the subtitle file and write it to ``path``."""
        content = self.download()
        with open(path, "wb") as out:
            out.write(content)


class Subtitles(list):
    """A list of subtitles with filtering and grouping helpers."""

    def __init__(self, items: Iterable[Subtitle] = ()) -> None:
        super().__init__(items)

    def __str__(self) -> str:
        return "[{" + "},{".join(str(sub) for sub in self) + "}]"

    def filter(self, predicate: Callable[[Subtitle], bool]) -> Subtitles:
        """Keep the subtitles for which ``predicate`` returns true."""
        return Subtitles(sub for sub in self if predicate(sub))

    def group_by(self, key: Callable[[Subtitle], str]) -> dict[str, Subtitles]:
        """Group subtitles by the value ``key`` gives for each of them."""
        groups: dict[str, Subtitles] = {}
        for sub in self:
            groups.setdefault(key(sub), Subtitles()).append(sub)
        return groups

    def group_by_version(self) -> dict[str, Subtitles]:
        """Group subtitles by version."""
        return self.group_by(lambda sub: sub.version)

    def group_by_language(self) -> dict[str, Subtitles]:
        """Group subtitles by language."""
        return self.group_by(lambda sub: sub.language)


@dataclass
class Show:
    """A TV-show episode with its name and its subtitles."""

    name: str
    subtitles: Subtitles = field(default_factory=Subtitles)