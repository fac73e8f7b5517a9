"""Search client for the Addic7ed subtitle website."""

from __future__ import annotations

import math
import unicodedata
from collections.abc import Mapping
from itertools import groupby
from urllib.parse import quote_plus

import requests
from bs4 import BeautifulSoup, Comment, Tag

from addic7ed.filters import with_language
from addic7ed.similarity import jaro_winkler_distance
from addic7ed.subtitles import USER_AGENT, Show, Subtitle, Subtitles

BASE_URL = "http://www.addic7ed.com"
_EXACT_MATCH_WEIGHT = 10
_EXACT_MATCH_THRESHOLD = 0.9


class Addic7edError(Exception):
    """Base error for failed searches on the Addic7ed website."""


class ShowNotFoundError(Addic7edError):
    """No show page could be found for a search."""


class SubtitleNotFoundError(Addic7edError):
    """The show exists but has no subtitle in the requested language."""


def clean_title(title: str) -> str:
    """Reduce a version title such as ``"Version BATV, 0.00 MBs"`` to ``"BATV"``."""
    first = title.split(",")[0]
    words = first.split()
    if len(words) >= 2:
        return words[1]
    if words:
        return words[0]
    return first


def _is_word_char(char: str) -> bool:
    return unicodedata.category(char)[0] in "LN"


def words_from_string(text: str) -> list[str]:
    """Split ``text`` into runs of letters and digits; everything else separates."""
    return ["".join(run) for is_word, run in groupby(text, key=_is_word_char) if is_word]


def _score_version(title_words: list[str], version: str) -> float:
    version_words = words_from_string(version)
    comparisons = len(version_words) * len(title_words)
    if comparisons == 0:
        return math.nan

    exact_matches = 0.0
    similarity = 0.0
    for title_word in title_words:
        for version_word in version_words:
            distance = jaro_winkler_distance(version_word.lower(), title_word.lower())
            if distance > _EXACT_MATCH_THRESHOLD:
                exact_matches += distance
            similarity += distance

    # Many words to compare lower the average similarity.
    computed_similarity = similarity / comparisons
    # Tends to 1 when every word of the version appears in the file name.
    exact_proportion = exact_matches / len(version_words)
    exact_score = exact_proportion * exact_matches * _EXACT_MATCH_WEIGHT
    return computed_similarity + exact_score


def score_versions(
    file_name: str, subtitles_by_version: Mapping[str, Subtitles]
) -> dict[str, float]:
    """Score each version by how closely its words match those of ``file_name``.

    A version without words, or a file name without words, scores NaN.
    """
    title_words = words_from_string(file_name)
    return {version: _score_version(title_words, version) for version in subtitles_by_version}


def find_best_subtitle(
    scores: Mapping[str, float], subtitles_by_version: Mapping[str, Subtitles]
) -> tuple[Subtitle, float]:
    """Pick the subtitle of the best scored version, preferring an updated one."""
    best_score = 0.0
    best_version = ""
    for version, score in scores.items():
        if score > best_score:
            best_version = version
            best_score = score

    if best_version == "":
        best_version = next(iter(subtitles_by_version), "")

    best_sub = Subtitle()
    for sub in subtitles_by_version.get(best_version, ()):
        best_sub = sub
        if sub.is_updated():
            break
    return best_sub, best_score


def _fetch_document(url: str) -> BeautifulSoup:
    headers = {
        # Avoid getting cached pages
        "Cache-Control": "no-cache",
        "User-Agent": USER_AGENT,
    }
    try:
        response = requests.get(url, headers=headers)
    except requests.RequestException as exc:
        raise ConnectionError(f"Unable to reach addic7ed server: {exc}") from exc
    return BeautifulSoup(response.content, "html.parser")


def _node_text(node) -> str:
    if isinstance(node, Comment):
        return ""
    return node.get_text()


class Client:
    """Searches show pages and subtitles on the Addic7ed website."""

    def __init__(self, debug: bool = False) -> None:
        self.debug = debug
        self._doc: BeautifulSoup | None = None

    def _log(self, message: str) -> None:
        if self.debug:
            print(message)

    def _find_show_name(self) -> str:
        self._log("Searching for show name in current page...")
        show = ""
        for element in self._doc.select(".titulo"):
            node = next(
                (
                    child
                    for child in element.contents
                    if not (isinstance(child, Tag) and child.name == "small")
                ),
                None,
            )
            if node is not None:
                show = _node_text(node).strip()
                break
        if not show:
            self._log("Show name is not found in current indexed page")
            raise ShowNotFoundError("not found")
        self._log(f"Show name is: {show}")
        return show

    def _find_results(self) -> list[str]:
        return [
            link["href"]
            for table in self._doc.select(".tabel")
            for link in table.find_all("a")
            if link.has_attr("href")
        ]

    def _fetch_show_page(self, query: str) -> str:
        self._log("Searching show using addic7ed search page...")
        url = f"{BASE_URL}/srch.php?search={quote_plus(query)}&Submit=Search"
        self._log(f"Searching show using URL: {url}")
        self._doc = _fetch_document(url)
        self._log("Addic7ed is up and we found a page")

        try:
            show = self._find_show_name()
        except ShowNotFoundError:
            self._log("Current page is not a show page, trying to find what is it...")
            results = self._find_results()
            if not results:
                self._log("Current page is not a result page either.")
                raise ShowNotFoundError(f"show not found for filename {query}") from None
            self._log(
                f"Current page is a results page containing {len(results)} results. "
                "Getting show page from first result..."
            )
            self._doc = _fetch_document(f"{BASE_URL}/{results[0]}")
            show = self._find_show_name()
        self._log(f"Current page is a show page: {show}")
        return show

    def search_all(self, query: str) -> Show:
        """Find the show matching ``query`` (usually a video file name) and all its subtitles."""
        show_name = self._fetch_show_page(query)
        subtitles = Subtitles()
        for table in self._doc.select(".tabel95"):
            if table.get("align") != "center":
                continue
            title = "".join(el.get_text() for el in table.select(".NewsTitle")).strip()
            version = clean_title(title)
            for language_el in table.select(".language"):
                language = language_el.get_text().strip()
                parent = language_el.parent
                if parent is None:
                    continue
                for button in parent.select(".face-button"):
                    href = button.get("href")
                    if href is None:
                        continue
                    subtitles.append(
                        Subtitle(
                            language=language,
                            version=version,
                            link=f"{BASE_URL}{href}".strip(),
                        )
                    )
        return Show(name=show_name, subtitles=subtitles)

    def search_best(self, query: str, lang: str) -> tuple[str, Subtitle]:
        """Find the show matching ``query`` and its best subtitle in ``lang``.

        Returns the show name and the chosen subtitle.
        """
        show = self.search_all(query)
        self._log("Found subtitles:")
        for sub in show.subtitles:
            self._log(f"- {sub.version} ({sub.language}) | {sub.link}")

        candidates = show.subtitles.filter(with_language(lang))
        if not candidates:
            raise SubtitleNotFoundError(
                f'Unable to find any subtitles for show "{show.name}" in "{lang}". '
                "Check available languages on Addic7ed website and retry"
            )
        if len(candidates) == 1:
            self._log(f"Only one subtitle found for lang {lang}")
            return show.name, candidates[0]

        by_version = candidates.group_by_version()
        self._log(
            f"Found {len(by_version)} different versions of subtitles, "
            "trying to find the best one..."
        )
        scores = score_versions(query, by_version)
        self._log("Scores are:")
        for version, score in scores.items():
            self._log(f" - Version: {version} => Score: {score}")

        best_sub, best_score = find_best_subtitle(scores, by_version)
        self._log(f"=> Best sub: {best_sub.version} ({best_sub.link}) with score {best_score}")
        return show.name, best_sub