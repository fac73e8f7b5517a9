import re

from addic7ed.filters import with_language, with_version, with_version_regexp
from addic7ed.subtitles import Subtitle, Subtitles


def _sample() -> Subtitles:
    return Subtitles(
        [
            Subtitle(version="A", language="French", link="http://addic7ed.com/A-good-show"),
            Subtitle(version="A", language="French", link="http://addic7ed.com/A-good-show-2"),
            Subtitle(version="B", language="French", link="http://addic7ed.com/A-good-show"),
            Subtitle(version="A", language="English", link="http://addic7ed.com/A-good-show"),
            Subtitle(version="A", language="Italian", link="http://addic7ed.com/A-good-show"),
            Subtitle(version="C", language="Italian", link="http://addic7ed.com/A-good-show"),
        ]
    )


def _regexp_sample() -> Subtitles:
    return Subtitles(
        [
            Subtitle(version="TV-something", language="French", link="http://addic7ed.com/A-good-show"),
            Subtitle(
                version="1080p+WAHOO-Team+Dolby-Surround",
                language="French",
                link="http://addic7ed.com/A-good-show-2",
            ),
            Subtitle(version="Another team", language="French", link="http://addic7ed.com/A-good-show"),
            Subtitle(version="AMZON", language="English", link="http://addic7ed.com/A-good-show"),
            Subtitle(
                version="AAMZN.NTb+DEFLATE+ION10",
                language="Italian",
                link="http://addic7ed.com/A-good-show",
            ),
            Subtitle(version="WUT", language="Italian", link="http://addic7ed.com/A-good-show"),
        ]
    )


def test_filter_show():
    with_a = _sample().filter(with_version("A"))
    assert len(with_a) == 4
    with_a_french = with_a.filter(with_language("french"))
    assert len(with_a_french) == 2


def test_filter_regexp():
    subs = _regexp_sample().filter(with_version_regexp(re.compile(".*WAHOO-Team.*")))
    assert len(subs) == 1
    assert subs[0].version == "1080p+WAHOO-Team+Dolby-Surround"


def test_filter_regexp_accepts_string_and_is_unanchored():
    subs = _regexp_sample().filter(with_version_regexp("AMZ"))
    assert [sub.version for sub in subs] == ["AMZON", "AAMZN.NTb+DEFLATE+ION10"]


def test_language_ignores_case_and_spaces():
    sub = Subtitle(version="A", language=" English ", link="x")
    assert with_language("  ENGLISH") (sub) is True
    assert with_language("French")(sub) is False


def test_version_ignores_case_and_spaces():
    sub = Subtitle(version="batv ", language="English", link="x")
    assert with_version(" BATV")(sub) is True
    assert with_version("BAT")(sub) is False