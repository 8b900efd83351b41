"""
Cross-parser properties: source order, idempotence, content limits and
behaviour on large or pathological inputs.
"""

import time

import pytest

from src.parsing.act_models import ParserConfig
from src.parsing.format_router import parse_act


HTML_DOC = "".join(
    f"<B>CHAPTER {c}: Part {c}</B>"
    + "".join(f"<B>{c}{s}. Heading {s}</B><P>Text of section {c}{s} long enough.</P>" for s in range(1, 6))
    for c in range(1, 6)
)

TEXT_DOC = "\n".join(
    f"Chapter {c}: Part {c}\n" + "\n".join(f"{c}{s}. Text of section {c}{s} long enough." for s in range(1, 6))
    for c in range(1, 6)
)


@pytest.fixture(params=["html", "text"])
def document(request):
    return request.param, HTML_DOC if request.param == "html" else TEXT_DOC


class TestSourceOrder:
    def test_provisions_follow_source_offsets(self, document, unknown_identity):
        fmt, raw = document
        act = parse_act(raw, unknown_identity, fmt)
        assert len(act.provisions) == 25

        offsets = [raw.index(f"{p.section}. ") for p in act.provisions]
        assert offsets == sorted(offsets)

    def test_sections_never_sorted_numerically(self, unknown_identity):
        html = "<B>10. Ten</B> tenth section text <B>2. Two</B> second section text"
        act = parse_act(html, unknown_identity, "html")
        assert [p.section for p in act.provisions] == ["10", "2"]

    def test_chapter_attribution_matches_preceding_heading(self, document, unknown_identity):
        fmt, raw = document
        act = parse_act(raw, unknown_identity, fmt)
        for provision in act.provisions:
            chapter_number = provision.section[0]
            assert provision.chapter.endswith(f"Part {chapter_number}")


class TestIdempotence:
    def test_identical_output(self, document, unknown_identity):
        fmt, raw = document
        first = parse_act(raw, unknown_identity, fmt)
        second = parse_act(raw, unknown_identity, fmt)
        assert first == second
        assert first.to_json() == second.to_json()


class TestContentLimits:
    @pytest.mark.parametrize("fmt", ["html", "text"])
    def test_ten_chars_dropped_eleven_kept(self, fmt, unknown_identity):
        # "1. " + 7 chars = 10, "2. " + 8 chars = 11
        if fmt == "html":
            raw = "<B>1. abcdefg</B><B>2. abcdefgh</B>"
        else:
            raw = "1. abcdefg\n2. abcdefgh"
        act = parse_act(raw, unknown_identity, fmt)
        assert [p.section for p in act.provisions] == ["2"]
        assert len(act.provisions[0].content) == 11

    @pytest.mark.parametrize("fmt", ["html", "text"])
    def test_truncated_to_8000(self, fmt, unknown_identity):
        body = "z" * 9000
        raw = f"<B>1. Long</B>{body}" if fmt == "html" else f"1.\n{body}"
        act = parse_act(raw, unknown_identity, fmt, ParserConfig())
        assert len(act.provisions[0].content) == 8000

    def test_definitions_read_before_truncation(self, computers_identity):
        text = "1.\n" + "In this Law - " + "w " * 4500 + '"late term" - defined after the cap;'
        act = parse_act(text, computers_identity, "text", ParserConfig())
        assert len(act.provisions[0].content) == 8000
        assert [d.term for d in act.definitions] == ["late term"]


class TestLargeInputs:
    """Multi-megabyte inputs must parse in roughly linear time."""

    LIMIT_SECONDS = 20

    def _timed(self, raw, identity, fmt):
        start = time.perf_counter()
        act = parse_act(raw, identity, fmt)
        return act, time.perf_counter() - start

    def test_unclosed_bold_tags(self, unknown_identity):
        raw = "<B>1. " * 400_000
        act, elapsed = self._timed(raw, unknown_identity, "html")
        assert act.provisions == ()
        assert elapsed < self.LIMIT_SECONDS

    def test_unclosed_chapter_headings(self, unknown_identity):
        raw = "<B>CHAPTER X: heading text " * 200_000
        act, elapsed = self._timed(raw, unknown_identity, "html")
        assert act.provisions == ()
        assert elapsed < self.LIMIT_SECONDS

    def test_quote_flood_in_definitional_section(self, computers_identity):
        raw = "1.\n" + '"a" - b ' * 300_000
        act, elapsed = self._timed(raw, computers_identity, "text")
        assert len(act.provisions) == 1
        assert act.definitions == ()
        assert elapsed < self.LIMIT_SECONDS

    def test_curly_quote_flood(self, privacy_identity):
        raw = "<B>3. Definitions</B>" + "“" * 500_000
        act, elapsed = self._timed(raw, privacy_identity, "html")
        assert len(act.provisions) == 1
        assert elapsed < self.LIMIT_SECONDS

    def test_many_lines(self, computers_identity):
        raw = "\n".join(f"{i}. Section number {i} with some text." for i in range(1, 100_001))
        act, elapsed = self._timed(raw, computers_identity, "text")
        assert len(act.provisions) == 100_000
        assert elapsed < self.LIMIT_SECONDS

    def test_basic_law_many_lines(self, basic_law_identity):
        raw = "\n".join(f"Label {i}\n{i}. Section number {i} text." for i in range(1, 50_001))
        act, elapsed = self._timed(raw, basic_law_identity, "text")
        assert len(act.provisions) == 50_000
        assert elapsed < self.LIMIT_SECONDS
