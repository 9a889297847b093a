"""Tests for output mode dispatch and Rich renderers."""

from __future__ import annotations

import json

from graphpoet.output.formatters import OutputSettings, format_result
from graphpoet.output.renderers import _bridge_positions, render_quiet, render_result
from graphpoet.services.result import ServiceResult

POEM = ServiceResult(
    ok=True,
    op="poem",
    data={
        "poem": "Test of the system.",
        "input": "Test the system.",
        "corpus": "mugar.txt",
        "bridges": [{"index": 1, "after": "Test", "word": "of", "score": 2}],
    },
    meta={"backend": "adjacency", "words": 11, "affinities": 10},
)

AFFINITIES = ServiceResult(
    ok=True,
    op="affinities",
    data={
        "count": 2,
        "vertices": 3,
        "items": [
            {"source": "a", "target": "b", "weight": 2},
            {"source": "b", "target": "c", "weight": 1},
        ],
    },
)

FAILURE = ServiceResult.failure("poem", "CORPUS_UNREADABLE", "Cannot read corpus x", path="x")


class TestFormatResult:
    def test_json_mode(self) -> None:
        out = format_result(POEM, settings=OutputSettings(json_output=True))
        assert json.loads(out)["data"]["poem"] == "Test of the system."

    def test_quiet_mode(self) -> None:
        assert format_result(POEM, settings=OutputSettings(quiet=True)) == "Test of the system."

    def test_default_mode(self) -> None:
        out = format_result(POEM)
        assert out.startswith("OK")
        assert "Test of the system." in out


class TestRenderResult:
    def test_poem(self) -> None:
        out = render_result(POEM)
        assert "poem" in out
        assert "Test of the system." in out
        assert "meta" not in out

    def test_poem_highlights_by_position(self) -> None:
        data = {
            "poem": "Test of the Test of",
            "bridges": [{"index": 1, "after": "Test", "word": "of", "score": 2}],
        }
        assert _bridge_positions(data) == {1}
        out = render_result(ServiceResult(ok=True, op="poem", data=data))
        assert "Test of the Test of" in out

    def test_poem_without_bridges_highlights_nothing(self) -> None:
        assert _bridge_positions({"poem": "Hello world."}) == set()

    def test_poem_verbose_shows_bridges_and_meta(self) -> None:
        out = render_result(POEM, verbose=True)
        assert "+of (score 2)" in out
        assert "backend: adjacency" in out

    def test_bridge_found(self) -> None:
        result = ServiceResult(
            ok=True,
            op="bridge",
            data={"first": "test", "second": "the", "bridge": "of", "score": 2},
        )
        out = render_result(result)
        assert "test -> of -> the" in out
        assert "score: 2" in out

    def test_bridge_missing(self) -> None:
        result = ServiceResult(
            ok=True,
            op="bridge",
            data={"first": "the", "second": "system.", "bridge": None, "score": 0},
        )
        assert "no two-hop path" in render_result(result)

    def test_affinities_table(self) -> None:
        out = render_result(AFFINITIES)
        assert "Source" in out
        assert "Weight" in out
        assert "vertices: 3" in out

    def test_affinities_empty(self) -> None:
        result = ServiceResult(ok=True, op="affinities", data={"count": 0, "items": []})
        assert "count: 0" in render_result(result)

    def test_error(self) -> None:
        out = render_result(FAILURE)
        assert out.startswith("ERROR")
        assert "CORPUS_UNREADABLE" in out
        assert "Cannot read corpus x" in out
        assert "detail" not in out

    def test_error_verbose_shows_detail(self) -> None:
        assert "path: x" in render_result(FAILURE, verbose=True)

    def test_unknown_op_generic(self) -> None:
        out = render_result(ServiceResult(ok=True, op="other", data={"k": "v"}))
        assert "k: v" in out


class TestRenderQuiet:
    def test_affinities_lines(self) -> None:
        assert render_quiet(AFFINITIES) == "a b 2\nb c 1"

    def test_bridge_word(self) -> None:
        result = ServiceResult(ok=True, op="bridge", data={"bridge": "of"})
        assert render_quiet(result) == "of"

    def test_bridge_none(self) -> None:
        result = ServiceResult(ok=True, op="bridge", data={"bridge": None})
        assert render_quiet(result) == ""

    def test_error(self) -> None:
        assert render_quiet(FAILURE) == "ERROR: poem: Cannot read corpus x"
