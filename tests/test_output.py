"""Tests for output module (JSON and result sheet export)."""

import json
import random
from pathlib import Path

import pytest

from ghostleg.config import InvalidConfiguration
from ghostleg.generator import generate_ladder
from ghostleg.ladder import Ladder
from ghostleg.output import (
    export_json,
    export_result_sheet,
    ladder_to_dict,
    load_ladder_json,
    render_ascii,
)


def make_rotation_ladder() -> Ladder:
    """Three columns, rungs at slot 0 then slot 1: maps [2, 0, 1]."""
    rows = [[True, False], [False, True]] + [[False, False]] * 10
    return Ladder.from_rows(rows)


class TestLadderToDict:
    """Tests for ladder_to_dict."""

    def test_fields(self):
        data = ladder_to_dict(make_rotation_ladder(), seed=5)
        assert data["version"] == "1.0"
        assert data["seed"] == 5
        assert data["column_count"] == 3
        assert data["row_count"] == 12
        assert data["exclude_self"] is False
        assert data["labels"] == ["1", "2", "3"]
        assert data["rungs"][0] == [1, 0]
        assert data["rungs"][1] == [0, 1]
        assert data["results"] == [2, 0, 1]

    def test_custom_labels(self):
        data = ladder_to_dict(
            make_rotation_ladder(), seed=1, labels=["a", "b", "c"], exclude_self=True
        )
        assert data["labels"] == ["a", "b", "c"]
        assert data["exclude_self"] is True

    def test_is_json_serializable(self):
        json.dumps(ladder_to_dict(make_rotation_ladder(), seed=1))


class TestExportJson:
    """Tests for export_json and load_ladder_json."""

    def test_writes_file(self, tmp_path: Path):
        path = tmp_path / "ladder.json"
        export_json(make_rotation_ladder(), path, seed=3)
        data = json.loads(path.read_text())
        assert data["seed"] == 3
        assert data["results"] == [2, 0, 1]

    def test_load_restores_board(self, tmp_path: Path):
        ladder = generate_ladder(5, True, random.Random(4))
        path = tmp_path / "ladder.json"
        export_json(ladder, path, seed=4, exclude_self=True)
        assert load_ladder_json(path) == ladder

    def test_load_rejects_ragged_rows(self, tmp_path: Path):
        """Rows of different widths are refused, not traced."""
        path = tmp_path / "ladder.json"
        path.write_text(json.dumps({"row_count": 2, "rungs": [[1, 0, 0], [0]]}))
        with pytest.raises(InvalidConfiguration, match="width"):
            load_ladder_json(path)

    def test_load_rejects_adjacent_rungs(self, tmp_path: Path):
        """Two rungs sharing a line on one row are refused."""
        path = tmp_path / "ladder.json"
        path.write_text(
            json.dumps({"row_count": 2, "rungs": [[0, 0, 0], [1, 1, 0]]})
        )
        with pytest.raises(InvalidConfiguration, match="adjacent"):
            load_ladder_json(path)

    def test_load_rejects_row_count_mismatch(self, tmp_path: Path):
        path = tmp_path / "ladder.json"
        path.write_text(json.dumps({"row_count": 3, "rungs": [[1, 0], [0, 1]]}))
        with pytest.raises(InvalidConfiguration, match="row_count"):
            load_ladder_json(path)


class TestRenderAscii:
    """Tests for render_ascii."""

    def test_draws_rungs(self):
        lines = render_ascii(make_rotation_ladder()).splitlines()
        assert lines[0] == "1   2   3"
        assert lines[1] == "|   |   |"
        assert lines[2] == "|---|   |"
        assert lines[3] == "|   |---|"
        assert lines[-1] == "1   2   3"

    def test_line_count(self):
        # numbers, lead-in, 12 rows, lead-out, numbers
        assert len(render_ascii(make_rotation_ladder()).splitlines()) == 16


class TestExportResultSheet:
    """Tests for export_result_sheet."""

    def test_creates_file(self, tmp_path: Path):
        path = tmp_path / "result.txt"
        export_result_sheet(make_rotation_ladder(), path, seed=9)
        assert path.exists()

    def test_contents(self, tmp_path: Path):
        path = tmp_path / "result.txt"
        export_result_sheet(
            make_rotation_ladder(), path, seed=9, labels=["Ann", "Bob", "Cy"]
        )
        content = path.read_text()
        assert "GHOSTLEG RESULTS (seed: 9)" in content
        assert "|---|   |" in content
        assert "Ann -> Cy" in content
        assert "Bob -> Ann" in content
        assert "Cy  -> Bob" in content
