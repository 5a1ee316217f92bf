"""Tests for table presets."""

import pytest

from tablewriter import Preset, Table, apply_preset


def _table(preset: Preset) -> Table:
    table = Table()
    apply_preset(table, preset)
    table.set_header(["Name", "Rating"])
    table.append(["A", "500"])
    return table


class TestApplyPreset:
    """Tests for apply_preset."""

    def test_ascii(self) -> None:
        assert _table(Preset.ASCII).render_lines() == [
            "+------+--------+",
            "| NAME | RATING |",
            "+------+--------+",
            "| A    |    500 |",
            "+------+--------+",
        ]

    def test_markdown(self) -> None:
        assert _table(Preset.MARKDOWN).render_lines() == [
            "| NAME | RATING |",
            "|------|--------|",
            "| A    |    500 |",
        ]

    def test_plain(self) -> None:
        assert _table(Preset.PLAIN).render_lines() == [
            " NAME  RATING ",
            " A     500    ",
        ]

    def test_ascii_restores_defaults(self) -> None:
        table = Table()
        apply_preset(table, Preset.PLAIN)
        apply_preset(table, Preset.ASCII)
        table.append(["a"])
        assert table.render_lines() == ["+---+", "| a |", "+---+"]

    def test_unknown_preset(self) -> None:
        with pytest.raises(ValueError, match="Unknown preset"):
            apply_preset(Table(), "fancy")  # type: ignore[arg-type]
