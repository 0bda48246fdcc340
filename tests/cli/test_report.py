"""Tests for cycle report formatting."""
from __future__ import annotations

from slncyclic.report import format_cycle, format_cycles, format_report


class TestFormatCycle:
    def test_default_separator(self) -> None:
        assert format_cycle(["a", "b", "a"]) == "a.b.a"

    def test_custom_separator(self) -> None:
        assert format_cycle(["App", "Core", "App"], separator=" -> ") == "App -> Core -> App"

    def test_non_string_nodes(self) -> None:
        assert format_cycle([1, 2, 1]) == "1.2.1"


class TestFormatCycles:
    def test_joined_in_given_order(self) -> None:
        cycles = [["b", "c", "b"], ["a", "a"]]
        assert format_cycles(cycles) == "b.c.b;a.a"

    def test_empty(self) -> None:
        assert format_cycles([]) == ""


class TestFormatReport:
    def test_report_lists_every_cycle(self) -> None:
        report = format_report([["a", "b", "a"], ["c", "c"]])
        lines = report.splitlines()
        assert lines[0] == "=== Cycles ==="
        assert lines[1] == "cycles=2"
        assert "a.b.a" in lines[2]
        assert "(length 2)" in lines[2]
        assert "c.c" in lines[3]
        assert "(length 1)" in lines[3]

    def test_report_without_cycles(self) -> None:
        assert format_report([], label="App.sln") == "=== App.sln ===\ncycles=0"
