# tests/test_report.py
"""
Text reports

Covers:
- 1-indexed centroids and points with member counts
- Unassigned points shown as '-'
- write_report to a stream and to stdout
"""

from __future__ import annotations

import io

from kstep import write_report, format_iteration
from kstep.dataio import format_snapshot


def test_report_before_first_step(square_engine):
    text = format_iteration(square_engine)
    lines = text.splitlines()

    assert lines[0] == "Iteration 1"
    assert lines[1] == "  Centroid 1: (0.000, 0.000) members=0"
    assert lines[2] == "  Centroid 2: (10.000, 10.000) members=0"
    assert lines[3] == "  Point 1: (0.000, 0.000) cluster=-"
    assert len(lines) == 1 + 2 + 4
    assert text.endswith("\n")


def test_report_after_step(square_engine):
    square_engine.step()
    lines = format_iteration(square_engine, precision=2).splitlines()

    assert lines[0] == "Iteration 2"
    assert lines[1] == "  Centroid 1: (0.33, 0.33) members=3"
    assert lines[2] == "  Centroid 2: (10.00, 10.00) members=1"
    assert lines[3] == "  Point 1: (0.00, 0.00) cluster=1"
    assert lines[6] == "  Point 4: (10.00, 10.00) cluster=2"


def test_report_history_entry(square_engine):
    square_engine.step()
    square_engine.step()
    assert format_snapshot(square_engine.history[2]).startswith("Iteration 2\n")


def test_write_report_to_stream_and_stdout(square_engine, capsys):
    buf = io.StringIO()
    write_report(square_engine, buf)
    assert buf.getvalue() == format_iteration(square_engine)

    write_report(square_engine)
    assert capsys.readouterr().out == format_iteration(square_engine)
