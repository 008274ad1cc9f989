"""Tests for the QColor.lighter calibration probe."""

import sys

import pytest

from hover_audit.design.calibration import compare_with_qt
from hover_audit.errors import CalibrationUnavailable


def test_unavailable_without_qt(monkeypatch):
    monkeypatch.setitem(sys.modules, "PyQt6.QtGui", None)
    with pytest.raises(CalibrationUnavailable):
        compare_with_qt(levels=[30])


def test_simulator_tracks_qt_lighter():
    pytest.importorskip("PyQt6.QtGui")
    report = compare_with_qt(levels=range(0, 256, 5))
    assert len(report.samples) == 52
    assert report.samples[0][:2] == (0, 1)
    # The +1 bias keeps the simulator at or just above Qt for dark grays
    assert report.max_deviation <= 2
    worst = report.worst()
    assert worst is not None
