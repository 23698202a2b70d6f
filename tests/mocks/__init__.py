"""Test fakes for flexislider."""

from tests.mocks.recorders import PositionRecorder, RecordingHook

# Time needed for an unanimated repaint to finish (two 142ms steps)
REPAINT_MS = 300

__all__ = ["REPAINT_MS", "PositionRecorder", "RecordingHook"]
