"""
Test cases for the camera driver's shutdown ordering.
"""
import asyncio
import importlib
import sys
import threading
import unittest
from pathlib import Path
from unittest import mock

sys.path.insert(0, str(Path(__file__).parent.parent))

from flashcard_gestures.config import Cfg
from flashcard_gestures.controller_mock import MockReviewController
from flashcard_gestures.gestures import GestureProcessor


class SlowCapture:
    """VideoCapture stand-in whose read blocks until allowed to finish."""

    def __init__(self):
        self.reading = threading.Event()
        self.finish_read = threading.Event()
        self.opened = True
        self.released_while_reading = None

    def read(self):
        self.reading.set()
        self.finish_read.wait(timeout=5)
        self.reading.clear()
        return False, None

    def isOpened(self):
        return self.opened

    def release(self):
        self.released_while_reading = self.reading.is_set()
        self.opened = False


class TestShutdown(unittest.TestCase):

    def setUp(self):
        # The driver's OpenCV/MediaPipe calls are not exercised here
        patcher = mock.patch.dict(sys.modules, {
            "cv2": mock.MagicMock(), "mediapipe": mock.MagicMock(), "numpy": mock.MagicMock(),
        })
        patcher.start()
        self.addCleanup(patcher.stop)
        main = importlib.import_module("flashcard_gestures.main")

        cfg = Cfg()
        self.app = main.GestureReviewApp.__new__(main.GestureReviewApp)
        self.app.config = cfg
        self.app.cap = SlowCapture()
        self.app.tracker = mock.MagicMock()
        self.app.controller = MockReviewController()
        self.app.gesture_processor = GestureProcessor(cfg)
        self.app.hand_state = None

    def test_cancel_waits_for_pending_read(self):
        cap = self.app.cap

        async def scenario():
            task = asyncio.create_task(self.app.run())
            while not cap.reading.is_set():
                await asyncio.sleep(0.01)
            task.cancel()
            asyncio.get_running_loop().call_later(0.1, cap.finish_read.set)
            with self.assertRaises(asyncio.CancelledError):
                await task

        asyncio.run(scenario())
        self.assertFalse(cap.opened)
        self.assertIs(cap.released_while_reading, False)
        self.assertFalse(self.app.gesture_processor.active)

    def test_failed_read_ends_loop_and_releases(self):
        cap = self.app.cap
        cap.finish_read.set()
        asyncio.run(self.app.run())
        self.assertFalse(cap.opened)
        self.assertIs(cap.released_while_reading, False)


if __name__ == '__main__':
    unittest.main()
