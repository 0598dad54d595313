"""
Main application: camera driver for hands-free flashcard answers.
"""
import asyncio
import contextlib
import logging
import time
from typing import Optional

import cv2
from dotenv import load_dotenv

from .config import Cfg, load_config
from .controller_mock import MockReviewController
from .gestures import GestureProcessor, dispatch_answer
from .tracker import HandsTracker, draw_landmarks, draw_status
from .types import AnswerCommand, HandState, ReviewControllerProto

logger = logging.getLogger(__name__)


def now_ms() -> float:
    return time.monotonic() * 1000.0


class GestureReviewApp:
    """Main application class: captures frames and drives the gesture processor."""

    def __init__(self, config: Optional[Cfg] = None,
                 controller: Optional[ReviewControllerProto] = None):
        """Initialize the application with configuration."""
        self.config = config or load_config()
        self.tracker = HandsTracker(
            max_num_hands=self.config.mediapipe.max_num_hands,
            min_detection_conf=self.config.mediapipe.min_detection_confidence,
            min_tracking_conf=self.config.mediapipe.min_tracking_confidence
        )
        self.controller = controller or MockReviewController()
        self.gesture_processor = GestureProcessor(self.config)
        self.hand_state: Optional[HandState] = None

        self.cap = cv2.VideoCapture(self.config.camera.index)
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.config.camera.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.config.camera.height)
        self.cap.set(cv2.CAP_PROP_FPS, self.config.camera.fps)

        if not self.cap.isOpened():
            raise RuntimeError(f"Failed to open camera {self.config.camera.index}")

    async def _handle(self, command: Optional[AnswerCommand]) -> None:
        if command is not None:
            await dispatch_answer(self.controller, command)

    async def _tick_loop(self) -> None:
        """Advance hold progress between frames on the configured interval."""
        interval_s = self.config.hold.tick_interval_ms / 1000.0
        while True:
            await asyncio.sleep(interval_s)
            command, state = self.gesture_processor.tick(now_ms())
            self.hand_state = state
            await self._handle(command)

    def toggle_camera(self) -> None:
        """Pause or resume gesture processing; pausing discards any hold."""
        active = not self.gesture_processor.active
        self.gesture_processor.set_active(active)
        logger.info("Gesture input %s", "enabled" if active else "disabled")

    async def run(self) -> None:
        """Run the main application loop."""
        logger.info("Starting %s", self.config.display.window_name)
        logger.info("Hold a pose for %.1fs: thumbs up = Easy, flat hand = Hard, thumbs down = Wrong",
                    self.config.hold.hold_duration_ms / 1000)
        logger.info("Keys: 'f' flip card, 'c' toggle gestures, 'q' quit")

        ticker = asyncio.create_task(self._tick_loop())
        read: Optional[asyncio.Future] = None
        try:
            while True:
                # Read off the event loop so the tick task keeps running;
                # shielded so shutdown can wait for it
                read = asyncio.ensure_future(asyncio.to_thread(self.cap.read))
                ret, frame = await asyncio.shield(read)
                if not ret:
                    logger.warning("Failed to read frame from camera")
                    break

                hands = self.tracker.process(frame) if self.gesture_processor.active else []
                command, state = self.gesture_processor.process_frame(hands, now_ms())
                self.hand_state = state
                await self._handle(command)

                if self.config.display.show_landmarks:
                    for landmarks in hands:
                        frame = draw_landmarks(frame, landmarks)
                frame = draw_status(frame, self.hand_state, self.config.hold.hold_duration_ms,
                                    self.config.display.show_countdown)

                answer_text = "Answer expected" if self.controller.awaiting_answer else "Press 'f' to flip card"
                cv2.putText(frame, answer_text, (10, frame.shape[0] - 20),
                            cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)
                cv2.imshow(self.config.display.window_name, frame)

                key = cv2.waitKey(1) & 0xFF
                if key == ord('q'):
                    break
                if key == ord('c'):
                    self.toggle_camera()
                if key == ord('f') and isinstance(self.controller, MockReviewController):
                    self.controller.show_back()
        finally:
            ticker.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await ticker
            if read is not None and not read.done():
                # VideoCapture is not thread-safe: release only after the read returns
                await asyncio.wait([read])
            self.gesture_processor.set_active(False)
            self.close()

    def close(self) -> None:
        """Release camera and window resources."""
        if self.cap.isOpened():
            self.cap.release()
        self.tracker.close()
        cv2.destroyAllWindows()


async def main() -> None:
    """Entry point for the application."""
    load_dotenv()
    config = load_config()
    logging.basicConfig(
        level=getattr(logging, config.logging.level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = GestureReviewApp(config=config)
    try:
        await app.run()
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")


def run() -> None:
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
