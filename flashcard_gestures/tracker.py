"""
Hand landmark detection with MediaPipe and overlay drawing with OpenCV.
"""
import math
import cv2
import mediapipe as mp
import numpy as np
from typing import List

from .types import POSE_LABELS, HandState, LandmarkFrame, Pose


# BGR colors for the countdown ring and pose label
POSE_COLORS = {
    Pose.THUMBS_UP: (80, 175, 76),
    Pose.THUMBS_DOWN: (54, 67, 244),
    Pose.FLAT_HAND: (243, 150, 33),
}

FINGER_COLORS = [
    (82, 82, 255),   # thumb
    (80, 175, 76),   # index
    (243, 150, 33),  # middle
    (176, 39, 156),  # ring
    (0, 152, 255),   # pinky
]

FINGERTIPS = {4: "Thumb", 8: "Index", 12: "Middle", 16: "Ring", 20: "Pinky"}


class HandsTracker:
    """Hand landmark tracker using MediaPipe Hands."""

    def __init__(self, max_num_hands: int = 1, min_detection_conf: float = 0.6, min_tracking_conf: float = 0.6):
        """
        Initialize the hands tracker.

        Args:
            max_num_hands: Maximum number of hands to detect
            min_detection_conf: Minimum confidence for hand detection
            min_tracking_conf: Minimum confidence for hand tracking
        """
        self.mp_hands = mp.solutions.hands
        self.hands = self.mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=max_num_hands,
            min_detection_confidence=min_detection_conf,
            min_tracking_confidence=min_tracking_conf
        )

    def process(self, frame_bgr: np.ndarray) -> List[LandmarkFrame]:
        """
        Process a frame and return landmarks for every detected hand.

        Args:
            frame_bgr: Input frame in BGR format

        Returns:
            One list of 21 (x, y) pixel coordinates per hand; empty if no hand detected
        """
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        results = self.hands.process(frame_rgb)

        if not results.multi_hand_landmarks:
            return []

        # Pixel space keeps angles undistorted by the frame's aspect ratio
        height, width = frame_bgr.shape[:2]
        return [
            [(lm.x * width, lm.y * height) for lm in hand.landmark]
            for hand in results.multi_hand_landmarks
        ]

    def close(self) -> None:
        self.hands.close()


def draw_landmarks(frame: np.ndarray, landmarks: LandmarkFrame) -> np.ndarray:
    """
    Draw the hand skeleton with one color per finger.

    Args:
        frame: Input frame
        landmarks: 21 (x, y) pixel coordinates

    Returns:
        Frame with landmarks drawn
    """
    points = [(int(x), int(y)) for x, y in landmarks]

    for finger, color in enumerate(FINGER_COLORS):
        chain = [0] + list(range(finger * 4 + 1, finger * 4 + 5))
        for start, end in zip(chain, chain[1:]):
            cv2.line(frame, points[start], points[end], color, 3)

    # Palm
    for start, end in [(5, 9), (9, 13), (13, 17)]:
        cv2.line(frame, points[start], points[end], (139, 125, 96), 3)

    for px, py in points:
        cv2.circle(frame, (px, py), 6, (82, 82, 255), -1)

    for idx, label in FINGERTIPS.items():
        px, py = points[idx]
        cv2.putText(frame, label, (px + 8, py - 8), cv2.FONT_HERSHEY_SIMPLEX, 0.4, (255, 255, 255), 1)

    return frame


def draw_status(frame: np.ndarray, state: HandState, hold_duration_ms: int,
                show_countdown: bool = True) -> np.ndarray:
    """
    Draw the live pose label and, while holding, a countdown ring.

    Args:
        frame: Input frame
        state: Hand state from the gesture processor
        hold_duration_ms: Configured hold duration, for the seconds display
        show_countdown: Whether to draw the countdown ring

    Returns:
        Frame with status drawn
    """
    if state.pose is not Pose.NONE:
        color = POSE_COLORS[state.pose]
        cv2.putText(frame, f"{state.pose.value} - {POSE_LABELS[state.pose]}", (10, 30),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.7, color, 2)
    else:
        cv2.putText(frame, "No gesture", (10, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.7, (255, 255, 255), 2)

    if show_countdown and state.holding and state.pose is not Pose.NONE:
        height, width = frame.shape[:2]
        center = (width // 2, height // 2)
        radius = 30
        cv2.circle(frame, center, radius, (200, 200, 200), 5)
        cv2.ellipse(frame, center, (radius, radius), -90, 0, 360 * state.progress,
                    POSE_COLORS[state.pose], 5)
        seconds_left = math.ceil((1 - state.progress) * (hold_duration_ms / 1000))
        cv2.putText(frame, f"{seconds_left}s", (center[0] - 12, center[1] + 6),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.6, (255, 255, 255), 2)

    return frame
