"""
Flashcard Gestures

Classifies hand poses from 2-D hand landmarks and confirms a held pose as a
single flashcard answer (thumbs up = Easy, flat hand = Hard, thumbs down = Wrong).
"""

__version__ = "0.1.0"

from .types import (
    AnswerCommand, AnswerDifficulty, HandState, Holding, HoldUpdate, Idle,
    LandmarkFrame, Point, Pose, ReviewControllerProto, Triggered, POSE_TO_DIFFICULTY,
)
from .config import load_config, Cfg, ConfigError
from .geometry import vector, magnitude, angle_between
from .landmarks import classify_pose, is_finger_extended, is_thumb_down, to_landmark_frame
from .gestures import HoldConfirmation, GestureProcessor, observe_pose, advance_hold, dispatch_answer
from .controller_mock import MockReviewController

__all__ = [
    "AnswerCommand",
    "AnswerDifficulty",
    "HandState",
    "Holding",
    "HoldUpdate",
    "Idle",
    "LandmarkFrame",
    "Point",
    "Pose",
    "ReviewControllerProto",
    "Triggered",
    "POSE_TO_DIFFICULTY",
    "load_config",
    "Cfg",
    "ConfigError",
    "vector",
    "magnitude",
    "angle_between",
    "classify_pose",
    "is_finger_extended",
    "is_thumb_down",
    "to_landmark_frame",
    "HoldConfirmation",
    "GestureProcessor",
    "observe_pose",
    "advance_hold",
    "dispatch_answer",
    "MockReviewController",
]
