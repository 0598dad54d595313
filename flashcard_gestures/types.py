"""
Type definitions for hand pose classification and hold confirmation.
"""
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional, Protocol, Tuple, Union, runtime_checkable


Point = Tuple[float, float]
LandmarkFrame = List[Point]  # exactly 21 points, index 0 = wrist


class Pose(Enum):
    """Recognized hand poses. NONE means no gesture in this frame."""
    THUMBS_UP = "thumbs_up"
    THUMBS_DOWN = "thumbs_down"
    FLAT_HAND = "flat_hand"
    NONE = "none"


class AnswerDifficulty(IntEnum):
    """Difficulty reported back to the review scheduler."""
    WRONG = 0
    HARD = 1
    EASY = 2


POSE_TO_DIFFICULTY = {
    Pose.THUMBS_UP: AnswerDifficulty.EASY,
    Pose.THUMBS_DOWN: AnswerDifficulty.WRONG,
    Pose.FLAT_HAND: AnswerDifficulty.HARD,
}

POSE_LABELS = {
    Pose.THUMBS_UP: "Easy",
    Pose.THUMBS_DOWN: "Wrong",
    Pose.FLAT_HAND: "Hard",
}


@dataclass(frozen=True)
class Idle:
    """No pose is being held."""


@dataclass(frozen=True)
class Holding:
    """A pose has been held continuously since start_ms."""
    pose: Pose
    start_ms: float


HoldState = Union[Idle, Holding]

IDLE = Idle()


@dataclass(frozen=True)
class Triggered:
    """One-shot event emitted when a hold reaches the configured duration."""
    pose: Pose


@dataclass(frozen=True)
class HoldUpdate:
    """Result of feeding one sample or tick into the hold state machine."""
    state: HoldState
    progress: float  # 0..1, for the countdown indicator
    triggered: Optional[Triggered] = None


@dataclass
class AnswerCommand:
    """Command to submit an answer for the current flashcard."""
    difficulty: AnswerDifficulty
    pose: Pose


@runtime_checkable
class ReviewControllerProto(Protocol):
    """Abstract protocol for controllers that receive confirmed answers."""

    @property
    def awaiting_answer(self) -> bool:
        """True while the card back is shown and an answer is expected."""
        ...

    async def submit_answer(self, difficulty: AnswerDifficulty) -> None:
        """Submit an answer for the current card."""
        ...


@dataclass
class HandState:
    """Per-frame classification and hold status for display."""
    poses: List[Pose]  # one per detected hand, in detection order
    pose: Pose  # primary hand, fed to the hold state machine
    hold: HoldUpdate

    @property
    def progress(self) -> float:
        return self.hold.progress

    @property
    def holding(self) -> bool:
        return isinstance(self.hold.state, Holding)
