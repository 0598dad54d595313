"""
Hold-to-confirm debounce that turns per-frame poses into one-shot answers.
"""
import logging
from typing import Any, List, Optional, Sequence, Tuple

from .config import Cfg
from .landmarks import classify_pose
from .types import (
    IDLE, POSE_TO_DIFFICULTY, AnswerCommand, HandState, HoldState, HoldUpdate,
    Holding, Pose, ReviewControllerProto, Triggered,
)

logger = logging.getLogger(__name__)


def _check_hold(state: Holding, now_ms: float, hold_duration_ms: float) -> HoldUpdate:
    elapsed = now_ms - state.start_ms
    if elapsed >= hold_duration_ms:
        return HoldUpdate(state=IDLE, progress=0.0, triggered=Triggered(state.pose))
    progress = min(max(elapsed, 0.0) / hold_duration_ms, 1.0)
    return HoldUpdate(state=state, progress=progress)


def observe_pose(state: HoldState, pose: Pose, now_ms: float,
                 hold_duration_ms: float) -> HoldUpdate:
    """
    Advance the hold state with one classified sample.

    Args:
        state: Current hold state
        pose: Pose classified for this sample
        now_ms: Sample timestamp in milliseconds (monotonic)
        hold_duration_ms: Time a pose must be held before it triggers

    Returns:
        HoldUpdate with the next state; `triggered` is set only on the sample
        that completes the hold, after which the state is back to Idle
    """
    if pose is Pose.NONE:
        return HoldUpdate(state=IDLE, progress=0.0)

    if isinstance(state, Holding) and state.pose is pose:
        return _check_hold(state, now_ms, hold_duration_ms)

    return HoldUpdate(state=Holding(pose=pose, start_ms=now_ms), progress=0.0)


def advance_hold(state: HoldState, now_ms: float, hold_duration_ms: float) -> HoldUpdate:
    """
    Advance the hold state with a timer tick (no new pose sample).

    Refreshes progress and fires the trigger when the threshold is crossed
    between frames. No-op while idle.
    """
    if isinstance(state, Holding):
        return _check_hold(state, now_ms, hold_duration_ms)
    return HoldUpdate(state=IDLE, progress=0.0)


class HoldConfirmation:
    """
    Owns the hold state for one camera session.

    Features:
    - Starts a hold on any new pose, restarts it when the pose changes
    - Cancels silently when the pose is lost
    - Emits exactly one Triggered event per continuous hold
    - Not thread-safe; the caller serializes observe/advance/reset
    """

    def __init__(self, hold_duration_ms: int = 3000):
        """Initialize the state machine in Idle."""
        if hold_duration_ms <= 0:
            raise ValueError(f"hold_duration_ms must be positive, got {hold_duration_ms}")
        self.hold_duration_ms = hold_duration_ms
        self.state: HoldState = IDLE
        self.progress: float = 0.0

    def observe(self, pose: Pose, now_ms: float) -> HoldUpdate:
        """Feed one classified pose sample."""
        update = observe_pose(self.state, pose, now_ms, self.hold_duration_ms)
        self._apply(update)
        return update

    def advance(self, now_ms: float) -> HoldUpdate:
        """Feed a timer tick."""
        update = advance_hold(self.state, now_ms, self.hold_duration_ms)
        self._apply(update)
        return update

    def reset(self) -> None:
        """Discard any in-progress hold without triggering."""
        if isinstance(self.state, Holding):
            logger.debug("Hold for %s discarded by reset", self.state.pose.value)
        self.state = IDLE
        self.progress = 0.0

    def _apply(self, update: HoldUpdate) -> None:
        previous = self.state
        if update.triggered is not None:
            logger.info("Hold complete, triggering pose: %s", update.triggered.pose.value)
        elif isinstance(update.state, Holding) and update.state != previous:
            logger.debug("Starting hold timer for pose: %s", update.state.pose.value)
        elif isinstance(previous, Holding) and not isinstance(update.state, Holding):
            logger.debug("Pose lost, hold for %s cancelled", previous.pose.value)
        self.state = update.state
        self.progress = update.progress


class GestureProcessor:
    """
    Classifies every detected hand and confirms held poses as answers.

    Each hand is classified independently; the first detected hand drives
    the hold state machine.
    """

    def __init__(self, cfg: Cfg):
        """Initialize gesture processor with configuration."""
        self.cfg = cfg
        self.hold = HoldConfirmation(cfg.hold.hold_duration_ms)
        self.active = True
        self.last_poses: List[Pose] = []

    def process_frame(self, hands: Optional[Sequence[Sequence[Any]]],
                      t_now_ms: float) -> Tuple[Optional[AnswerCommand], HandState]:
        """
        Process one frame of detected hands.

        Args:
            hands: Landmarks for each detected hand (None or empty if no hand)
            t_now_ms: Frame timestamp in milliseconds (monotonic)

        Returns:
            Tuple of (answer_command, hand_state)
        """
        if not self.active:
            return None, self._idle_state()

        poses = [classify_pose(landmarks) for landmarks in (hands or [])]
        primary = poses[0] if poses else Pose.NONE
        self.last_poses = poses

        update = self.hold.observe(primary, t_now_ms)
        return self._to_command(update), HandState(poses=poses, pose=primary, hold=update)

    def tick(self, t_now_ms: float) -> Tuple[Optional[AnswerCommand], HandState]:
        """Advance hold progress between frames."""
        if not self.active:
            return None, self._idle_state()

        update = self.hold.advance(t_now_ms)
        primary = self.last_poses[0] if self.last_poses else Pose.NONE
        return self._to_command(update), HandState(poses=self.last_poses, pose=primary, hold=update)

    def reset(self) -> None:
        """Return to Idle and forget the last classified poses."""
        self.hold.reset()
        self.last_poses = []

    def set_active(self, active: bool) -> None:
        """Enable or disable processing; disabling discards any hold."""
        if not active:
            self.reset()
        self.active = active

    def _idle_state(self) -> HandState:
        return HandState(poses=[], pose=Pose.NONE, hold=HoldUpdate(state=IDLE, progress=0.0))

    @staticmethod
    def _to_command(update: HoldUpdate) -> Optional[AnswerCommand]:
        if update.triggered is None:
            return None
        pose = update.triggered.pose
        return AnswerCommand(difficulty=POSE_TO_DIFFICULTY[pose], pose=pose)


async def dispatch_answer(controller: ReviewControllerProto, command: AnswerCommand) -> bool:
    """
    Forward a confirmed answer to the review controller.

    Returns:
        True if the answer was submitted, False if the controller was not
        expecting one (card front still shown) and the trigger was dropped
    """
    if not controller.awaiting_answer:
        logger.warning("Ignoring %s: no answer expected yet", command.pose.value)
        return False
    logger.info("Submitting answer %s for pose %s", command.difficulty.name, command.pose.value)
    await controller.submit_answer(command.difficulty)
    return True
