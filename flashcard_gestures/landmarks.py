"""
Hand landmark validation and pose classification from 2-D landmark geometry.
"""
import math
import numbers
from typing import Any, Dict, Optional, Sequence, Tuple

from .geometry import angle_between, vector
from .types import LandmarkFrame, Point, Pose


NUM_LANDMARKS = 21
WRIST = 0
THUMB_BASE = 2
THUMB_TIP = 4

# Finger name -> (tip index, middle joint index)
FINGER_JOINTS: Dict[str, Tuple[int, int]] = {
    "thumb": (4, 2),
    "index": (8, 6),
    "middle": (12, 10),
    "ring": (16, 14),
    "pinky": (20, 18),
}

EXTENDED_MAX_ANGLE = math.pi / 2
THUMB_DOWN_MIN_ANGLE = 5 * math.pi / 9  # 100 degrees


def _to_point(raw: Any) -> Optional[Point]:
    try:
        x, y = raw[0], raw[1]
    except (TypeError, IndexError, KeyError):
        return None
    if isinstance(x, bool) or isinstance(y, bool):
        return None
    if not isinstance(x, numbers.Real) or not isinstance(y, numbers.Real):
        return None
    x, y = float(x), float(y)
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    return (x, y)


def to_landmark_frame(raw: Optional[Sequence[Any]]) -> Optional[LandmarkFrame]:
    """
    Validate raw landmarks and convert them to a LandmarkFrame.

    Args:
        raw: Sequence of 21 points (x, y[, z, ...]) or None if no hand was detected

    Returns:
        List of 21 (x, y) float tuples, or None if the input is absent or malformed
    """
    if raw is None or isinstance(raw, (str, bytes)):
        return None
    try:
        if len(raw) != NUM_LANDMARKS:
            return None
    except TypeError:
        return None

    frame = []
    for item in raw:
        point = _to_point(item)
        if point is None:
            return None
        frame.append(point)
    return frame


def is_finger_extended(tip: Point, middle: Point, wrist: Point) -> bool:
    """
    Check if a finger is extended.

    The finger is extended when the joint-to-tip vector stays roughly aligned
    with the wrist-to-joint vector (angle below 90 degrees). A curled finger
    bends back toward the palm.
    """
    angle = angle_between(vector(middle, tip), vector(wrist, middle))
    if angle is None:
        return False
    return angle < EXTENDED_MAX_ANGLE


def thumb_angle_down(thumb_tip: Point, thumb_base: Point, wrist: Point) -> bool:
    """Thumb bends more than 100 degrees away from the wrist-to-base direction."""
    angle = angle_between(vector(wrist, thumb_base), vector(thumb_base, thumb_tip))
    if angle is None:
        return False
    return angle > THUMB_DOWN_MIN_ANGLE


def thumb_position_down(thumb_tip: Point, thumb_base: Point, wrist: Point) -> bool:
    """Thumb tip is lower on screen than both the wrist and the thumb base."""
    # Image coordinates: larger y is lower
    return thumb_tip[1] > wrist[1] and thumb_tip[1] > thumb_base[1]


def is_thumb_down(thumb_tip: Point, thumb_base: Point, wrist: Point) -> bool:
    """
    Check if the thumb is pointing down.

    Either signal is sufficient: the bend angle at the thumb base, or the
    tip sitting below both the wrist and the thumb base.
    """
    return (thumb_angle_down(thumb_tip, thumb_base, wrist)
            or thumb_position_down(thumb_tip, thumb_base, wrist))


def fingers_extended(frame: LandmarkFrame) -> Dict[str, bool]:
    """
    Evaluate extension of every finger.

    Args:
        frame: Validated landmark frame

    Returns:
        Mapping of finger name to extended flag, in thumb..pinky order
    """
    wrist = frame[WRIST]
    return {
        name: is_finger_extended(frame[tip], frame[middle], wrist)
        for name, (tip, middle) in FINGER_JOINTS.items()
    }


def classify_pose(raw: Optional[Sequence[Any]]) -> Pose:
    """
    Classify one hand's landmarks into a Pose.

    Precedence is thumbs up, thumbs down, flat hand. Thumbs down is checked
    before flat hand so an open hand dropping its thumb reports THUMBS_DOWN.

    Args:
        raw: 21 landmarks for one hand, or None if no hand was detected

    Returns:
        The classified pose; Pose.NONE for absent/malformed input or no match
    """
    frame = to_landmark_frame(raw)
    if frame is None:
        return Pose.NONE

    extended = fingers_extended(frame)
    others = [extended[name] for name in ("index", "middle", "ring", "pinky")]
    thumb_down = is_thumb_down(frame[THUMB_TIP], frame[THUMB_BASE], frame[WRIST])

    if extended["thumb"] and not any(others) and not thumb_down:
        return Pose.THUMBS_UP
    if thumb_down:
        return Pose.THUMBS_DOWN
    if extended["thumb"] and all(others):
        return Pose.FLAT_HAND
    return Pose.NONE
