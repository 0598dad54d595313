"""
Synthetic landmark frames in image coordinates (larger y = lower on screen).
"""
from typing import Dict, List, Tuple

Point = Tuple[float, float]


def make_frame(points: Dict[int, Point], filler: Point = (100.0, 150.0)) -> List[Point]:
    """Build a 21-point frame; indices not given get the filler point."""
    return [points.get(i, filler) for i in range(21)]


# Fingers curled back toward the palm, wrist at (100, 200)
CURLED_FINGERS = {
    6: (140.0, 150.0), 8: (130.0, 180.0),
    10: (135.0, 150.0), 12: (125.0, 180.0),
    14: (130.0, 155.0), 16: (122.0, 182.0),
    18: (125.0, 160.0), 20: (118.0, 185.0),
}

THUMBS_UP = make_frame({
    0: (100.0, 200.0),
    2: (120.0, 170.0),
    4: (130.0, 110.0),
    **CURLED_FINGERS,
})

# Hand pointing up, every finger straight, wrist at (100, 300)
OPEN_FINGERS = {
    6: (80.0, 180.0), 8: (75.0, 120.0),
    10: (100.0, 170.0), 12: (100.0, 100.0),
    14: (120.0, 180.0), 16: (125.0, 120.0),
    18: (140.0, 200.0), 20: (150.0, 150.0),
}

FLAT_HAND = make_frame({
    0: (100.0, 300.0),
    2: (60.0, 260.0),
    4: (30.0, 220.0),
    **OPEN_FINGERS,
})

THUMBS_DOWN = make_frame({
    0: (100.0, 100.0),
    2: (120.0, 120.0),
    4: (125.0, 170.0),
    6: (140.0, 60.0), 8: (130.0, 90.0),
    10: (135.0, 60.0), 12: (125.0, 90.0),
    14: (130.0, 65.0), 16: (122.0, 92.0),
    18: (125.0, 70.0), 20: (118.0, 95.0),
})

# Open hand whose thumb tip has dropped below the wrist
OPEN_HAND_THUMB_DROPPED = make_frame({
    0: (100.0, 300.0),
    2: (60.0, 260.0),
    4: (60.0, 320.0),
    **OPEN_FINGERS,
})

# Every landmark at the same point: all vectors have zero length
DEGENERATE = [(0.5, 0.5)] * 21
