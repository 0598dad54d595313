"""
Mock review controller for exercising confirmed gesture answers.
"""
import logging
from typing import List

from .types import AnswerDifficulty

logger = logging.getLogger(__name__)


class MockReviewController:
    """Mock controller that logs answers instead of submitting them."""

    def __init__(self, awaiting_answer: bool = True):
        """Initialize the mock controller."""
        self._awaiting_answer = awaiting_answer
        self.submitted: List[AnswerDifficulty] = []

    @property
    def awaiting_answer(self) -> bool:
        return self._awaiting_answer

    def show_back(self) -> None:
        """Flip the current card so an answer is expected."""
        self._awaiting_answer = True

    def show_front(self) -> None:
        """Show the next card's front; answers are ignored until flipped."""
        self._awaiting_answer = False

    async def submit_answer(self, difficulty: AnswerDifficulty) -> None:
        """Log the answer and move on to the next card's front."""
        self.submitted.append(difficulty)
        self._awaiting_answer = False
        logger.info("[MockReviewController] Answer: %s (call #%d)", difficulty.name, len(self.submitted))
