# services/garden_planner/session.py
# Headless step-by-step controller for walking a user through the garden questionnaire.

import logging
from typing import Dict, Any, List, Optional

from .engine import QuestionnaireEngine
from .models import Question, MultiChoiceQuestion, Plan

logger = logging.getLogger(__name__)


def _is_empty(value: Any) -> bool:
    return value is None or value == '' or (isinstance(value, list) and not value)


class QuestionnaireSession:
    """
    Owns the answers and the current position for one pass through the questionnaire.

    The effective sequence is recomputed from the answers on every access, so
    changing an earlier answer can insert or remove later questions.
    The free-text notes question is deliberately optional (`required: False` in the
    definitions), so the navigation gate lets it stay empty.
    """

    def __init__(self, engine: Optional[QuestionnaireEngine] = None):
        self.engine = engine or QuestionnaireEngine()
        self.answers: Dict[str, Any] = {}
        self.current_index = 0

    @property
    def effective_questions(self) -> List[Question]:
        return self.engine.effective_questions(self.answers)

    @property
    def total_questions(self) -> int:
        return len(self.effective_questions)

    @property
    def is_complete(self) -> bool:
        return self.current_index >= self.total_questions

    @property
    def current_question(self) -> Optional[Question]:
        questions = self.effective_questions
        if self.current_index < len(questions):
            return questions[self.current_index]
        return None

    @property
    def progress(self) -> float:
        """Fraction of the effective sequence already passed, between 0 and 1."""
        total = self.total_questions
        if total == 0:
            return 1.0
        return min(self.current_index, total) / total

    def set_answer(self, question_id: str, value: Any) -> None:
        self.engine.get_question(question_id)
        self.answers = {**self.answers, question_id: value}

    def toggle_option(self, question_id: str, value: str) -> List[str]:
        selections = self.engine.toggle_option(self.answers, question_id, value)
        self.answers = {**self.answers, question_id: selections}
        return selections

    def can_advance(self) -> bool:
        """Forward navigation gate: required answers present and multi-select minimums met."""
        question = self.current_question
        if question is None:
            return False
        value = self.answers.get(question.id)
        if _is_empty(value):
            return not question.required
        if isinstance(question, MultiChoiceQuestion):
            if not isinstance(value, list) or len(value) < (question.min or 0):
                return False
        return True

    def next(self) -> bool:
        """Moves forward one question. Returns False when the gate blocks or the session is complete."""
        if self.is_complete:
            return False
        if not self.can_advance():
            logger.debug(f"Navigation blocked on question '{self.current_question.id}'")
            return False
        self.current_index += 1
        if self.is_complete:
            logger.info("Questionnaire complete, plan ready")
        return True

    def back(self) -> None:
        self.current_index = max(self.current_index - 1, 0)

    def restart(self) -> None:
        self.answers = {}
        self.current_index = 0

    def plan(self) -> Optional[Plan]:
        """Builds the plan from the current answers once the sequence is exhausted."""
        if not self.is_complete:
            return None
        return self.engine.build_plan(self.answers)
