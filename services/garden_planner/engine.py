import logging
from pathlib import Path
from typing import Dict, List, Any, Optional

from .answers import to_string_list, toggle_selection
from .definitions import GARDEN_QUESTIONNAIRE
from .loader import load_questionnaire_data, load_questionnaire_from_file
from .models import (
    QuestionnaireConfig, Question, MultiChoiceQuestion, Plan,
    UnknownQuestionError, InvalidSelectionError,
)
from .synthesizer import build_plan

logger = logging.getLogger(__name__)

def resolve_effective_questions(questions: List[Question], answers: Dict[str, Any]) -> List[Question]:
    """Returns the questions whose visibility rule holds for the current answers, in list order."""
    return [question for question in questions if question.is_visible(answers)]

class QuestionnaireEngine:
    """
    Holds the garden questionnaire and turns answers into effective question
    sequences and synthesized plans.
    """
    def __init__(self, config_path: Optional[str] = None):
        """
        Initializes the engine from the built-in question definitions, or from
        a YAML questionnaire file when `config_path` is given.

        Args:
            config_path: Optional path to a questionnaire YAML file.
        """
        if config_path:
            self.config_path = Path(config_path)
            self.config = load_questionnaire_from_file(str(self.config_path))
            logger.info(f"Loaded questionnaire {self.config.version} from {self.config_path}")
        else:
            self.config_path = None
            self.config = load_questionnaire_data(GARDEN_QUESTIONNAIRE)
        self._build_lookup_maps()

    def _build_lookup_maps(self):
        """Builds a dictionary for quick lookup of questions by ID."""
        self.questions_by_id = {q.id: q for q in self.config.questions}

    @property
    def questions(self) -> List[Question]:
        return list(self.config.questions)

    def get_question(self, question_id: str) -> Question:
        try:
            return self.questions_by_id[question_id]
        except KeyError:
            raise UnknownQuestionError(f"Unknown question ID: {question_id}")

    def get_questions(self) -> List[Dict[str, Any]]:
        """Returns the full question list as plain dictionaries for presentation."""
        return [q.model_dump(exclude_none=True) for q in self.config.questions]

    def effective_questions(self, answers: Dict[str, Any]) -> List[Question]:
        # Recomputed on every call; visibility can change with any answer edit
        return resolve_effective_questions(self.config.questions, answers)

    def visible_answers(self, answers: Dict[str, Any]) -> Dict[str, Any]:
        """
        Drops answers to questions that are currently hidden (or unknown).
        Hidden answers stay in the caller's mapping but never reach the plan.
        """
        visible_ids = {q.id for q in self.effective_questions(answers)}
        return {qid: value for qid, value in answers.items() if qid in visible_ids}

    def toggle_option(self, answers: Dict[str, Any], question_id: str, value: str) -> List[str]:
        """Applies the multi-select toggle policy using the question's configured maximum."""
        question = self.get_question(question_id)
        if not isinstance(question, MultiChoiceQuestion):
            raise InvalidSelectionError(f"Question '{question_id}' is not a multi-choice question")
        current = to_string_list(answers.get(question_id))
        return toggle_selection(current, value, question.max)

    def build_plan(self, answers: Dict[str, Any]) -> Plan:
        visible = self.visible_answers(answers)
        hidden = sorted(set(answers) - set(visible))
        if hidden:
            logger.debug(f"Ignoring answers to hidden or unknown questions: {hidden}")
        return build_plan(visible)
