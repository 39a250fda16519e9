from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Annotated, List, Dict, Any, Literal, Optional, Union

from .answers import to_string_list

class Option(BaseModel):
    label: str
    value: str
    accent: Optional[str] = None # Gradient classes used by the UI when selected

class VisibilityRule(BaseModel):
    """
    Declarative visibility predicate: the question is shown only when the
    answer to `question_id` contains `includes` and/or equals `equals`.
    """
    question_id: str
    includes: Optional[str] = None
    equals: Optional[str] = None

    def evaluate(self, answers: Dict[str, Any]) -> bool:
        value = answers.get(self.question_id)
        if value is None:
            return False
        if self.includes is not None and self.includes not in to_string_list(value):
            return False
        if self.equals is not None and str(value) != self.equals:
            return False
        return True

    def __call__(self, answers: Dict[str, Any]) -> bool:
        return self.evaluate(answers)

class BaseQuestion(BaseModel):
    id: str
    prompt: str
    helper: Optional[str] = None
    depends_on: Optional[VisibilityRule] = None
    required: bool = True

    def is_visible(self, answers: Dict[str, Any]) -> bool:
        """Questions without a rule are always shown."""
        if self.depends_on is None:
            return True
        return self.depends_on.evaluate(answers)

class SingleChoiceQuestion(BaseQuestion):
    type: Literal['single'] = 'single'
    options: List[Option]

class MultiChoiceQuestion(BaseQuestion):
    type: Literal['multi'] = 'multi'
    options: List[Option]
    min: Optional[int] = None
    max: Optional[int] = None

class ScaleQuestion(BaseQuestion):
    type: Literal['scale'] = 'scale'
    min: float
    max: float
    min_label: str
    max_label: str

class FreeTextQuestion(BaseQuestion):
    type: Literal['text'] = 'text'
    placeholder: Optional[str] = None

Question = Annotated[
    Union[SingleChoiceQuestion, MultiChoiceQuestion, ScaleQuestion, FreeTextQuestion],
    Field(discriminator='type'),
]

class QuestionnaireConfig(BaseModel):
    version: str
    questions: List[Question]

# --- Synthesized output ---

class PlantHighlight(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    items: List[str]
    detail: str

class Plan(BaseModel):
    """The synthesized garden recommendation. Serialized with camelCase keys."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    headline: str
    style_name: str
    style_narrative: str
    feelings: List[str]
    use_cases: List[str]
    plant_highlights: List[PlantHighlight]
    layout_ideas: List[str]
    feature_notes: List[str]
    maintenance_note: str
    next_steps: List[str]

# Custom Error Classes
class UnknownQuestionError(KeyError):
    """Raised when a question ID is not part of the questionnaire."""
    pass

class InvalidSelectionError(ValueError):
    """Raised when a multi-select toggle targets a question that is not multi-choice."""
    pass
