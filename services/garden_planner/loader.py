import yaml
from pydantic import ValidationError
from typing import Dict, Any

from services.garden_planner.models import QuestionnaireConfig, MultiChoiceQuestion, ScaleQuestion

class SpecValidationError(ValueError):
    """Custom exception for questionnaire validation errors not covered by Pydantic."""
    pass

def load_questionnaire_data(data: Dict[str, Any]) -> QuestionnaireConfig:
    """
    Validates the raw dictionary data against the QuestionnaireConfig model
    and performs additional custom validations.
    """
    try:
        config = QuestionnaireConfig.model_validate(data)
    except ValidationError as e:
        # Re-raise Pydantic's validation error for schema issues
        raise e

    seen_question_ids = set()

    for question in config.questions:
        if question.id in seen_question_ids:
            raise SpecValidationError(f"Duplicate question ID found: {question.id}")

        # Visibility can only depend on answers collected earlier in the sequence
        if question.depends_on is not None and question.depends_on.question_id not in seen_question_ids:
            raise SpecValidationError(
                f"Question '{question.id}' depends on '{question.depends_on.question_id}', "
                "which is not an earlier question"
            )
        seen_question_ids.add(question.id)

        option_values = set()
        for option in getattr(question, 'options', []):
            if option.value in option_values:
                raise SpecValidationError(f"Duplicate option value '{option.value}' in question '{question.id}'")
            option_values.add(option.value)

        if isinstance(question, MultiChoiceQuestion):
            if question.min is not None and question.max is not None and question.min > question.max:
                raise SpecValidationError(
                    f"Question '{question.id}' has min selections {question.min} above max {question.max}"
                )
        elif isinstance(question, ScaleQuestion):
            if question.min >= question.max:
                raise SpecValidationError(f"Scale question '{question.id}' needs min below max")

    return config

def load_questionnaire_from_file(file_path: str) -> QuestionnaireConfig:
    """
    Loads a questionnaire from a YAML file, validates it,
    and returns a QuestionnaireConfig object.
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise SpecValidationError(f"File not found: {file_path}")
    except yaml.YAMLError as e:
        raise SpecValidationError(f"Error parsing YAML file {file_path}: {e}")

    if data is None:
        raise SpecValidationError(f"YAML file is empty or invalid: {file_path}")

    return load_questionnaire_data(data)
