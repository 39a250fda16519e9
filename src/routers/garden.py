from fastapi import APIRouter, HTTPException, Depends
from functools import lru_cache
from typing import Any, Dict, List
import logging

from src.core.config import app_settings
from src.schemas.garden import AnswersRequest, EffectiveQuestionsResponse, ToggleRequest, ToggleResponse
from services.garden_planner.engine import QuestionnaireEngine
from services.garden_planner.models import Plan, UnknownQuestionError, InvalidSelectionError

router = APIRouter()
logger = logging.getLogger(__name__)

@lru_cache()
def get_questionnaire_engine() -> QuestionnaireEngine:
    # Built once per process; the engine is read-only after loading
    return QuestionnaireEngine(config_path=app_settings.questionnaire_path)

@router.get("/garden/questions")
async def list_questions(engine: QuestionnaireEngine = Depends(get_questionnaire_engine)) -> List[Dict[str, Any]]:
    """Returns the full, ordered question list including conditional questions."""
    return engine.get_questions()

@router.post("/garden/questions/effective", response_model=EffectiveQuestionsResponse)
async def effective_questions(
    request: AnswersRequest,
    engine: QuestionnaireEngine = Depends(get_questionnaire_engine)
):
    """Returns the questions visible for the submitted answers."""
    questions = engine.effective_questions(request.answers)
    return EffectiveQuestionsResponse(
        questions=[q.model_dump(exclude_none=True) for q in questions],
        total=len(questions)
    )

@router.post("/garden/selection/toggle", response_model=ToggleResponse)
async def toggle_selection(
    request: ToggleRequest,
    engine: QuestionnaireEngine = Depends(get_questionnaire_engine)
):
    """Applies the multi-select toggle policy to the submitted selections."""
    try:
        selections = engine.toggle_option(
            {request.question_id: request.selections}, request.question_id, request.value
        )
    except UnknownQuestionError as e:
        logger.warning(f"Toggle for unknown question: {e.args[0]}")
        raise HTTPException(status_code=404, detail=e.args[0])
    except InvalidSelectionError as e:
        logger.warning(f"Invalid toggle request: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return ToggleResponse(question_id=request.question_id, selections=selections)

@router.post("/garden/plan", response_model=Plan)
async def synthesize_plan(
    request: AnswersRequest,
    engine: QuestionnaireEngine = Depends(get_questionnaire_engine)
):
    """Synthesizes the garden plan. Missing answers fall back to defaults."""
    try:
        plan = engine.build_plan(request.answers)
    except Exception as e:
        logger.exception(f"Unexpected error during plan synthesis: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")
    logger.info(f"Plan synthesized: {plan.style_name}")
    return plan
