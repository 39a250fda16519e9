from typing import Dict, Any, List
from pydantic import BaseModel, Field

class AnswersRequest(BaseModel):
    answers: Dict[str, Any] = Field(default_factory=dict)  # question_id → str | list[str] | number

class EffectiveQuestionsResponse(BaseModel):
    questions: List[Dict[str, Any]]
    total: int

class ToggleRequest(BaseModel):
    question_id: str
    selections: List[str] = Field(default_factory=list)
    value: str

class ToggleResponse(BaseModel):
    question_id: str
    selections: List[str]
