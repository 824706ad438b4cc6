# schemas/questions.py
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from grading import format_number, parse_float


class _QuestionBase(BaseModel):
    # unknown keys are kept so records round-trip as stored
    model_config = ConfigDict(extra="allow")

    title: Optional[str] = None
    category: Optional[str] = None
    difficulty: Optional[str] = None
    description: Optional[str] = None
    question: Optional[str] = None
    givenInfo: Optional[List[str]] = None
    formula: Optional[str] = None
    answer: Optional[str] = None
    unit: Optional[str] = None
    tolerance: Optional[float] = None
    completed: Optional[bool] = None

    @field_validator("answer", mode="before")
    @classmethod
    def _answer_as_string(cls, v: Any) -> Any:
        # answers are stored as numeric strings; accept plain numbers too
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return format_number(parse_float(v))
        return v

    @field_validator("tolerance", mode="before")
    @classmethod
    def _tolerance_in_float_range(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return parse_float(v)
        return v


class QuestionIn(_QuestionBase):
    """
    Partial question payload for create and update. Only the keys the client
    actually sent are applied.
    """

    tolerance: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)

    def changes(self) -> dict:
        return {**self.model_dump(exclude_unset=True), **(self.model_extra or {})}


class QuestionOut(_QuestionBase):
    id: int


class DeleteResponse(BaseModel):
    success: bool
    id: int
