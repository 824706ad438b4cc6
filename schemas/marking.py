# schemas/marking.py
from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel


class CheckRequest(BaseModel):
    questionId: int
    # raw text as typed; numbers are accepted and parsed the same way
    userAnswer: Union[str, float, None] = None


class CheckResponse(BaseModel):
    correct: bool
    message: str
    correctAnswer: Optional[float] = None
    yourAnswer: Optional[float] = None
