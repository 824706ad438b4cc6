from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional

from errors import NotFoundError
from grading import format_number, grade
from store import QuestionRepository

logger = logging.getLogger(__name__)


def _id_floor(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    # 1.0 compares equal to 1, so float ids take part in the maximum too
    if isinstance(value, float) and math.isfinite(value):
        return math.floor(value)
    return None


def next_question_id(questions: List[Dict[str, Any]]) -> int:
    ids = [i for i in (_id_floor(q.get("id")) for q in questions) if i is not None]
    return max(ids + [0]) + 1


def _find(questions: List[Dict[str, Any]], question_id: int) -> Optional[Dict[str, Any]]:
    return next((q for q in questions if q.get("id") == question_id), None)


def _with_unit(value: float, unit: Any) -> str:
    text = format_number(value)
    if unit is None or unit == "":
        return text
    return f"{text} {unit}"


class QuestionService:
    """
    Question CRUD and answer checking.

    Every call re-reads the full sequence from the repository; mutations write
    the full sequence back. Nothing is cached between calls.
    """

    def __init__(self, repository: QuestionRepository):
        self.repository = repository

    def list_questions(self) -> List[Dict[str, Any]]:
        return self.repository.load_all()

    def create_question(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        questions = self.repository.load_all()
        # server-assigned values always override whatever the client sent
        question = {**payload, "id": next_question_id(questions), "completed": False}
        questions.append(question)
        self.repository.save_all(questions)
        logger.info("created question id=%s", question["id"])
        return question

    def update_question(self, question_id: int, payload: Dict[str, Any]) -> Dict[str, Any]:
        questions = self.repository.load_all()
        changes = {k: v for k, v in payload.items() if k != "id"}

        updated: Optional[Dict[str, Any]] = None
        for idx, q in enumerate(questions):
            if q.get("id") == question_id:
                updated = {**q, **changes}
                questions[idx] = updated
        if updated is None:
            raise NotFoundError(question_id)

        self.repository.save_all(questions)
        logger.info("updated question id=%s fields=%s", question_id, sorted(changes))
        return updated

    def delete_question(self, question_id: int) -> Dict[str, Any]:
        questions = self.repository.load_all()
        remaining = [q for q in questions if q.get("id") != question_id]
        # persisted even when nothing matched
        self.repository.save_all(remaining)
        if len(remaining) != len(questions):
            logger.info("deleted question id=%s", question_id)
        return {"success": True, "id": question_id}

    def check_answer(self, question_id: int, user_answer: Any) -> Dict[str, Any]:
        q = _find(self.repository.load_all(), question_id)
        if q is None:
            raise NotFoundError(question_id)

        result = grade(user_answer, q.get("answer"), q.get("tolerance"))
        unit = q.get("unit")
        if result.correct:
            message = f"Correct! The answer is {_with_unit(result.correct_value, unit)}."
        else:
            message = (
                f"Incorrect. Your answer: {_with_unit(result.user_value, unit)}. "
                f"Correct answer: {_with_unit(result.correct_value, unit)}."
            )
        return {
            "correct": result.correct,
            "message": message,
            "correctAnswer": _json_number(result.correct_value),
            "yourAnswer": _json_number(result.user_value),
        }


def _json_number(x: float) -> Optional[float]:
    # JSON has no NaN/Infinity; these go out as null.
    if math.isnan(x) or math.isinf(x):
        return None
    return x
