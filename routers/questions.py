from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from deps.store import ServiceDep
from errors import NotFoundError, StoreError
from schemas.questions import DeleteResponse, QuestionIn, QuestionOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/questions", tags=["questions"])


@router.get("")
def list_questions(service: ServiceDep):
    try:
        return service.list_questions()
    except StoreError:
        logger.exception("Error reading questions")
        raise HTTPException(status_code=500, detail="Failed to load questions")


@router.post("", response_model=QuestionOut, response_model_exclude_unset=True)
def create_question(payload: QuestionIn, service: ServiceDep):
    try:
        return service.create_question(payload.changes())
    except StoreError:
        logger.exception("Error adding question")
        raise HTTPException(status_code=500, detail="Failed to add question")


@router.put("/{question_id}")
def update_question(question_id: int, payload: QuestionIn, service: ServiceDep):
    try:
        return service.update_question(question_id, payload.changes())
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Question not found")
    except StoreError:
        logger.exception("Error updating question")
        raise HTTPException(status_code=500, detail="Failed to update question")


@router.delete("/{question_id}", response_model=DeleteResponse)
def delete_question(question_id: int, service: ServiceDep):
    try:
        return service.delete_question(question_id)
    except StoreError:
        logger.exception("Error deleting question")
        raise HTTPException(status_code=500, detail="Failed to delete question")
