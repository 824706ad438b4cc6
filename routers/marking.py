from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from deps.store import ServiceDep
from errors import NotFoundError, StoreError
from schemas.marking import CheckRequest, CheckResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["marking"])


@router.post("/api/check", response_model=CheckResponse)
def check_answer(req: CheckRequest, service: ServiceDep):
    # Unparsable answers are graded incorrect, not rejected.
    try:
        return service.check_answer(req.questionId, req.userAnswer)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Question not found")
    except StoreError:
        logger.exception("Error checking answer")
        raise HTTPException(status_code=500, detail="Failed to check answer")
