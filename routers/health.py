# routers/health.py
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from deps.store import get_repository
from errors import StoreError
from store import JsonFileRepository, QuestionRepository

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/store")
def health_store(repo: Annotated[QuestionRepository, Depends(get_repository)]):
    try:
        count = len(repo.load_all())
    except StoreError as e:
        raise HTTPException(status_code=500, detail=f"store_error: {type(e).__name__}: {e}")
    path = str(repo.path) if isinstance(repo, JsonFileRepository) else None
    return {"ok": True, "count": count, "path": path}
