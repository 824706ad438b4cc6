from typing import Annotated

from fastapi import Depends

from service import QuestionService
from store import JsonFileRepository, QuestionRepository, questions_path


def get_repository() -> QuestionRepository:
    """
    Repository for the current request. Tests swap it through
    ``app.dependency_overrides[get_repository]``.
    """
    return JsonFileRepository(questions_path())


def get_service(
    repository: Annotated[QuestionRepository, Depends(get_repository)],
) -> QuestionService:
    return QuestionService(repository)


ServiceDep = Annotated[QuestionService, Depends(get_service)]
