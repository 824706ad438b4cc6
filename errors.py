from __future__ import annotations


class StoreError(Exception):
    """Base class for failures of the question store backing file."""


class StoreReadError(StoreError):
    pass


class StoreWriteError(StoreError):
    pass


class NotFoundError(LookupError):
    def __init__(self, question_id: object):
        super().__init__(f"question {question_id!r} not found")
        self.question_id = question_id
