# Record repository over the persisted question sequence.

from __future__ import annotations

import copy
import json
import logging
import os
import stat
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from errors import StoreReadError, StoreWriteError

logger = logging.getLogger(__name__)

_BASE = Path(__file__).resolve().parent
DEFAULT_QUESTIONS_FILE = _BASE / "questions.json"


def questions_path() -> Path:
    # Read per call so QUESTIONS_FILE can be changed without re-importing.
    return Path(os.getenv("QUESTIONS_FILE") or DEFAULT_QUESTIONS_FILE)


def _reject_constant(name: str) -> Any:
    # NaN / Infinity are not JSON
    raise ValueError(f"unsupported constant {name}")


class QuestionRepository(ABC):
    """Load-all / save-all access to the stored question sequence."""

    @abstractmethod
    def load_all(self) -> List[Dict[str, Any]]:
        ...

    @abstractmethod
    def save_all(self, questions: List[Dict[str, Any]]) -> None:
        ...


class JsonFileRepository(QuestionRepository):
    """
    Stores the whole sequence as one pretty-printed JSON array.

    Every save replaces the file through a temp file + rename, so readers see
    either the previous or the next sequence, never a partial one. There is no
    locking: two concurrent read-modify-write cycles still race and the last
    writer wins.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load_all(self) -> List[Dict[str, Any]]:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f, parse_constant=_reject_constant)
        except FileNotFoundError as e:
            raise StoreReadError(f"questions file not found: {self.path}") from e
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors
            raise StoreReadError(f"questions file is not valid JSON: {e}") from e
        except OSError as e:
            raise StoreReadError(f"cannot read questions file: {e}") from e

        if not isinstance(data, list):
            raise StoreReadError(
                f"questions file root must be an array, got {type(data).__name__}"
            )
        for idx, q in enumerate(data):
            if not isinstance(q, dict):
                raise StoreReadError(
                    f"questions file record {idx} must be an object, got {type(q).__name__}"
                )
        return data

    def save_all(self, questions: List[Dict[str, Any]]) -> None:
        # write through a symlink to its target and keep the target's mode
        target = Path(os.path.realpath(self.path))
        tmp_name: Optional[str] = None
        try:
            payload = json.dumps(questions, indent=2, ensure_ascii=False, allow_nan=False)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            if target.exists():
                os.chmod(tmp_name, stat.S_IMODE(target.stat().st_mode))
            os.replace(tmp_name, target)
            tmp_name = None
        except (OSError, TypeError, ValueError) as e:
            raise StoreWriteError(f"cannot write questions file {self.path}: {e}") from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.warning("could not remove temp file %s", tmp_name)

    def initialize(self, seed: Iterable[Dict[str, Any]]) -> bool:
        """Write ``seed`` if the backing file does not exist yet."""
        if self.path.exists():
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreWriteError(f"cannot create {self.path.parent}: {e}") from e
        self.save_all(copy.deepcopy(list(seed)))
        logger.info("Created default questions file at %s", self.path)
        return True


class InMemoryRepository(QuestionRepository):
    def __init__(self, questions: Optional[Iterable[Dict[str, Any]]] = None):
        self._questions: List[Dict[str, Any]] = copy.deepcopy(list(questions or []))
        self.saves = 0

    def load_all(self) -> List[Dict[str, Any]]:
        return copy.deepcopy(self._questions)

    def save_all(self, questions: List[Dict[str, Any]]) -> None:
        self._questions = copy.deepcopy(list(questions))
        self.saves += 1
