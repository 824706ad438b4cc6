import json

import pytest

from seed import SEED_QUESTIONS


@pytest.fixture
def store_file(tmp_path, monkeypatch):
    """Seeded questions file, wired in through QUESTIONS_FILE."""
    path = tmp_path / "questions.json"
    path.write_text(json.dumps(SEED_QUESTIONS, indent=2, ensure_ascii=False), encoding="utf-8")
    monkeypatch.setenv("QUESTIONS_FILE", str(path))
    return path


@pytest.fixture
def missing_store(tmp_path, monkeypatch):
    path = tmp_path / "data" / "questions.json"
    monkeypatch.setenv("QUESTIONS_FILE", str(path))
    return path


def read_store(path):
    return json.loads(path.read_text(encoding="utf-8"))
