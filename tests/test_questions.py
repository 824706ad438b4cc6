import pytest
from fastapi.testclient import TestClient

from conftest import read_store
from deps.store import get_repository
from errors import StoreWriteError
from main import app
from seed import SEED_QUESTIONS
from store import InMemoryRepository

client = TestClient(app)


def test_list_questions(store_file):
    r = client.get("/api/questions")
    assert r.status_code == 200
    data = r.json()
    assert data == SEED_QUESTIONS
    assert [q["id"] for q in data] == [1, 2, 3, 4, 5]


def test_list_keeps_sparse_and_extra_fields(store_file):
    store_file.write_text('[{"id": 7, "title": "Only title", "source": "import"}]', encoding="utf-8")
    r = client.get("/api/questions")
    assert r.status_code == 200
    assert r.json() == [{"id": 7, "title": "Only title", "source": "import"}]


def test_list_then_create_then_list(store_file):
    before = client.get("/api/questions").json()

    payload = {
        "id": 1,
        "completed": True,
        "title": "Ohm's Law",
        "category": "Electrical",
        "difficulty": "Easy",
        "question": "Current through a 10 Ω resistor at 5 V?",
        "givenInfo": ["V = 5 V", "R = 10 Ω"],
        "formula": "I = V / R",
        "answer": "0.5",
        "unit": "A",
        "tolerance": 0.01,
    }
    r = client.post("/api/questions", json=payload)
    assert r.status_code == 200
    created = r.json()
    assert created["id"] == 6
    assert created["completed"] is False
    assert created["title"] == "Ohm's Law"

    after = client.get("/api/questions").json()
    assert after[:-1] == before
    assert after[-1] == created
    assert read_store(store_file)[-1] == created


def test_create_accepts_numeric_answer(store_file):
    r = client.post("/api/questions", json={"title": "Numeric", "answer": 42})
    assert r.status_code == 200
    assert r.json()["answer"] == "42"


def test_create_rejects_negative_tolerance(store_file):
    r = client.post("/api/questions", json={"title": "Bad", "tolerance": -1})
    assert r.status_code == 422
    assert len(read_store(store_file)) == 5


def test_create_into_empty_store(store_file):
    store_file.write_text("[]", encoding="utf-8")
    r = client.post("/api/questions", json={"title": "First"})
    assert r.json() == {"title": "First", "id": 1, "completed": False}


def test_mark_completed(store_file):
    r = client.put("/api/questions/3", json={"completed": True})
    assert r.status_code == 200
    body = r.json()
    assert body == dict(SEED_QUESTIONS[2], completed=True)

    stored = read_store(store_file)
    assert stored[2]["completed"] is True
    assert stored[:2] + stored[3:] == SEED_QUESTIONS[:2] + SEED_QUESTIONS[3:]


def test_update_unknown_id_404(store_file):
    before = store_file.read_text(encoding="utf-8")
    r = client.put("/api/questions/99", json={"completed": True})
    assert r.status_code == 404
    assert r.json()["detail"] == "Question not found"
    assert store_file.read_text(encoding="utf-8") == before


def test_update_non_integer_id_422(store_file):
    r = client.put("/api/questions/abc", json={"completed": True})
    assert r.status_code == 422


def test_delete_question(store_file):
    r = client.delete("/api/questions/2")
    assert r.status_code == 200
    assert r.json() == {"success": True, "id": 2}
    assert [q["id"] for q in read_store(store_file)] == [1, 3, 4, 5]


def test_delete_absent_id(store_file):
    r = client.delete("/api/questions/123")
    assert r.status_code == 200
    assert r.json() == {"success": True, "id": 123}
    assert read_store(store_file) == SEED_QUESTIONS


def test_highest_id_reused_after_delete(store_file):
    client.delete("/api/questions/5")
    r = client.post("/api/questions", json={"title": "Again"})
    assert r.json()["id"] == 5


def test_missing_store_is_500(missing_store):
    r = client.get("/api/questions")
    assert r.status_code == 500
    assert r.json()["detail"] == "Failed to load questions"

    r = client.post("/api/questions", json={"title": "x"})
    assert r.status_code == 500
    assert r.json()["detail"] == "Failed to add question"


def test_corrupt_store_is_500(store_file):
    store_file.write_text("{broken", encoding="utf-8")
    assert client.put("/api/questions/1", json={}).status_code == 500
    assert client.delete("/api/questions/1").json()["detail"] == "Failed to delete question"


def test_create_answer_beyond_float_range(store_file):
    r = client.post("/api/questions", json={"title": "Huge", "answer": 10**400})
    assert r.status_code == 200
    assert r.json()["answer"] == "Infinity"
    assert read_store(store_file)[-1]["answer"] == "Infinity"


def test_create_tolerance_beyond_float_range(store_file):
    r = client.post("/api/questions", json={"title": "Huge", "tolerance": 10**400})
    assert r.status_code == 422
    assert len(read_store(store_file)) == 5


def test_non_object_record_is_store_error(store_file):
    store_file.write_text('[null, {"id": 1, "answer": "1"}]', encoding="utf-8")

    r = client.get("/api/questions")
    assert r.status_code == 500
    assert r.json()["detail"] == "Failed to load questions"

    r = client.post("/api/questions", json={"title": "x"})
    assert r.status_code == 500
    assert r.json()["detail"] == "Failed to add question"

    r = client.post("/api/check", json={"questionId": 1, "userAnswer": "1"})
    assert r.status_code == 500
    assert r.json()["detail"] == "Failed to check answer"


def test_stored_records_returned_as_is(store_file):
    store_file.write_text('[{"id": 1, "title": 5, "givenInfo": "one line"}]', encoding="utf-8")

    r = client.get("/api/questions")
    assert r.status_code == 200
    assert r.json() == [{"id": 1, "title": 5, "givenInfo": "one line"}]

    r = client.put("/api/questions/1", json={"completed": True})
    assert r.status_code == 200
    assert r.json() == {"id": 1, "title": 5, "givenInfo": "one line", "completed": True}


class UnwritableRepository(InMemoryRepository):
    def save_all(self, questions):
        raise StoreWriteError("disk full")


@pytest.fixture
def unwritable_repo():
    repo = UnwritableRepository(SEED_QUESTIONS)
    app.dependency_overrides[get_repository] = lambda: repo
    yield repo
    app.dependency_overrides.clear()


def test_create_write_failure(unwritable_repo):
    r = client.post("/api/questions", json={"title": "Lost"})
    assert r.status_code == 500
    assert r.json() == {"detail": "Failed to add question"}
    assert unwritable_repo.load_all() == SEED_QUESTIONS


def test_update_write_failure(unwritable_repo):
    r = client.put("/api/questions/1", json={"completed": True})
    assert r.status_code == 500
    assert r.json() == {"detail": "Failed to update question"}
    assert unwritable_repo.load_all() == SEED_QUESTIONS


def test_delete_write_failure(unwritable_repo):
    r = client.delete("/api/questions/1")
    assert r.status_code == 500
    assert r.json() == {"detail": "Failed to delete question"}
    assert unwritable_repo.load_all() == SEED_QUESTIONS
