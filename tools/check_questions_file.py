#!/usr/bin/env python
import math
import sys
from pathlib import Path

HERE = Path(__file__).resolve().parent
if str(HERE.parent) not in sys.path:
    sys.path.insert(0, str(HERE.parent))

from errors import StoreReadError  # noqa: E402
from grading import parse_float  # noqa: E402
from store import JsonFileRepository, questions_path  # noqa: E402


def find_problems(questions: list) -> list[str]:
    problems: list[str] = []
    seen: set[int] = set()
    for idx, q in enumerate(questions):
        if not isinstance(q, dict):
            problems.append(f"record {idx}: not an object")
            continue
        qid = q.get("id")
        if not isinstance(qid, int) or isinstance(qid, bool):
            problems.append(f"record {idx}: id must be an integer, got {qid!r}")
        elif qid in seen:
            problems.append(f"record {idx}: duplicate id {qid}")
        else:
            seen.add(qid)
        if math.isnan(parse_float(q.get("answer"))):
            problems.append(f"record {idx}: answer {q.get('answer')!r} is not numeric")
        tol = q.get("tolerance")
        if isinstance(tol, (int, float)) and not isinstance(tol, bool) and tol < 0:
            problems.append(f"record {idx}: tolerance must not be negative")
    return problems


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0]) if args else questions_path()

    try:
        questions = JsonFileRepository(path).load_all()
    except StoreReadError as e:
        print(f"Error: {e}")
        return 1

    problems = find_problems(questions)
    for p in problems:
        print(f"Error: {p}")
    if problems:
        return 1
    print(f"Questions file OK: {path} ({len(questions)} questions)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
