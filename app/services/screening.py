"""Screening test configuration and scoring for job applications."""

import uuid
from typing import Dict, Iterable, List, Optional, Tuple

from app.config import settings


def normalize_test_config(test) -> Optional[Dict]:
    """Turn a submitted test config into the stored JSON shape.

    Returns None unless the test is enabled. The passing percent is clamped
    to 0..100; questions with no text or no correct answers are dropped and
    questions without an id get a generated one.
    """
    if test is None or not test.enabled:
        return None

    passing = test.passing_percent
    if passing is None:
        passing = settings.DEFAULT_PASSING_PERCENT
    passing = max(0, min(100, passing))

    questions = []
    for q in test.questions:
        if not q.text or not q.correct_answers:
            continue
        question = {
            "id": q.id or str(uuid.uuid4()),
            "text": q.text,
            "correctAnswers": list(q.correct_answers),
        }
        if q.options is not None:
            question["options"] = list(q.options)
        questions.append(question)

    return {"enabled": True, "passingPercent": passing, "questions": questions}


def _answer_set(answer) -> set:
    if isinstance(answer, (list, tuple)):
        return {str(a) for a in answer}
    return {str(answer)}


def score_answers(questions: Iterable[Dict], answers: List[Dict], passing_percent: Optional[float]) -> Tuple[int, bool]:
    """Score answers against questions.

    A question counts as correct when the set of given answers equals the
    set of correct answers exactly. Unanswered questions are scored as an
    empty-string answer. Returns ``(score_percent, passed)``.
    """
    questions = list(questions)
    by_question = {}
    for a in answers:
        # First answer to a question wins
        by_question.setdefault(a["questionId"], a["answer"])

    correct = 0
    for q in questions:
        given = _answer_set(by_question.get(q.get("id"), ""))
        expected = {str(a) for a in q.get("correctAnswers") or []}
        if given == expected:
            correct += 1

    total = len(questions)
    # Round half up
    score_percent = int(correct * 100 / total + 0.5) if total > 0 else 0
    if passing_percent is None:
        passing_percent = settings.DEFAULT_PASSING_PERCENT
    return score_percent, score_percent >= passing_percent
