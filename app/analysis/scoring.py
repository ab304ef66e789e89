from dataclasses import dataclass
from typing import Iterable

from app.domain.enums import Alignment, parse_alignment


@dataclass(frozen=True)
class QuizAnswer:
    question_id: str
    option_id: str
    alignment: str


@dataclass(frozen=True)
class Candidate:
    id: int
    name: str
    party: str
    alignment: str


@dataclass(frozen=True)
class MatchResult:
    candidate: Candidate
    match_percentage: int
    rank: int


class QuizAttempt:
    """Answers collected during one quiz attempt, one per question."""

    def __init__(self) -> None:
        self._answers: dict[str, QuizAnswer] = {}

    def answer(self, question_id: str, option_id: str, alignment: str) -> None:
        # Re-answering keeps the question's original position.
        self._answers[question_id] = QuizAnswer(
            question_id=question_id, option_id=option_id, alignment=alignment
        )

    @property
    def answers(self) -> list[QuizAnswer]:
        return list(self._answers.values())


def normalize_answers(answers: Iterable[QuizAnswer]) -> list[QuizAnswer]:
    """Last answer per question wins; labels trimmed and lowercased."""

    latest: dict[str, QuizAnswer] = {}
    for a in answers:
        latest[a.question_id] = QuizAnswer(
            question_id=a.question_id,
            option_id=a.option_id,
            alignment=_normalize_label(a.alignment),
        )
    return list(latest.values())


def tally_alignments(answers: Iterable[QuizAnswer]) -> dict[Alignment, int]:
    tally = {a: 0 for a in Alignment}
    for ans in normalize_answers(answers):
        label = parse_alignment(ans.alignment)
        if label is not None:
            tally[label] += 1
    return tally


def score_candidates(answers: Iterable[QuizAnswer], candidates: Iterable[Candidate]) -> list[MatchResult]:
    """Rank candidates by the share of answered questions matching their label.

    Percentages are rounded half-up. Candidates with equal percentages keep
    their roster order. No answers means 0% for every candidate.
    """

    normalized = normalize_answers(answers)
    answered = len(normalized)

    counts: dict[str, int] = {}
    for a in normalized:
        counts[a.alignment] = counts.get(a.alignment, 0) + 1

    scored = [
        (c, _percentage(counts.get(_normalize_label(c.alignment), 0), answered)) for c in candidates
    ]
    scored.sort(key=lambda pair: pair[1], reverse=True)

    return [
        MatchResult(candidate=c, match_percentage=pct, rank=i + 1)
        for i, (c, pct) in enumerate(scored)
    ]


def _percentage(matches: int, answered: int) -> int:
    if answered == 0:
        return 0
    # round(matches / answered * 100) with halves rounded up, in integer arithmetic.
    return (200 * matches + answered) // (2 * answered)


def _normalize_label(label: str) -> str:
    return (label or "").strip().lower()
