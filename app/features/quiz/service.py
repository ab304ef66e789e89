from fastapi import HTTPException

from app.analysis.scoring import Candidate, QuizAttempt, score_candidates, tally_alignments
from app.domain.enums import Alignment
from app.features.quiz.schemas import QuestionIn, SubmissionIn
from app.infra.repo_candidates import CandidateRepo
from app.infra.repo_quiz import QuizQuestion, QuizRepo


def question_to_json(q: QuizQuestion) -> dict[str, object]:
    return {
        "id": q.id,
        "question": q.question,
        "position": q.position,
        "options": [
            {"option_id": o.option_id, "text": o.text, "alignment": o.alignment} for o in q.options
        ],
    }


def _options(body: QuestionIn) -> list[tuple[str, str, str]]:
    ids = [o.option_id for o in body.options]
    if len(set(ids)) != len(ids):
        raise HTTPException(status_code=400, detail="duplicate_option_id")
    return [(o.option_id, o.text, o.alignment.value) for o in body.options]


class QuizService:
    def __init__(self, *, conn) -> None:
        self._conn = conn

    async def list_questions(self) -> dict[str, object]:
        return {"items": [question_to_json(q) for q in QuizRepo(self._conn).list_questions()]}

    async def create_question(self, *, body: QuestionIn) -> dict[str, object]:
        q = QuizRepo(self._conn).create_question(body.question, _options(body), position=body.position)
        return question_to_json(q)

    async def update_question(self, *, question_id: int, body: QuestionIn) -> dict[str, object]:
        options = _options(body)
        try:
            q = QuizRepo(self._conn).update_question(
                question_id, body.question, options, position=body.position
            )
        except KeyError:
            raise HTTPException(status_code=404, detail="question_not_found")
        return question_to_json(q)

    async def delete_question(self, *, question_id: int) -> dict[str, object]:
        try:
            QuizRepo(self._conn).delete_question(question_id)
        except KeyError:
            raise HTTPException(status_code=404, detail="question_not_found")
        return {"id": question_id, "deleted": True}

    async def submit(self, *, body: SubmissionIn) -> dict[str, object]:
        repo = QuizRepo(self._conn)

        attempt = QuizAttempt()
        for a in body.answers:
            opt = repo.find_option(a.question_id, a.option_id)
            if opt is None:
                raise HTTPException(
                    status_code=400,
                    detail={"error": "unknown_option", "question_id": a.question_id, "option_id": a.option_id},
                )
            attempt.answer(str(a.question_id), opt.option_id, opt.alignment)
        answers = attempt.answers

        roster = [
            Candidate(id=c.id, name=c.name, party=c.party, alignment=c.alignment)
            for c in CandidateRepo(self._conn).list()
        ]
        matches = score_candidates(answers, roster)
        tally = tally_alignments(answers)
        answered = len(answers)

        result = repo.record_result(
            participant=body.participant,
            progressive=tally[Alignment.progressive],
            moderate=tally[Alignment.moderate],
            conservative=tally[Alignment.conservative],
            answered=answered,
        )

        return {
            "result_id": result.id,
            "answered": answered,
            "total_questions": repo.count_questions(),
            "alignment_counts": {k.value: v for k, v in tally.items()},
            "matches": [
                {
                    "rank": m.rank,
                    "candidate_id": m.candidate.id,
                    "name": m.candidate.name,
                    "party": m.candidate.party,
                    "alignment": m.candidate.alignment,
                    "match_percentage": m.match_percentage,
                }
                for m in matches
            ],
        }
