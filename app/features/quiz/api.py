from fastapi import APIRouter, Request

from app.features.admin.auth import require_admin
from app.features.quiz.schemas import QuestionIn, SubmissionIn
from app.features.quiz.service import QuizService

router = APIRouter(prefix="/quiz", tags=["quiz"])
admin_router = APIRouter(prefix="/api/admin/quiz/questions", tags=["admin-quiz"])


@router.get("/questions")
async def list_questions(request: Request) -> dict[str, object]:
    conn = request.app.state.db
    return await QuizService(conn=conn).list_questions()


@router.post("/submit")
async def submit_quiz(request: Request, body: SubmissionIn) -> dict[str, object]:
    conn = request.app.state.db
    return await QuizService(conn=conn).submit(body=body)


@admin_router.post("")
async def create_question(request: Request, body: QuestionIn) -> dict[str, object]:
    require_admin(request)
    return await QuizService(conn=request.app.state.db).create_question(body=body)


@admin_router.put("/{question_id}")
async def update_question(request: Request, question_id: int, body: QuestionIn) -> dict[str, object]:
    require_admin(request)
    return await QuizService(conn=request.app.state.db).update_question(question_id=question_id, body=body)


@admin_router.delete("/{question_id}")
async def delete_question(request: Request, question_id: int) -> dict[str, object]:
    require_admin(request)
    return await QuizService(conn=request.app.state.db).delete_question(question_id=question_id)
