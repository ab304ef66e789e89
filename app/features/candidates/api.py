from fastapi import APIRouter, Request

from app.features.admin.auth import require_admin
from app.features.candidates.schemas import CandidateIn
from app.features.candidates.service import CandidatesService

router = APIRouter(prefix="/candidates", tags=["candidates"])
admin_router = APIRouter(prefix="/api/admin/candidates", tags=["admin-candidates"])


@router.get("")
async def list_candidates(request: Request) -> dict[str, object]:
    conn = request.app.state.db
    return await CandidatesService(conn=conn).list_candidates()


@router.get("/{candidate_id}")
async def get_candidate(request: Request, candidate_id: int) -> dict[str, object]:
    conn = request.app.state.db
    return await CandidatesService(conn=conn).get_profile(candidate_id=candidate_id)


@admin_router.post("")
async def create_candidate(request: Request, body: CandidateIn) -> dict[str, object]:
    require_admin(request)
    return await CandidatesService(conn=request.app.state.db).create(body=body)


@admin_router.put("/{candidate_id}")
async def update_candidate(request: Request, candidate_id: int, body: CandidateIn) -> dict[str, object]:
    require_admin(request)
    return await CandidatesService(conn=request.app.state.db).update(candidate_id=candidate_id, body=body)


@admin_router.delete("/{candidate_id}")
async def delete_candidate(request: Request, candidate_id: int) -> dict[str, object]:
    require_admin(request)
    return await CandidatesService(conn=request.app.state.db).delete(candidate_id=candidate_id)
