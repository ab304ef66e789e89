from fastapi import APIRouter, Form, Request, UploadFile

from app.features.admin.auth import require_admin
from app.features.plans.schemas import PlanIn
from app.features.plans.service import PlanExtractionService, PlansService

router = APIRouter(prefix="/plans", tags=["plans"])
admin_router = APIRouter(prefix="/api/admin/plans", tags=["admin-plans"])


@router.get("")
async def list_plans(request: Request, candidate_name: str | None = None) -> dict[str, object]:
    conn = request.app.state.db
    return await PlansService(conn=conn).list_plans(candidate_name=candidate_name)


@router.get("/{plan_id}")
async def get_plan(request: Request, plan_id: int) -> dict[str, object]:
    conn = request.app.state.db
    return await PlansService(conn=conn).get_plan(plan_id=plan_id)


@admin_router.post("")
async def create_plan(request: Request, body: PlanIn) -> dict[str, object]:
    require_admin(request)
    return await PlansService(conn=request.app.state.db).create(body=body)


@admin_router.post("/extract")
async def extract_plan(
    request: Request,
    file: UploadFile,
    candidate_name: str = Form(...),
    party: str = Form(...),
) -> dict[str, object]:
    require_admin(request)
    service = PlanExtractionService(
        conn=request.app.state.db,
        cfg=request.app.state.cfg,
        client=request.app.state.completion,
    )
    return await service.extract_from_pdf(candidate_name=candidate_name, party=party, file=file)


@admin_router.put("/{plan_id}")
async def update_plan(request: Request, plan_id: int, body: PlanIn) -> dict[str, object]:
    require_admin(request)
    return await PlansService(conn=request.app.state.db).update(plan_id=plan_id, body=body)


@admin_router.delete("/{plan_id}")
async def delete_plan(request: Request, plan_id: int) -> dict[str, object]:
    require_admin(request)
    return await PlansService(conn=request.app.state.db).delete(plan_id=plan_id)
