from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
def health(request: Request) -> dict[str, object]:
    return {"status": "ok", "completion_configured": request.app.state.completion is not None}
