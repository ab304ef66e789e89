from fastapi import APIRouter, Request

from app.features.chat.schemas import ChatIn
from app.features.chat.service import ChatService

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("")
async def chat(request: Request, body: ChatIn) -> dict[str, object]:
    service = ChatService(cfg=request.app.state.cfg, client=request.app.state.completion)
    return await service.ask(body=body)
