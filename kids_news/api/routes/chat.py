"""Quick chat endpoint."""

from fastapi import APIRouter

from ..dependencies import Chat
from ..models.requests import ChatRequest
from ..models.responses import ChatResponse

router = APIRouter()


@router.post("/", response_model=ChatResponse, summary="Ask a quick question")
async def ask(request: ChatRequest, chat: Chat) -> ChatResponse:
    """Get a short, fun answer for kids."""
    answer = await chat.ask(request.message)
    return ChatResponse(answer=answer)
