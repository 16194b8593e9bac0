"""
FastAPI routes for the finance chat.
Thin API layer over the chat service and the classifier.
"""
from pathlib import Path
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates

from classifier.classify import classify
from core.config import get_settings
from core.exceptions import FinanceChatException, ValidationError
from core.logger import setup_logger
from core.schema import (
    BalanceSummary,
    CatalogResponse,
    ChatMessage,
    ChatReply,
    ChatRequest,
    TransactionRecord,
)
from services.chat_service import ChatService

logger = setup_logger(__name__)
settings = get_settings()

# Initialize FastAPI app
app = FastAPI(
    title="Finance Chat",
    description="Log income and expenses by chatting in plain language",
    version="1.0.0"
)

# Setup templates
templates_dir = Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=str(templates_dir))

# Single in-memory session
chat_service = ChatService()


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Render the chat page."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "app_name": settings.app_name,
            "currency_symbol": settings.currency_symbol,
            "reply_delay_ms": settings.reply_delay_ms,
        },
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "finance_chat",
        "version": "1.0.0"
    }


@app.get("/favicon.ico")
async def favicon():
    """Return empty response for favicon to avoid 404 errors."""
    return Response(status_code=204)


@app.post("/chat", response_model=ChatReply)
async def chat(payload: ChatRequest):
    """
    Handle a chat message: classify it, update the ledger and reply.

    Args:
        payload: Chat request with the user message

    Returns:
        Assistant reply with classification result and updated totals
    """
    try:
        return chat_service.handle_message(payload.message)

    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)

    except FinanceChatException as e:
        logger.error(f"Chat handling failed: {e.message} {e.details}", exc_info=True)
        raise HTTPException(status_code=500, detail=e.message)


@app.post("/classify")
async def classify_message(payload: ChatRequest):
    """
    Classify a message without touching the ledger.

    Args:
        payload: Chat request with the message to classify

    Returns:
        Classification result
    """
    if not payload.message.strip():
        raise HTTPException(status_code=400, detail="Message must not be empty")
    return classify(payload.message, chat_service.catalog, chat_service.rules)


@app.get("/transactions", response_model=List[TransactionRecord])
async def list_transactions(limit: Optional[int] = Query(default=None, ge=1, le=1000)):
    """List logged transactions, newest first."""
    return chat_service.ledger.list(limit)


@app.get("/summary", response_model=BalanceSummary)
async def get_summary():
    """Current balance, total income and total expenses."""
    return chat_service.ledger.summary()


@app.get("/messages", response_model=List[ChatMessage])
async def list_messages():
    """Chat transcript, oldest first."""
    return chat_service.messages


@app.get("/categories", response_model=CatalogResponse)
async def list_categories():
    """Configured category catalog."""
    return CatalogResponse(
        income=list(chat_service.catalog.income),
        expense=list(chat_service.catalog.expense),
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
