"""FastAPI application for the chat widget server.

Ties all components together: config loading, provider creation, service
wiring, the chat/analytics/health endpoints, and lifespan management.
"""

import json
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path

from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse

from chat_server.config import Settings, get_settings, setup_logging
from chat_server.providers import get_provider
from chat_server.services.assistant import AssistantProfile
from chat_server.services.chat import ChatService, ValidationError
from chat_server.services.conversation_store import ConversationStore
from chat_server.services.gateway import CompletionError, CompletionGateway

logger = logging.getLogger(__name__)


def build_chat_service(settings: Settings) -> ChatService:
    """Create the provider, gateway, store and chat service from settings."""
    profile = AssistantProfile(config_dir=settings.config_dir)
    provider = get_provider(settings)
    gateway = CompletionGateway(
        provider,
        temperature=profile.temperature,
        max_tokens=profile.max_tokens,
        fallback_response=profile.fallback_response,
    )
    store = ConversationStore(max_turns=settings.max_history)
    return ChatService(store, gateway, system_prompt=profile.system_prompt)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """App lifespan: initialize on startup, log on shutdown."""
    # STARTUP
    settings = app.state.settings
    setup_logging(settings)

    app.state.chat_service = build_chat_service(settings)

    logger.info(
        "Chat server started (provider=%s, model=%s, api key loaded: %s)",
        settings.llm_provider,
        settings.llm_model,
        "yes" if settings.llm_api_key else "no",
    )

    yield

    # SHUTDOWN
    logger.info("Chat server shut down")


router = APIRouter()


@router.post("/chat")
async def chat(request: Request) -> JSONResponse:
    """Send a message and receive the assistant's reply."""
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        body = None
    if not isinstance(body, dict):
        return JSONResponse({"error": "message required"}, status_code=400)

    conversation_id = body.get("conversation_id") or body.get("conversationId")
    if conversation_id is not None and not isinstance(conversation_id, str):
        conversation_id = str(conversation_id)

    try:
        result = await request.app.state.chat_service.handle(body.get("message"), conversation_id)
    except ValidationError:
        return JSONResponse({"error": "message required"}, status_code=400)
    except Exception as exc:
        # CompletionError is already logged by the chat service
        if not isinstance(exc, CompletionError):
            logger.exception("Error processing chat message")
        content = {"error": "failed to process message"}
        if request.app.state.settings.is_development:
            content["details"] = str(exc)
        return JSONResponse(content, status_code=500)

    return JSONResponse(result)


@router.get("/analytics")
async def analytics(request: Request) -> dict:
    """Aggregate conversation counters for the widget dashboard."""
    stats = request.app.state.chat_service.store.stats()
    return {
        "total_conversations": stats["conversation_count"],
        "total_messages": stats["message_count"],
        "average_messages": stats["average_messages"],
    }


@router.get("/health")
async def health(request: Request) -> dict:
    """Liveness probe."""
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": request.app.state.settings.environment,
    }


async def api_not_found(path: str) -> JSONResponse:
    """JSON 404 for unknown API routes."""
    return JSONResponse({"error": "API route not found"}, status_code=404)


def widget_route(static_path: Path):
    """Serve files of the built widget, falling back to index.html for client routes."""
    root = static_path.resolve()
    index = root / "index.html"

    async def serve_widget(path: str) -> Response:
        candidate = (root / path).resolve()
        # Paths escaping the widget directory get the index page
        if candidate.is_relative_to(root) and candidate.is_file():
            return FileResponse(candidate)
        if index.is_file():
            return FileResponse(index)
        return PlainTextResponse("Error loading application", status_code=500)

    return serve_widget


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Routes are served at the root and under /api, which is where the
    widget frontend calls them.
    """
    settings = settings or get_settings()

    application = FastAPI(title="Chat Widget Server", lifespan=lifespan)
    application.state.settings = settings

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(router)
    application.include_router(router, prefix="/api")
    application.add_api_route(
        "/api/{path:path}",
        api_not_found,
        methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        include_in_schema=False,
    )

    if settings.static_dir:
        static_path = Path(settings.static_dir)
        if static_path.is_dir():
            application.add_api_route(
                "/{path:path}",
                widget_route(static_path),
                methods=["GET"],
                include_in_schema=False,
            )
        else:
            logger.warning("STATIC_DIR %s does not exist, not serving widget", static_path)

    return application
