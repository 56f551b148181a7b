# ============================================================
# Chat Relay FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - Gemini client built once at startup (Echo client without a key)
#   - ResponseGenerator injected into the /chat route
#   - Health checks
# ============================================================

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, Field
from typing import List, Dict, Any
import logging

# --- Local imports ---
from chat_relay.settings import settings
from chat_relay.logging_config import configure_logging
from chat_relay.generate import ResponseGenerator, Message
from chat_relay.generate.clients.echo_dev_client import EchoDevClient

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# ------------------------------------------------------------
# 🔧 Model client selection
# ------------------------------------------------------------
if settings.GEMINI_API_KEY:
    from chat_relay.generate.clients.gemini_client import GeminiChatClient
    model_client = GeminiChatClient(api_key=settings.GEMINI_API_KEY, model=settings.GEMINI_MODEL)
else:
    logger.warning("GEMINI_API_KEY not set, using echo dev client")
    model_client = EchoDevClient()

response_generator = ResponseGenerator(model_client=model_client)


def get_generator() -> ResponseGenerator:
    return response_generator

# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title=settings.APP_NAME, version="0.1")

# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class ChatTurn(BaseModel):
    role: str
    content: str

class ChatRequest(BaseModel):
    message: str
    history: List[ChatTurn] = Field(default_factory=list)

class ChatPayload(BaseModel):
    text: str
    meta: Dict[str, Any]

# ------------------------------------------------------------
# 💬 Main chat route
# ------------------------------------------------------------
@app.post("/chat", response_model=ChatPayload)
async def chat(req: ChatRequest, generator: ResponseGenerator = Depends(get_generator)):
    try:
        history = [Message(**h.model_dump()) for h in req.history]
        text = await generator.generate(history, req.message)
        client = generator.model_client
        return ChatPayload(
            text=text,
            meta={
                "model": getattr(client, "model", None),
                "engine": type(client).__name__,
            },
        )
    except Exception as e:
        logger.exception("Chat route failed")
        raise HTTPException(status_code=500, detail=str(e))

# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/healthz")
def healthz():
    return {
        "ok": True,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "app": settings.APP_NAME,
        "model": getattr(model_client, "model", None),
    }

@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}

@app.get("/")
def hello():
    return {"message": f"{settings.APP_NAME} service running."}
