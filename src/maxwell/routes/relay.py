from typing import Any, Dict

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse

from maxwell.controllers.config import logger
from maxwell.controllers.relay import forward_chat_completion


router = APIRouter(prefix="/api", tags=["Relay"])


@router.post("/analyze-circuit")
def relay_chat_completion(payload: Dict[str, Any] = Body(...)):
    """Pass a chat-completion request through to the model API with the server's key."""
    logger.info("Received request to analyze circuit")
    status_code, body = forward_chat_completion(payload)
    return JSONResponse(status_code=status_code, content=body)
