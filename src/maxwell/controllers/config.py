import os
import sys
import logging
from logging.handlers import RotatingFileHandler

from dotenv import load_dotenv

load_dotenv()


# Logging: console always, rotating file when MAXWELL_LOG_FILE is set
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.environ.get("MAXWELL_LOG_FILE", "")

_handlers = [logging.StreamHandler(sys.stdout)]
if LOG_FILE:
    log_dir = os.path.dirname(LOG_FILE)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    _handlers.append(
        RotatingFileHandler(LOG_FILE, maxBytes=10 * 1024 * 1024, backupCount=5)  # 10MB
    )

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=_handlers,
)

logger = logging.getLogger("maxwell")


# Upstream model API
NVIDIA_API_URL = os.environ.get(
    "NVIDIA_API_URL", "https://integrate.api.nvidia.com/v1/chat/completions"
)
NVIDIA_API_KEY = os.environ.get("NVIDIA_API_KEY", "")
MODEL_ID = os.environ.get("MAXWELL_MODEL", "nvidia/nemotron-nano-12b-v2-vl")


# HTTP server
PORT = int(os.environ.get("PORT", 3001))
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGIN", "*").split(",")
    if origin.strip()
]
MAX_BODY_BYTES = int(os.environ.get("MAXWELL_MAX_BODY_BYTES", 50 * 1024 * 1024))


# Study Buddy
QUIZ_LENGTHS = (5, 10, 25)


if not NVIDIA_API_KEY:
    logger.warning("NVIDIA_API_KEY not set. Upstream requests will be rejected.")
