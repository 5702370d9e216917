import traceback
from typing import Any, Dict, Tuple

import requests

from maxwell.controllers import config
from maxwell.controllers.config import logger


def forward_chat_completion(payload: Dict[str, Any]) -> Tuple[int, Dict[str, Any]]:
    """
    Forward a chat-completion request to the upstream model API.

    The request body is sent as-is with the server-side bearer credential
    attached. No retries and no timeout.

    Returns:
        (status_code, body): the upstream status and JSON body on success,
        the upstream status and ``{"error": text}`` on a non-2xx answer, or
        ``500`` and ``{"error", "stack"}`` when the call itself failed.
    """
    try:
        response = requests.post(
            config.NVIDIA_API_URL,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {config.NVIDIA_API_KEY}",
            },
            json=payload,
        )

        logger.info(f"Upstream API response status: {response.status_code}")

        if not 200 <= response.status_code < 300:
            error_text = response.text
            logger.error(f"Upstream API error: {error_text}")
            return response.status_code, {"error": error_text}

        return response.status_code, response.json()
    except (requests.RequestException, ValueError) as e:
        logger.error(f"Relay error: {e}")
        return 500, {"error": str(e), "stack": traceback.format_exc()}
