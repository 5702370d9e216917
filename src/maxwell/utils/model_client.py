import base64
from typing import Any, Dict, List, Optional

from maxwell.controllers import config
from maxwell.controllers.config import logger
from maxwell.controllers.relay import forward_chat_completion
from maxwell.utils.prompts import (
    CIRCUIT_ANALYSIS_PROMPT,
    build_quiz_prompt,
    build_study_suggestions_prompt,
)


class ModelRequestError(RuntimeError):
    """The model call failed or returned no usable content."""

    def __init__(self, message: str, status_code: int = 502):
        super().__init__(message)
        self.status_code = status_code


class CircuitModelClient:
    """Builds Maxwell's chat-completion requests and sends them through the relay."""

    def __init__(self, model: Optional[str] = None):
        self.model = model or config.MODEL_ID

    def _chat_request(
        self, content: Any, max_tokens: int, temperature: float
    ) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": content}],
            "max_tokens": max_tokens,
            "temperature": temperature,
            "stream": False,
        }

    def build_analysis_request(self, image_bytes: bytes) -> Dict[str, Any]:
        base64_image = base64.b64encode(image_bytes).decode("utf-8")
        content = [
            {
                "type": "image_url",
                "image_url": {"url": f"data:image/jpeg;base64,{base64_image}"},
            },
            {"type": "text", "text": CIRCUIT_ANALYSIS_PROMPT},
        ]
        return self._chat_request(content, max_tokens=2048, temperature=0.2)

    def build_quiz_request(self, num_questions: int) -> Dict[str, Any]:
        return self._chat_request(
            build_quiz_prompt(num_questions), max_tokens=4096, temperature=0.7
        )

    def build_study_suggestions_request(self, missed_questions: List[str]) -> Dict[str, Any]:
        return self._chat_request(
            build_study_suggestions_prompt(missed_questions),
            max_tokens=1024,
            temperature=0.5,
        )

    def complete(self, payload: Dict[str, Any]) -> str:
        """Send one request and return the first choice's message content."""
        status_code, data = forward_chat_completion(payload)
        if not 200 <= status_code < 300:
            detail = data.get("error", "") if isinstance(data, dict) else ""
            raise ModelRequestError(
                f"API error: {status_code} {detail}".strip(),
                status_code=status_code,
            )

        choices = data.get("choices") if isinstance(data, dict) else None
        first = choices[0] if isinstance(choices, list) and choices else None
        message = first.get("message") if isinstance(first, dict) else None
        text = message.get("content") if isinstance(message, dict) else None
        if not isinstance(text, str) or not text:
            raise ModelRequestError("No content in API response")
        return text

    def analyze_circuit(self, image_bytes: bytes) -> str:
        logger.info(f"Requesting circuit analysis for image of {len(image_bytes)} bytes")
        return self.complete(self.build_analysis_request(image_bytes))

    def generate_quiz(self, num_questions: int) -> str:
        logger.info(f"Requesting {num_questions} quiz questions")
        return self.complete(self.build_quiz_request(num_questions))

    def suggest_study_topics(self, missed_questions: List[str]) -> str:
        logger.info(f"Requesting study suggestions for {len(missed_questions)} missed questions")
        return self.complete(self.build_study_suggestions_request(missed_questions))


def get_model_client() -> CircuitModelClient:
    return CircuitModelClient()
