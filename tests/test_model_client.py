from unittest.mock import patch

import pytest

from maxwell.utils.model_client import CircuitModelClient, ModelRequestError


def test_analysis_request_carries_image_as_data_url():
    payload = CircuitModelClient(model="test-model").build_analysis_request(b"\xff\xd8")

    assert payload["model"] == "test-model"
    assert payload["max_tokens"] == 2048
    image = payload["messages"][0]["content"][0]["image_url"]["url"]
    assert image == "data:image/jpeg;base64,/9g="


def test_complete_returns_first_choice_content():
    reply = {"choices": [{"message": {"content": "Req: 300Ω"}}]}
    with patch("maxwell.utils.model_client.forward_chat_completion", return_value=(200, reply)):
        assert CircuitModelClient().complete({}) == "Req: 300Ω"


def test_complete_reports_upstream_status():
    with patch(
        "maxwell.utils.model_client.forward_chat_completion",
        return_value=(429, {"error": "rate limited"}),
    ):
        with pytest.raises(ModelRequestError) as excinfo:
            CircuitModelClient().complete({})

    assert excinfo.value.status_code == 429
    assert "rate limited" in str(excinfo.value)


@pytest.mark.parametrize(
    "body",
    [
        [{"message": {"content": "hi"}}],
        {"choices": "hi"},
        {"choices": []},
        {"choices": ["hi"]},
        {"choices": [{"message": "hi"}]},
        {"choices": [{"message": {"content": None}}]},
        {"choices": [{"message": {"content": ["hi"]}}]},
    ],
)
def test_malformed_success_body_is_a_model_error(body):
    with patch("maxwell.utils.model_client.forward_chat_completion", return_value=(200, body)):
        with pytest.raises(ModelRequestError, match="No content in API response"):
            CircuitModelClient().complete({})
