from maxwell.controllers.config import logger
from maxwell.schemas import AnalysisResponse, AnalysisResult
from maxwell.utils.math_renderer import render_math_text
from maxwell.utils.model_client import CircuitModelClient
from maxwell.utils.response_extractor import extract_analysis


def analyze_circuit_image(image_bytes: bytes, client: CircuitModelClient) -> AnalysisResult:
    """Send the image to the model and scrape the circuit values from its answer."""
    text = client.analyze_circuit(image_bytes)
    result = extract_analysis(text)
    found = [name for name, value in result.fields.model_dump().items() if value]
    logger.info(f"Circuit analysis extracted fields: {found or 'none'}")
    return result


def build_analysis_response(result: AnalysisResult) -> AnalysisResponse:
    return AnalysisResponse(
        result=result,
        is_ac=result.is_ac,
        summary_html=render_math_text(result.summary_text),
        details_html=render_math_text(result.full_text),
    )
