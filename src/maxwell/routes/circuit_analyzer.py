from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from maxwell.controllers.circuit_analyzer import analyze_circuit_image, build_analysis_response
from maxwell.schemas import AnalysisResponse
from maxwell.utils.model_client import (
    CircuitModelClient,
    ModelRequestError,
    get_model_client,
)


router = APIRouter(prefix="/api/circuit-analyzer", tags=["Circuit Analyzer"])


@router.post("/analyze", response_model=AnalysisResponse)
def analyze_circuit(
    file: UploadFile = File(...),
    client: CircuitModelClient = Depends(get_model_client),
):
    try:
        if file.content_type and not file.content_type.startswith("image/"):
            raise HTTPException(
                status_code=400, detail="Invalid file type. Only images are allowed."
            )

        image_bytes = file.file.read()
        if not image_bytes:
            raise HTTPException(status_code=400, detail="Please select an image first")

        result = analyze_circuit_image(image_bytes, client)
        return build_analysis_response(result)
    except HTTPException:
        raise
    except ModelRequestError as e:
        raise HTTPException(
            status_code=502, detail=f"Failed to analyze circuit: {str(e)}"
        )
