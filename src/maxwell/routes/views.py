from fastapi import APIRouter

from maxwell.controllers.navigation import navigate
from maxwell.schemas import NavigateRequest, RenderRequest, RenderResponse, ViewState
from maxwell.utils.math_renderer import render_math_text, split_math


router = APIRouter(prefix="/api", tags=["Views"])


@router.post("/views/navigate", response_model=ViewState)
def navigate_view(request: NavigateRequest):
    return navigate(request.state, request.target)


@router.post("/render", response_model=RenderResponse)
def render_text(request: RenderRequest):
    """Split model prose into text/math segments and render it to HTML."""
    return RenderResponse(
        segments=split_math(request.text), html=render_math_text(request.text)
    )
