from typing import Optional

from maxwell.controllers.config import logger
from maxwell.controllers.quiz_session import new_session
from maxwell.schemas import Page, ViewState


def resolve_page(target: str) -> Page:
    """Unknown targets fall back to the landing page."""
    try:
        return Page(target)
    except ValueError:
        logger.warning(f"Unknown page '{target}', showing landing page")
        return Page.HOME


def navigate(state: Optional[ViewState], target: str) -> ViewState:
    """
    Switch the top-level page.

    Staying on the same page keeps its state. Moving to another page discards
    the previous page's state and starts the new page fresh.
    """
    state = state or ViewState()
    page = resolve_page(target)

    if page == state.page:
        return state

    if page == Page.STUDY_BUDDY:
        return ViewState(page=page, quiz=new_session())
    return ViewState(page=page)

