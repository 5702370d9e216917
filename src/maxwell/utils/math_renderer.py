"""
Render model prose containing LaTeX math spans to HTML.

Display math is delimited by ``$$...$$`` or ``\\[...\\]``, inline math by
``$...$`` or ``\\(...\\)``. Math spans are typeset to MathML; everything else is
kept verbatim (HTML-escaped).
"""

import html
import re
from typing import Callable, List, Optional

from latex2mathml.converter import convert as latex_to_mathml

from maxwell.controllers.config import logger
from maxwell.schemas import MathSegment


MATH_PATTERN = re.compile(
    r"\$\$([^$]+?)\$\$"  # display
    r"|\\\[(.+?)\\\]"  # display
    r"|\$([^$]+?)\$"  # inline
    r"|\\\((.+?)\\\)",  # inline
    re.DOTALL,
)


def typeset_mathml(latex_text: str, display: bool = False) -> str:
    return latex_to_mathml(latex_text.strip(), display="block" if display else "inline")


def split_math(text: str) -> List[MathSegment]:
    """Split text into ordered plain-text and math segments."""
    segments: List[MathSegment] = []
    last_index = 0

    for match in MATH_PATTERN.finditer(text or ""):
        if match.start() > last_index:
            segments.append(
                MathSegment(kind="text", content=text[last_index : match.start()])
            )

        display_latex = match.group(1) or match.group(2)
        if display_latex is not None:
            segments.append(MathSegment(kind="math", content=display_latex, display=True))
        else:
            inline_latex = match.group(3) or match.group(4)
            segments.append(MathSegment(kind="math", content=inline_latex))

        last_index = match.end()

    if text and last_index < len(text):
        segments.append(MathSegment(kind="text", content=text[last_index:]))

    return segments


class MathTextRenderer:
    """Turns mixed text/math strings into HTML.

    ``typeset`` receives the LaTeX source and a display flag and returns
    markup. Pass ``None`` when no typesetter is available; the input is then
    shown as plain text.
    """

    def __init__(self, typeset: Optional[Callable[[str, bool], str]] = typeset_mathml):
        self.typeset = typeset

    def render_segment(self, segment: MathSegment) -> str:
        if segment.kind == "text":
            return html.escape(segment.content, quote=False)

        css_class = "math-display" if segment.display else "math-inline"
        try:
            markup = self.typeset(segment.content, segment.display)
        except Exception as e:
            logger.warning(f"LaTeX conversion failed for '{segment.content}': {e}")
            return f'<span class="math-fallback">{html.escape(segment.content, quote=False)}</span>'
        return f'<span class="{css_class}">{markup}</span>'

    def render(self, text: str) -> str:
        if not text:
            return ""
        if self.typeset is None:
            return html.escape(text, quote=False)
        return "".join(self.render_segment(segment) for segment in split_math(text))


default_renderer = MathTextRenderer()


def render_math_text(text: str) -> str:
    return default_renderer.render(text)
