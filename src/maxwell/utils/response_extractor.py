"""
Best-effort extraction of structured values from free-text model output.

The model's output format is not guaranteed, so nothing here raises on a miss:
a field that cannot be found is left as None, and a quiz block that does not
validate is dropped.
"""

import re
from typing import List, Optional

from pydantic import ValidationError

from maxwell.controllers.config import logger
from maxwell.schemas import (
    AnalysisResult,
    CircuitFields,
    QuizOption,
    QuizQuestion,
    StudySuggestion,
)


SUMMARY_MAX_CHARS = 200
SUMMARY_FALLBACK = "Circuit analyzed successfully"
NO_EXPLANATION = "No explanation provided."

_NUMBER = r"[0-9]*\.?[0-9]+"
_PREFIX = r"[kKmMµμ]?"
_SEP = r"\)?[:\s=]+(?:(?:is|of)\s+)?"
_OHMS = r"(?:Ω|Ω|ohms?\b)"


def _field_pattern(labels: str, unit: str) -> "re.Pattern[str]":
    return re.compile(
        rf"(?:{labels}){_SEP}({_NUMBER}\s*{_PREFIX}\s*{unit})", re.IGNORECASE
    )


CIRCUIT_FIELD_PATTERNS = {
    "resistance": _field_pattern(
        r"\bReq\b|\bR_\{?eq\}?|equivalent resistance|total resistance", _OHMS
    ),
    "voltage": _field_pattern(r"voltage|\bV\b", r"(?:V\b|volts?\b)"),
    "current": _field_pattern(r"current|\bI\b", r"(?:A\b|amps?\b)"),
    "impedance": _field_pattern(r"impedance|\bZ\b", _OHMS),
    "power": _field_pattern(
        r"power|\bP_\{?avg\}?|\bPavg\b|\bP\b", r"(?:W\b|watts?\b)"
    ),
    "frequency": _field_pattern(r"frequency|\bf\b", r"(?:Hz\b|hertz\b)"),
}

QUESTION_MARKER = re.compile(r"QUESTION\s+\d+\s*:")
OPTION_LINE = re.compile(r"^\s*([A-D])\)\s*(.+?)\s*$")
CORRECT_MARKER = re.compile(r"CORRECT:\s*([A-D])\b", re.IGNORECASE)
EXPLANATION_MARKER = re.compile(r"EXPLANATION:\s*(.+)", re.IGNORECASE | re.DOTALL)
_BLOCK_MARKER_LINE = re.compile(r"^\s*(?:CORRECT|EXPLANATION):", re.IGNORECASE)

TOPIC_MARKER = re.compile(r"TOPIC:")
TOPIC_TEXT = re.compile(r"^(.+?)(?=FOCUS:|WHY:|$)", re.DOTALL)
FOCUS_TEXT = re.compile(r"FOCUS:\s*(.+?)(?=WHY:|$)", re.DOTALL)
WHY_TEXT = re.compile(r"WHY:\s*(.+?)(?=TOPIC:|$)", re.DOTALL)


def extract_circuit_fields(text: str) -> CircuitFields:
    """First match wins for each quantity; quantities are looked up independently."""
    values = {}
    for name, pattern in CIRCUIT_FIELD_PATTERNS.items():
        match = pattern.search(text or "")
        values[name] = match.group(1).strip() if match else None
    return CircuitFields(**values)


def summarize(text: str) -> str:
    summary = " ".join((text or "").split("\n")[:2])[:SUMMARY_MAX_CHARS]
    return summary if summary.strip() else SUMMARY_FALLBACK


def extract_analysis(text: str) -> AnalysisResult:
    return AnalysisResult(
        summary_text=summarize(text),
        full_text=text,
        fields=extract_circuit_fields(text),
    )


def _parse_question_block(block: str, question_id: int) -> Optional[QuizQuestion]:
    lines = block.strip().split("\n")
    question_text = next((line.strip() for line in lines if line.strip()), "")

    options = []
    for line in lines[1:]:
        if _BLOCK_MARKER_LINE.match(line):
            break
        match = OPTION_LINE.match(line)
        if match:
            options.append(QuizOption(letter=match.group(1), text=match.group(2)))
        if len(options) == 4:
            break

    correct = CORRECT_MARKER.search(block)
    if not correct:
        logger.warning(f"Dropping quiz block {question_id}: no CORRECT marker")
        return None

    explanation = EXPLANATION_MARKER.search(block)

    try:
        return QuizQuestion(
            id=question_id,
            question_text=question_text,
            options=options,
            correct_letter=correct.group(1).upper(),
            explanation=explanation.group(1).strip() if explanation else NO_EXPLANATION,
        )
    except ValidationError as e:
        logger.warning(
            f"Dropping quiz block {question_id}: {e.error_count()} validation error(s)"
        )
        return None


def parse_quiz(text: str) -> List[QuizQuestion]:
    """
    Parse ``QUESTION n:`` blocks into quiz questions.

    Text before the first marker is ignored. Each block needs a question line,
    options A) to D), and a ``CORRECT:`` letter; anything else is dropped, so
    the result may be shorter than the number of blocks. Ids are assigned in
    order over the accepted questions.
    """
    questions: List[QuizQuestion] = []
    for block in QUESTION_MARKER.split(text or "")[1:]:
        question = _parse_question_block(block, len(questions))
        if question is not None:
            questions.append(question)
    return questions


def parse_study_suggestions(text: str) -> List[StudySuggestion]:
    suggestions: List[StudySuggestion] = []
    for block in TOPIC_MARKER.split(text or "")[1:]:
        topic = TOPIC_TEXT.search(block.strip())
        if not topic or not topic.group(1).strip():
            continue
        focus = FOCUS_TEXT.search(block)
        why = WHY_TEXT.search(block)
        suggestions.append(
            StudySuggestion(
                topic=topic.group(1).strip(),
                focus=focus.group(1).strip() if focus else "",
                why=why.group(1).strip() if why else "",
            )
        )
    return suggestions
