from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


OPTION_LETTERS = ("A", "B", "C", "D")


# Circuit Analyzer
class CircuitFields(BaseModel):
    """Scalar values scraped from the model's analysis. Any subset may be missing."""

    resistance: Optional[str] = None
    voltage: Optional[str] = None
    current: Optional[str] = None
    impedance: Optional[str] = None
    power: Optional[str] = None
    frequency: Optional[str] = None


class AnalysisResult(BaseModel):
    summary_text: str
    full_text: str
    fields: CircuitFields = Field(default_factory=CircuitFields)

    model_config = {"frozen": True}

    @property
    def is_ac(self) -> bool:
        return bool(self.fields.impedance or self.fields.frequency)


class AnalysisResponse(BaseModel):
    result: AnalysisResult
    is_ac: bool
    summary_html: str
    details_html: str


# Study Buddy
class QuizOption(BaseModel):
    letter: Literal["A", "B", "C", "D"]
    text: str


class QuizQuestion(BaseModel):
    id: int = Field(description="0-based position of the question in the quiz")
    question_text: str
    options: List[QuizOption]
    correct_letter: Literal["A", "B", "C", "D"]
    explanation: str = "No explanation provided."

    @field_validator("question_text")
    @classmethod
    def _question_text_present(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("question text is empty")
        return value

    @field_validator("options")
    @classmethod
    def _exactly_four_lettered_options(cls, value: List[QuizOption]) -> List[QuizOption]:
        letters = [option.letter for option in value]
        if len(letters) != 4 or set(letters) != set(OPTION_LETTERS):
            raise ValueError(f"expected options A-D exactly once, got {letters}")
        return value


class StudySuggestion(BaseModel):
    topic: str
    focus: str = ""
    why: str = ""


class QuizReviewItem(BaseModel):
    question_id: int
    chosen_letter: Optional[str]
    correct_letter: str
    is_correct: bool


class QuizScore(BaseModel):
    correct: int
    total: int
    percentage: int
    review: List[QuizReviewItem] = Field(default_factory=list)


class QuizPhase(str, Enum):
    SELECTING_LENGTH = "selecting_length"
    GENERATING = "generating"
    IN_PROGRESS = "in_progress"
    SUBMITTED = "submitted"


class QuizSession(BaseModel):
    phase: QuizPhase = QuizPhase.SELECTING_LENGTH
    quiz_length: Optional[int] = None
    questions: List[QuizQuestion] = Field(default_factory=list)
    answers: Dict[int, str] = Field(default_factory=dict)
    current_index: int = 0
    submitted: bool = False
    score: Optional[QuizScore] = None
    suggestions: List[StudySuggestion] = Field(default_factory=list)
    suggestions_loading: bool = False
    error: Optional[str] = None

    @model_validator(mode="after")
    def _index_and_answers_in_range(self) -> "QuizSession":
        if self.phase in (QuizPhase.IN_PROGRESS, QuizPhase.SUBMITTED) and not self.questions:
            raise ValueError(f"a {self.phase.value} quiz needs at least one question")
        upper = max(len(self.questions) - 1, 0)
        if not 0 <= self.current_index <= upper:
            raise ValueError(f"current_index must be within 0..{upper}")
        ids = {question.id for question in self.questions}
        unknown = set(self.answers) - ids
        if unknown:
            raise ValueError(f"answers reference unknown questions: {sorted(unknown)}")
        return self


# Page navigation
class Page(str, Enum):
    HOME = "home"
    CIRCUIT_ANALYZER = "circuit-analyzer"
    STUDY_BUDDY = "study-buddy"


class ViewState(BaseModel):
    page: Page = Page.HOME
    analysis: Optional[AnalysisResult] = None
    quiz: Optional[QuizSession] = None


# Math rendering
class MathSegment(BaseModel):
    kind: Literal["text", "math"]
    content: str
    display: bool = False


# Requests used by routes
class QuizGenerateRequest(BaseModel):
    length: int


class QuizSessionRequest(BaseModel):
    session: QuizSession


class QuizAnswerRequest(BaseModel):
    session: QuizSession
    letter: str


class QuizNavigateRequest(BaseModel):
    session: QuizSession
    direction: Optional[Literal["next", "previous"]] = None
    index: Optional[int] = None


class NavigateRequest(BaseModel):
    state: Optional[ViewState] = None
    target: str


class RenderRequest(BaseModel):
    text: str


class RenderResponse(BaseModel):
    segments: List[MathSegment]
    html: str
