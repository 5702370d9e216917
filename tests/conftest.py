import pytest
from fastapi.testclient import TestClient

from maxwell.main import app
from maxwell.schemas import QuizOption, QuizQuestion
from maxwell.utils.model_client import ModelRequestError, get_model_client


QUIZ_TEXT = """Here is your circuit theory quiz.

QUESTION 1: What is the equivalent resistance of two 100 Ω resistors in series?
A) 50 Ω
B) 100 Ω
C) 200 Ω
D) 400 Ω
CORRECT: C
EXPLANATION: Series resistances add, so $R_{eq} = R_1 + R_2 = 200\\,\\Omega$.

QUESTION 2: Which law states that the sum of currents entering a node is zero?
A) Ohm's Law
B) Kirchhoff's Current Law
C) Kirchhoff's Voltage Law
D) Faraday's Law
CORRECT: B
EXPLANATION: KCL is conservation of charge at a node.

QUESTION 3: A 12 V source drives 0.5 A. What power is delivered?
A) 3 W
B) 6 W
C) 12 W
D) 24 W
CORRECT: B
EXPLANATION: $P = VI = 6$ W.
"""

ANALYSIS_TEXT = """This is a circuit with a 12V battery and two resistors in series.
The equivalent resistance is 300Ω.

Req: 300Ω
Voltage: 12V
Current: 0.04A

$$R_{eq} = R_1 + R_2$$ and by Ohm's law $I = V / R_{eq}$.
"""

SUGGESTIONS_TEXT = """Here are some recommendations.

TOPIC: Series and parallel resistance
FOCUS: Combining resistors step by step
WHY: Every circuit reduction starts here

TOPIC: Kirchhoff's laws
FOCUS: Writing node and loop equations
WHY: They solve circuits Ohm's law alone cannot
"""


def make_question(question_id, correct="A"):
    return QuizQuestion(
        id=question_id,
        question_text=f"Question {question_id}?",
        options=[QuizOption(letter=letter, text=f"Option {letter}") for letter in "ABCD"],
        correct_letter=correct,
        explanation="Because.",
    )


class FakeModelClient:
    """Stands in for CircuitModelClient; records calls and replays canned text."""

    def __init__(self, analysis=ANALYSIS_TEXT, quiz=QUIZ_TEXT, suggestions=SUGGESTIONS_TEXT, error=None):
        self.analysis = analysis
        self.quiz = quiz
        self.suggestions = suggestions
        self.error = error
        self.calls = []

    def _reply(self, name, text):
        self.calls.append(name)
        if self.error is not None:
            raise self.error
        return text

    def analyze_circuit(self, image_bytes):
        return self._reply("analyze_circuit", self.analysis)

    def generate_quiz(self, num_questions):
        return self._reply("generate_quiz", self.quiz)

    def suggest_study_topics(self, missed_questions):
        self.missed_questions = missed_questions
        return self._reply("suggest_study_topics", self.suggestions)


@pytest.fixture
def fake_client():
    return FakeModelClient()


@pytest.fixture
def failing_client():
    return FakeModelClient(error=ModelRequestError("API error: 503", status_code=503))


@pytest.fixture
def client(fake_client):
    app.dependency_overrides[get_model_client] = lambda: fake_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
