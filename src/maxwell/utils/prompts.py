"""
Fixed instructions sent to the vision-language model.

The quiz and suggestion templates must stay in sync with the block parsers in
``maxwell.utils.response_extractor``.
"""

from typing import List


CIRCUIT_ANALYSIS_PROMPT = (
    "Analyze this circuit diagram completely. First, provide a brief simplified "
    "description of the circuit (e.g., \"This is a circuit with a 12V battery and "
    "equivalent resistance of 300Ω in series\"). Then provide detailed analysis "
    "including: 1) Total equivalent resistance (Req), 2) Voltage, 3) Current, "
    "4) For AC circuits: impedance, average power, and frequency, 5) Complete "
    "mathematical explanation showing all work and formulas used. Use LaTeX "
    "notation for mathematical expressions (use $ for inline math like $V = IR$ "
    "and $$ for display math like $$R_{eq} = R_1 + R_2$$)."
)


QUIZ_PROMPT_TEMPLATE = """Generate exactly {num_questions} multiple choice questions about circuit theory. Topics should include: Ohm's Law, series and parallel circuits, Kirchhoff's laws, AC/DC circuits, capacitors, inductors, resistors, power calculations, and circuit analysis.

For each question, provide:
1. The question text
2. Four answer options (A, B, C, D)
3. The correct answer letter
4. A detailed explanation of why the correct answer is right and why other answers are wrong

Format your response EXACTLY like this:
QUESTION 1: [question text]
A) [option A]
B) [option B]
C) [option C]
D) [option D]
CORRECT: [letter]
EXPLANATION: [detailed explanation]

QUESTION 2: [question text]
...and so on."""


STUDY_SUGGESTIONS_PROMPT_TEMPLATE = """Based on these circuit theory questions that a student got wrong:

{questions_text}

Analyze the common themes and knowledge gaps, then provide 3-5 specific study recommendations. For each recommendation, include:
1. The topic name
2. A brief description of what to focus on
3. Why it's important for understanding circuits

Format as:
TOPIC: [topic name]
FOCUS: [what to study]
WHY: [importance]

Keep recommendations concise and actionable."""


def build_quiz_prompt(num_questions: int) -> str:
    return QUIZ_PROMPT_TEMPLATE.format(num_questions=num_questions)


def build_study_suggestions_prompt(missed_questions: List[str]) -> str:
    questions_text = "\n".join(
        f"{index}. {question}" for index, question in enumerate(missed_questions, 1)
    )
    return STUDY_SUGGESTIONS_PROMPT_TEMPLATE.format(questions_text=questions_text)
