from conftest import ANALYSIS_TEXT, QUIZ_TEXT, SUGGESTIONS_TEXT

from maxwell.utils.response_extractor import (
    NO_EXPLANATION,
    SUMMARY_FALLBACK,
    extract_analysis,
    extract_circuit_fields,
    parse_quiz,
    parse_study_suggestions,
    summarize,
)


def test_parse_quiz_reads_every_well_formed_block():
    questions = parse_quiz(QUIZ_TEXT)

    assert [q.id for q in questions] == [0, 1, 2]
    assert [q.correct_letter for q in questions] == ["C", "B", "B"]
    for question in questions:
        assert [option.letter for option in question.options] == ["A", "B", "C", "D"]
    assert questions[0].question_text.startswith("What is the equivalent resistance")
    assert questions[0].options[2].text == "200 Ω"
    assert questions[1].explanation == "KCL is conservation of charge at a node."


def test_block_missing_an_option_is_dropped():
    text = QUIZ_TEXT.replace("C) Kirchhoff's Voltage Law\n", "")

    questions = parse_quiz(text)

    assert len(questions) == 2
    assert [q.question_text[:7] for q in questions] == ["What is", "A 12 V "]
    assert [q.id for q in questions] == [0, 1]


def test_option_letters_after_the_answer_marker_do_not_count():
    text = """QUESTION 1: Which element stores energy in a magnetic field?
A) Resistor
B) Capacitor
D) Inductor
CORRECT: D
EXPLANATION: Only an inductor does.
C) would be wrong anyway
"""
    assert parse_quiz(text) == []


def test_duplicate_option_letters_are_rejected():
    text = """QUESTION 1: Pick one
A) one
B) two
B) three
D) four
CORRECT: A
"""
    assert parse_quiz(text) == []


def test_block_without_correct_marker_is_dropped():
    text = QUIZ_TEXT.replace("CORRECT: B\nEXPLANATION: KCL", "EXPLANATION: KCL")

    assert len(parse_quiz(text)) == 2


def test_extra_option_lines_beyond_four_are_ignored():
    text = """QUESTION 1: Unit of capacitance?
A) Farad
B) Henry
C) Ohm
D) Siemens
A) Farad again
CORRECT: a
"""
    questions = parse_quiz(text)

    assert len(questions) == 1
    assert questions[0].options[0].text == "Farad"
    assert questions[0].correct_letter == "A"
    assert questions[0].explanation == NO_EXPLANATION


def test_parse_quiz_without_markers_returns_nothing():
    assert parse_quiz("") == []
    assert parse_quiz("Sorry, I cannot help with that.") == []


def test_scalar_fields_are_found_in_either_order():
    forward = extract_circuit_fields("Voltage: 12V\nCurrent: 0.5A")
    backward = extract_circuit_fields("Current: 0.5A\nVoltage: 12V")

    assert forward.voltage == backward.voltage == "12V"
    assert forward.current == backward.current == "0.5A"


def test_missing_fields_are_absent_not_errors():
    fields = extract_circuit_fields("The diagram is too blurry to read.")

    assert fields.voltage is None
    assert fields.current is None
    assert fields.resistance is None


def test_first_match_wins():
    fields = extract_circuit_fields("Voltage: 12V across R1. Voltage: 5V across R2.")

    assert fields.voltage == "12V"


def test_ac_quantities_and_prefixes():
    text = (
        "Impedance Z = 50 Ω\n"
        "Frequency: 60 Hz\n"
        "Average power: 2.5 W\n"
        "Total resistance: 1.5 kΩ\n"
        "Current (I): 20 mA"
    )
    fields = extract_circuit_fields(text)

    assert fields.impedance == "50 Ω"
    assert fields.frequency == "60 Hz"
    assert fields.power == "2.5 W"
    assert fields.resistance == "1.5 kΩ"
    assert fields.current == "20 mA"


def test_extract_analysis_builds_summary_and_fields():
    result = extract_analysis(ANALYSIS_TEXT)

    assert result.summary_text == (
        "This is a circuit with a 12V battery and two resistors in series. "
        "The equivalent resistance is 300Ω."
    )
    assert result.full_text == ANALYSIS_TEXT
    assert result.fields.resistance == "300Ω"
    assert result.fields.voltage == "12V"
    assert result.fields.current == "0.04A"
    assert result.is_ac is False


def test_summary_is_truncated_and_has_a_fallback():
    assert len(summarize("x" * 500)) == 200
    assert summarize("") == SUMMARY_FALLBACK
    assert summarize("first\nsecond\nthird") == "first second"


def test_parse_study_suggestions():
    suggestions = parse_study_suggestions(SUGGESTIONS_TEXT)

    assert [s.topic for s in suggestions] == [
        "Series and parallel resistance",
        "Kirchhoff's laws",
    ]
    assert suggestions[0].focus == "Combining resistors step by step"
    assert suggestions[1].why == "They solve circuits Ohm's law alone cannot"


def test_study_suggestion_without_focus_or_why():
    suggestions = parse_study_suggestions("TOPIC: Phasors")

    assert len(suggestions) == 1
    assert suggestions[0].topic == "Phasors"
    assert suggestions[0].focus == ""
    assert suggestions[0].why == ""
