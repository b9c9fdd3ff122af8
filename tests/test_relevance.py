"""
Career relevance classifier tests.
"""

import pytest

from careerion.services.relevance import CareerRelevanceClassifier, is_career_related


@pytest.mark.parametrize("message", [
    "How do I become a software engineer?",
    "Can you review my resume?",
    "What should I study to become a nurse?",
    "Tips for salary negotiation",
    "I want to switch careers",
    "Which degree should I choose?",
])
def test_career_messages(message):
    assert is_career_related(message)


@pytest.mark.parametrize("message", [
    "What is the weather?",
    "Tell me a joke",
])
def test_off_topic_messages(message):
    assert not is_career_related(message)


@pytest.mark.parametrize("message", [None, "", 42, ["career"]])
def test_non_text_is_never_relevant(message):
    assert not is_career_related(message)


def test_case_insensitive():
    assert is_career_related("CAREER")


def test_question_about_doing_something():
    classifier = CareerRelevanceClassifier(keywords=(), phrases=())

    assert classifier.is_work_question("where should i learn painting")
    assert classifier("Where should I learn painting?")
    assert not classifier("Where is the station?")


def test_custom_vocabulary():
    classifier = CareerRelevanceClassifier(
        keywords=("weather",), phrases=(), question_words=(), work_context_words=()
    )

    assert classifier("What is the WEATHER?")
    assert not classifier("How do I become a software engineer?")
