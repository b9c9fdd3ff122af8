"""
JSON extraction tests.
"""

import pytest

from careerion.utils.json_utils import extract_json, strip_code_fences


def test_plain_json():
    assert extract_json('{"careers": ["Nurse", "Teacher"]}') == {"careers": ["Nurse", "Teacher"]}


def test_fenced_json():
    assert extract_json('```json\n{"a":1}\n```') == {"a": 1}


def test_fence_without_language():
    assert extract_json('```\n[1, 2]\n```') == [1, 2]


def test_surrounding_prose_is_ignored():
    text = 'Here you go:\n{"title": "Analyst", "score": 0.8}\nLet me know if you need more!'

    assert extract_json(text) == {"title": "Analyst", "score": 0.8}


def test_trailing_bracket_in_prose():
    assert extract_json('[{"a": 1}] (see [1])') == [{"a": 1}]


@pytest.mark.parametrize("text", [None, "", "no json here", '{"a": ', 123])
def test_unparseable_returns_none(text):
    assert extract_json(text) is None


def test_strip_code_fences_keeps_content():
    assert strip_code_fences("```JSON\n{}\n```") == "{}"
