"""
Prompt builder tests.
"""

from careerion.services.prompt_builder import (
    STRICT_JSON_PREFIX,
    build_career_prompt,
    build_recommendations_prompt,
    render_profile_summary,
)


def test_generic_prompt_has_question_but_no_profile():
    prompt = build_career_prompt("How do I get into UX?", year=2030)

    assert '## User Question: "How do I get into UX?"' in prompt
    assert "as of 2030" in prompt
    assert "User Profile Analysis" not in prompt
    assert not prompt.startswith(STRICT_JSON_PREFIX)


def test_profile_block_comes_before_question():
    prompt = build_career_prompt("What next?", profile={"skills": ["Go"], "careerGoals": "SRE"})

    assert prompt.index("## User Profile Analysis:") < prompt.index("## User Question:")
    assert "**Core Skills**: Go" in prompt
    assert "**Career Objectives**: SRE" in prompt


def test_system_prompt_and_json_prefix():
    prompt = build_career_prompt("List roles", system_prompt="Return 3 items.", expect_json=True)

    assert prompt.startswith(STRICT_JSON_PREFIX)
    assert prompt.endswith("Additional Context: Return 3 items.")


def test_missing_profile_fields_read_not_specified():
    summary = render_profile_summary({"skills": [], "interests": "hiking"})

    assert "**Core Skills**: Not specified" in summary
    assert "**Interests**: hiking" in summary
    assert "(Willing to relocate: No)" in summary
    assert "Not specified in Not specified from Not specified" in summary


def test_relocation_flag():
    assert "(Willing to relocate: Yes)" in render_profile_summary({"willingToRelocate": True})


def test_recommendations_prompt_defaults():
    prompt = build_recommendations_prompt("Should I do a PhD?")

    assert "- Name: User" in prompt
    assert "Query Category: General Career Guidance" in prompt
    assert 'User Question: "Should I do a PhD?"' in prompt
    assert "- Skills: Not specified" in prompt


def test_recommendations_prompt_with_profile():
    prompt = build_recommendations_prompt(
        "Should I do a PhD?",
        name="Dana",
        profile={"skills": ["R", "Stata"], "fieldOfStudy": "Economics"},
        category="Education",
    )

    assert "- Name: Dana" in prompt
    assert "- Skills: R, Stata" in prompt
    assert "- Education: Not specified in Economics" in prompt
    assert "Query Category: Education" in prompt
