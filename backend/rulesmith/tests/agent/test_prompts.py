from datetime import date

from rulesmith.agent.prompts.cursor_rules import compose_prompt, format_current_date


def test_compose_prompt_substitutes_inputs():
    prompt = compose_prompt("Inventory tracker", "backend", "3/7/2026")

    assert "creating Cursor rules for the Inventory tracker project." in prompt
    assert "- PURPOSE: Inventory tracker" in prompt
    assert "- TYPE: backend" in prompt
    assert "- DATE: 3/7/2026" in prompt
    assert "Detailed file/folder structure for backend projects" in prompt
    assert "directly apply to backend development." in prompt


def test_compose_prompt_lists_all_content_sections_in_order():
    prompt = compose_prompt("x", "general", "1/1/2026")
    sections = [
        "1. PROJECT OVERVIEW:",
        "2. CODE STRUCTURE AND ORGANIZATION:",
        "3. CODING STANDARDS:",
        "4. DEVELOPMENT WORKFLOW:",
        "5. TESTING REQUIREMENTS:",
        "6. DOCUMENTATION STANDARDS:",
        "7. QUALITY ASSURANCE:",
        "8. FILE ORGANIZATION:",
        "9. ONBOARDING PROCESS:",
        "10. DEPLOYMENT STRATEGY:",
    ]
    positions = [prompt.index(section) for section in sections]
    assert positions == sorted(positions)


def test_compose_prompt_is_deterministic():
    args = ("Shop {with} braces", "frontend", "10/19/2026")
    assert compose_prompt(*args) == compose_prompt(*args)
    assert "Shop {with} braces" in compose_prompt(*args)


def test_format_current_date_uses_us_short_form():
    assert format_current_date(date(2026, 3, 7)) == "3/7/2026"
    assert format_current_date(date(2026, 10, 19)) == "10/19/2026"
