from typing import get_args

import pytest

from rulesmith.agent.artifacts import PROJECT_CATEGORIES, ProjectCategory
from rulesmith.agent.classifier import classify_project


@pytest.mark.parametrize(
    ("purpose", "expected"),
    [
        ("A marketing website for a bakery", "frontend"),
        ("Backend for payments", "backend"),
        ("Android game", "mobile"),
        ("Fullstack app", "fullstack"),
        ("Data pipeline", "data"),
        ("DevOps tooling", "devops"),
        ("Cloud infrastructure", "devops"),
    ],
)
def test_classify_project_matches_keywords(purpose, expected):
    assert classify_project(purpose) == expected


def test_classify_project_is_case_insensitive():
    assert classify_project("MOBILE") == "mobile"


def test_classify_project_earlier_category_wins():
    assert classify_project("api for my mobile web app") == "frontend"
    assert classify_project("api for a mobile app") == "backend"


def test_classify_project_falls_back_to_general():
    assert classify_project("a cooking recipe tracker") == "general"
    assert classify_project("") == "general"


def test_classify_project_always_returns_a_known_category():
    for purpose in ["", "   ", "x", "🚀 rockets", "web api mobile data cloud", "a cooking recipe tracker"]:
        assert classify_project(purpose) in PROJECT_CATEGORIES
    assert set(PROJECT_CATEGORIES) == set(get_args(ProjectCategory))
