from rulesmith.agent.artifacts import ProjectCategory

# Checked top to bottom; the first row with a matching keyword wins.
CATEGORY_KEYWORDS: tuple[tuple[tuple[str, ...], ProjectCategory], ...] = (
    (("frontend", "web", "site", "ui"), "frontend"),
    (("backend", "api", "service"), "backend"),
    (("mobile", "android", "ios"), "mobile"),
    (("fullstack", "full-stack"), "fullstack"),
    (("data", "analytics", "ml", "ai"), "data"),
    (("devops", "infrastructure", "cloud"), "devops"),
)

DEFAULT_CATEGORY: ProjectCategory = "general"


def classify_project(purpose: str) -> ProjectCategory:
    """
    Guess the project category from its purpose by case-insensitive substring match.
    The result is a hint for prompt tailoring, not a reliable label.
    """
    text = (purpose or "").lower()
    for keywords, category in CATEGORY_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return category
    return DEFAULT_CATEGORY
