from rulesmith.agent.artifacts import ProjectCategory

FRONTMATTER_TEMPLATE = """---
description: Main development guidelines for the {purpose} project
globs: **/*
alwaysApply: true
---"""

FOOTER = """---
*Powered by tuncer-byte*
*GitHub: @tuncer-byte*"""


def render_frontmatter(purpose: str) -> str:
    return FRONTMATTER_TEMPLATE.format(purpose=purpose)


def assemble_document(
    category: ProjectCategory,
    purpose: str,
    current_date: str,
    generated_body: str,
) -> str:
    """
    Wrap the generated body with the rules frontmatter and footer.
    The body is inserted as is; category and date only shape the prompt.
    """
    return f"{render_frontmatter(purpose)}\n\n{generated_body}\n\n{FOOTER}"
