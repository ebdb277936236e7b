from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ProjectCategory = Literal[
    "frontend",
    "backend",
    "mobile",
    "fullstack",
    "data",
    "devops",
    "general",
]

PROJECT_CATEGORIES: tuple[ProjectCategory, ...] = (
    "frontend",
    "backend",
    "mobile",
    "fullstack",
    "data",
    "devops",
    "general",
)


class GenerationRequest(BaseModel):
    """Inputs for a single rules generation, built once per invocation."""

    model_config = ConfigDict(frozen=True)

    purpose: str = Field(description="Free-text description of the project's goal")
    current_date: str = Field(description="Date of generation in en-US short form, e.g. '10/19/2026'")
    category: ProjectCategory = Field(description="Best-effort project category derived from the purpose")
