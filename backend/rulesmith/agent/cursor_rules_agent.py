import logging
from collections.abc import Callable
from datetime import date

from rulesmith.agent.artifacts import GenerationRequest
from rulesmith.agent.base import BaseAgent
from rulesmith.agent.classifier import classify_project
from rulesmith.agent.document import assemble_document
from rulesmith.agent.errors import GenerationFailure, translate_failure
from rulesmith.agent.llm_client import GenerationBackend, invoke_generation
from rulesmith.agent.prompts.cursor_rules import compose_prompt, format_current_date

logger = logging.getLogger(__name__)


class CursorRulesAgent(BaseAgent[str, str]):
    """
    Turns a project purpose into a Cursor rules document.

    Each run is independent: one request is built, one backend call is made,
    and either a complete document or a single failure comes back.
    """

    def __init__(
        self,
        backend: GenerationBackend | None = None,
        today: Callable[[], date] | None = None,
    ):
        super().__init__(backend=backend)
        self.today = today or date.today

    def build_request(self, purpose: str) -> GenerationRequest:
        return GenerationRequest(
            purpose=purpose,
            current_date=format_current_date(self.today()),
            category=classify_project(purpose),
        )

    async def run(self, input_data: str) -> str:
        request = self.build_request(input_data)
        logger.info("Generating cursor rules for a %s project", request.category)

        prompt = compose_prompt(request.purpose, request.category, request.current_date)
        try:
            body = await invoke_generation(self.backend, prompt)
        except GenerationFailure as err:
            translated = translate_failure(err)
            if translated is err:
                raise
            raise translated from err

        return assemble_document(request.category, request.purpose, request.current_date, body)


async def generate_cursor_rules(purpose: str, backend: GenerationBackend | None = None) -> str:
    """Generate a Cursor rules document for `purpose` with a fresh agent."""
    return await CursorRulesAgent(backend=backend).run(purpose)
