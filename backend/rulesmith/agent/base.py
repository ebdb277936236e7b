from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from rulesmith.agent.llm_client import GeminiBackend, GenerationBackend

InType = TypeVar("InType")
OutType = TypeVar("OutType")

class BaseAgent(ABC, Generic[InType, OutType]):
    """Abstract base class for agents that delegate generation to a backend."""

    def __init__(self, backend: GenerationBackend | None = None):
        self.backend = backend or GeminiBackend()

    @abstractmethod
    async def run(self, input_data: InType) -> OutType:
        """Run the agent on the given input to produce the output artifact."""
        pass
