"""
Base Agent Class for the text conversion steps
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, TypeVar, Generic
from dataclasses import dataclass, field
import logging
from enum import Enum

from metric_recipes.config.settings import ConversionOptions, Settings

T = TypeVar('T')

class AgentStatus(Enum):
    """How much of the text an agent managed to convert."""
    SUCCESS = "success"
    PARTIAL = "partial"
    FAILED = "failed"

@dataclass
class AgentResult(Generic[T]):
    """
    Result of one conversion step.

    A PARTIAL result still carries usable text; the parts that were left
    alone are described in `metadata`. An unsuccessful result is always
    FAILED and has no text.
    """
    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    status: AgentStatus = AgentStatus.SUCCESS
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.success:
            self.status = AgentStatus.FAILED

class BaseAgent(ABC):
    """A step that rewrites recipe text under a set of conversion options."""

    def __init__(self, settings: Settings, options: Optional[ConversionOptions] = None):
        self.settings = settings
        self.options = options or settings.conversion
        self.logger = logging.getLogger(f"metric_recipes.agents.{self.__class__.__name__}")
        self._setup_logging()

    def _setup_logging(self):
        log_level = getattr(logging, self.settings.log_level.upper(), logging.INFO)
        self.logger.setLevel(log_level)

        # One handler per agent logger, however many agents are created
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            self.logger.addHandler(handler)
        self.logger.propagate = False

    @abstractmethod
    def convert(self, text: str) -> AgentResult[str]:
        """Rewrite the text; never raises, failures come back as a FAILED result."""

    def process(self, text: str) -> AgentResult[str]:
        return self.convert(text)

    def _handle_error(self, error: Exception, context: str = "") -> AgentResult[str]:
        """Log an error and turn it into a FAILED result."""
        error_msg = f"{context}: {error}" if context else str(error)
        self.logger.error(error_msg)
        return AgentResult(success=False, error=error_msg)

    def _log_success(self, message: str) -> None:
        self.logger.info(message)
