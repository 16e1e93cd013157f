"""Base classes and shared utilities for LLM providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from gitai.config import AIConfig, ConfigurationError


@dataclass
class LLMResult:
    """Result from an LLM completion call, including token usage."""

    text: str
    model: str
    input_tokens: int = 0
    output_tokens: int = 0


class BaseLLMProvider(ABC):
    """Abstract base class for text-generation providers.

    A provider turns a (system prompt, user prompt) pair into generated
    text. It does not retry and imposes no timeout of its own.
    """

    def __init__(self, config: AIConfig):
        """Initialize the provider.

        Args:
            config: Credential, model and sampling settings.
        """
        self.config = config
        self.model = config.model

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable provider name."""
        pass

    @abstractmethod
    def complete(self, system_prompt: str, user_prompt: str) -> LLMResult:
        """Generate text for the given prompts.

        Args:
            system_prompt: The style-specific system instruction.
            user_prompt: The user prompt built from the diff.

        Returns:
            An LLMResult with the generated text and token usage.

        Raises:
            ProviderError: If the call fails or returns no content.
        """
        pass

    def get_api_key(self) -> str:
        """Get the API key from the configuration.

        Returns:
            The API key string.

        Raises:
            ConfigurationError: If no API key is configured.
        """
        if not self.config.api_key:
            raise ConfigurationError(
                f"{self.name} API key not found. Set it using:\n"
                f"  1. Environment variable: export {self.config.api_key_env_var}=your_key_here\n"
                f"  2. Run: gitai config set-key\n"
                f"  3. Add {self.config.api_key_env_var}=your_key_here to ~/.gitai/.env"
            )
        return self.config.api_key
