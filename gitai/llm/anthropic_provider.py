"""Anthropic Claude provider implementation."""

from anthropic import Anthropic

from gitai.llm.base import BaseLLMProvider, LLMResult
from gitai.llm.exceptions import ProviderError


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude LLM provider."""

    @property
    def name(self) -> str:
        return "Anthropic"

    def complete(self, system_prompt: str, user_prompt: str) -> LLMResult:
        """Generate a commit message using Anthropic Claude.

        Args:
            system_prompt: The style-specific system instruction.
            user_prompt: The user prompt built from the diff.

        Returns:
            An LLMResult containing the generated text and token usage.

        Raises:
            ConfigurationError: If the API key is not set.
            ProviderError: If the API call fails or returns no content.
        """
        api_key = self.get_api_key()

        client = Anthropic(api_key=api_key)

        try:
            message = client.messages.create(
                model=self.model,
                max_tokens=self.config.max_tokens,
                # Anthropic caps temperature at 1.0
                temperature=min(self.config.temperature, 1.0),
                system=system_prompt,
                messages=[{"role": "user", "content": user_prompt}],
            )
        except Exception as e:
            raise ProviderError(f"Anthropic API call failed: {e}") from e

        text = "".join(
            block.text for block in message.content if getattr(block, "type", "") == "text"
        )
        if not text:
            raise ProviderError("No response generated from Anthropic")

        return LLMResult(
            text=text,
            model=self.model,
            input_tokens=message.usage.input_tokens,
            output_tokens=message.usage.output_tokens,
        )
