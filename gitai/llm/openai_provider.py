"""OpenAI GPT provider implementation."""

from openai import OpenAI

from gitai.llm.base import BaseLLMProvider, LLMResult
from gitai.llm.exceptions import ProviderError


class OpenAIProvider(BaseLLMProvider):
    """OpenAI chat completions provider."""

    @property
    def name(self) -> str:
        return "OpenAI"

    def complete(self, system_prompt: str, user_prompt: str) -> LLMResult:
        """Generate a commit message using the OpenAI chat completions API.

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

        client = OpenAI(api_key=api_key, organization=self.config.organization)

        try:
            response = client.chat.completions.create(
                model=self.model,
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except Exception as e:
            raise ProviderError(f"OpenAI API call failed: {e}") from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise ProviderError("No response generated from OpenAI")

        usage = response.usage
        return LLMResult(
            text=content,
            model=self.model,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
        )
