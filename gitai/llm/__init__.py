"""LLM module for gitai.

This module turns a PromptContext into a GeneratedCommit through a
text-generation provider selected by the AIConfig.
"""

from gitai.config import AIConfig, LLMProvider
from gitai.llm.base import BaseLLMProvider, LLMResult
from gitai.llm.exceptions import EmptyResponseError, ProviderError
from gitai.llm.parsing import parse_response
from gitai.llm.prompts import build_prompt
from gitai.models import GeneratedCommit, PromptContext


def get_provider(config: AIConfig) -> BaseLLMProvider:
    """Get an LLM provider instance.

    Args:
        config: The AI configuration; its provider field selects the class.

    Returns:
        An instance of the appropriate LLM provider.

    Raises:
        ValueError: If the provider is not supported.
    """
    if config.provider == LLMProvider.OPENAI:
        from gitai.llm.openai_provider import OpenAIProvider

        return OpenAIProvider(config)

    elif config.provider == LLMProvider.ANTHROPIC:
        from gitai.llm.anthropic_provider import AnthropicProvider

        return AnthropicProvider(config)

    else:
        raise ValueError(f"Unsupported provider: {config.provider}")


def generate_commit_message(context: PromptContext, provider: BaseLLMProvider) -> GeneratedCommit:
    """Generate a commit message for the staged changes in a prompt context.

    This is the main entry point of the synthesis pipeline: it builds the
    prompts, performs a single provider call and interprets the response.

    Args:
        context: The diff, style and optional repository context.
        provider: The text-generation provider to call.

    Returns:
        The parsed GeneratedCommit.

    Raises:
        ConfigurationError: If the provider has no API key.
        ProviderError: If the provider call fails or returns no content.
        EmptyResponseError: If the response holds no usable message.
    """
    system_prompt, user_prompt = build_prompt(context)
    result = provider.complete(system_prompt, user_prompt)
    if not result.text:
        raise ProviderError(f"No response generated from {provider.name}")
    return parse_response(result.text, context.style)


# Export commonly used items
__all__ = [
    "BaseLLMProvider",
    "LLMResult",
    "ProviderError",
    "EmptyResponseError",
    "get_provider",
    "generate_commit_message",
]
