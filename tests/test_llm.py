"""Tests for gitai.llm package and its providers."""

from unittest.mock import MagicMock

import pytest

from gitai.config import AIConfig, ConfigurationError, LLMProvider
from gitai.llm import (
    EmptyResponseError,
    LLMResult,
    ProviderError,
    generate_commit_message,
    get_provider,
)
from gitai.llm.anthropic_provider import AnthropicProvider
from gitai.llm.openai_provider import OpenAIProvider
from gitai.llm.prompts import get_system_prompt
from gitai.models import PromptContext
from gitai.styles import CommitStyle


class TestGetProvider:
    """Tests for get_provider factory function."""

    def test_returns_openai_provider(self):
        """Test getting the OpenAI provider."""
        provider = get_provider(AIConfig(provider=LLMProvider.OPENAI))
        assert isinstance(provider, OpenAIProvider)

    def test_returns_anthropic_provider(self):
        """Test getting the Anthropic provider."""
        provider = get_provider(AIConfig(provider=LLMProvider.ANTHROPIC, model="claude-x"))
        assert isinstance(provider, AnthropicProvider)
        assert provider.model == "claude-x"

    def test_unsupported_provider_raises(self):
        """Test that an unknown provider raises ValueError."""
        with pytest.raises(ValueError):
            get_provider(AIConfig(provider="bogus"))


class TestGenerateCommitMessage:
    """Tests for generate_commit_message function."""

    def test_conventional_generation(self, sample_context, fake_provider):
        """Test generating a conventional message from a fake provider."""
        generated = generate_commit_message(sample_context, fake_provider)

        assert generated.message.title == "feat(auth): add login endpoint"
        assert generated.message.type == "feat"
        assert generated.message.scope == "auth"
        assert 0.5 <= generated.confidence <= 1.0

    def test_prompts_sent_to_provider(self, sample_context, fake_provider):
        """Test that the provider receives the built prompts."""
        generate_commit_message(sample_context, fake_provider)

        system_prompt, user_prompt = fake_provider.calls[0]
        assert system_prompt == get_system_prompt(CommitStyle.CONVENTIONAL)
        assert "Branch: feature/login" in user_prompt

    def test_single_call(self, sample_context, fake_provider):
        """Test that exactly one provider call is made."""
        generate_commit_message(sample_context, fake_provider)
        assert len(fake_provider.calls) == 1

    def test_fenced_response(self, sample_context, make_provider):
        """Test that a fenced response is cleaned."""
        provider = make_provider(["```\nfix(parser)!: drop v1 syntax\n```"])
        generated = generate_commit_message(sample_context, provider)

        assert generated.message.title == "fix(parser)!: drop v1 syntax"
        assert generated.message.breaking is True

    def test_empty_text_raises_provider_error(self, sample_context, make_provider):
        """Test that an empty provider result raises ProviderError."""
        provider = make_provider([""])
        with pytest.raises(ProviderError):
            generate_commit_message(sample_context, provider)

    def test_blank_content_raises_empty_response(self, sample_context, make_provider):
        """Test that content blank after cleanup raises EmptyResponseError."""
        provider = make_provider(["```\n\n```"])
        with pytest.raises(EmptyResponseError):
            generate_commit_message(sample_context, provider)

    def test_standard_style(self, sample_diff, make_provider):
        """Test that the standard style skips header decomposition."""
        provider = make_provider(["Add login endpoint"])
        context = PromptContext(diff=sample_diff, style=CommitStyle.STANDARD)

        generated = generate_commit_message(context, provider)

        assert generated.message.title == "Add login endpoint"
        assert generated.message.type is None


class TestOpenAIProvider:
    """Tests for OpenAIProvider."""

    def _response(self, content):
        response = MagicMock()
        response.choices = [MagicMock()]
        response.choices[0].message.content = content
        response.usage.prompt_tokens = 120
        response.usage.completion_tokens = 12
        return response

    def test_complete(self, mocker):
        """Test a successful completion."""
        mock_client_cls = mocker.patch("gitai.llm.openai_provider.OpenAI")
        mock_client = mock_client_cls.return_value
        mock_client.chat.completions.create.return_value = self._response("feat: add login")

        config = AIConfig(api_key="sk-test", model="gpt-4o-mini", max_tokens=100, temperature=0.7, organization="org-1")
        result = OpenAIProvider(config).complete("system", "user")

        assert result == LLMResult(text="feat: add login", model="gpt-4o-mini", input_tokens=120, output_tokens=12)
        mock_client_cls.assert_called_once_with(api_key="sk-test", organization="org-1")
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["max_tokens"] == 100
        assert kwargs["temperature"] == 0.7
        assert kwargs["messages"] == [
            {"role": "system", "content": "system"},
            {"role": "user", "content": "user"},
        ]

    def test_missing_api_key(self, mocker):
        """Test that a missing key raises ConfigurationError before any call."""
        mock_client_cls = mocker.patch("gitai.llm.openai_provider.OpenAI")

        with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
            OpenAIProvider(AIConfig()).complete("system", "user")
        mock_client_cls.assert_not_called()

    def test_api_failure_wrapped(self, mocker):
        """Test that SDK errors are wrapped in ProviderError."""
        mock_client = mocker.patch("gitai.llm.openai_provider.OpenAI").return_value
        cause = RuntimeError("rate limited")
        mock_client.chat.completions.create.side_effect = cause

        with pytest.raises(ProviderError, match="rate limited") as exc_info:
            OpenAIProvider(AIConfig(api_key="sk-test")).complete("system", "user")
        assert exc_info.value.__cause__ is cause

    def test_empty_content(self, mocker):
        """Test that empty content raises ProviderError."""
        mock_client = mocker.patch("gitai.llm.openai_provider.OpenAI").return_value
        mock_client.chat.completions.create.return_value = self._response(None)

        with pytest.raises(ProviderError, match="No response"):
            OpenAIProvider(AIConfig(api_key="sk-test")).complete("system", "user")


class TestAnthropicProvider:
    """Tests for AnthropicProvider."""

    def _message(self, text):
        block = MagicMock()
        block.type = "text"
        block.text = text
        message = MagicMock()
        message.content = [block]
        message.usage.input_tokens = 80
        message.usage.output_tokens = 9
        return message

    def _config(self, **kwargs):
        return AIConfig(provider=LLMProvider.ANTHROPIC, api_key="sk-ant", model="claude-x", **kwargs)

    def test_complete(self, mocker):
        """Test a successful completion."""
        mock_client = mocker.patch("gitai.llm.anthropic_provider.Anthropic").return_value
        mock_client.messages.create.return_value = self._message("fix: handle eof")

        result = AnthropicProvider(self._config()).complete("system", "user")

        assert result.text == "fix: handle eof"
        assert result.input_tokens == 80
        assert result.output_tokens == 9
        kwargs = mock_client.messages.create.call_args.kwargs
        assert kwargs["system"] == "system"
        assert kwargs["messages"] == [{"role": "user", "content": "user"}]

    def test_temperature_capped(self, mocker):
        """Test that temperatures above 1.0 are capped."""
        mock_client = mocker.patch("gitai.llm.anthropic_provider.Anthropic").return_value
        mock_client.messages.create.return_value = self._message("fix: handle eof")

        AnthropicProvider(self._config(temperature=1.6)).complete("system", "user")

        assert mock_client.messages.create.call_args.kwargs["temperature"] == 1.0

    def test_missing_api_key(self, mocker):
        """Test that a missing key raises ConfigurationError."""
        mocker.patch("gitai.llm.anthropic_provider.Anthropic")
        config = AIConfig(provider=LLMProvider.ANTHROPIC)

        with pytest.raises(ConfigurationError, match="ANTHROPIC_API_KEY"):
            AnthropicProvider(config).complete("system", "user")

    def test_api_failure_wrapped(self, mocker):
        """Test that SDK errors are wrapped in ProviderError."""
        mock_client = mocker.patch("gitai.llm.anthropic_provider.Anthropic").return_value
        mock_client.messages.create.side_effect = RuntimeError("overloaded")

        with pytest.raises(ProviderError, match="overloaded"):
            AnthropicProvider(self._config()).complete("system", "user")

    def test_empty_content(self, mocker):
        """Test that a response without text raises ProviderError."""
        mock_client = mocker.patch("gitai.llm.anthropic_provider.Anthropic").return_value
        mock_client.messages.create.return_value = self._message("")

        with pytest.raises(ProviderError):
            AnthropicProvider(self._config()).complete("system", "user")
