"""LLM-related exception classes.

Contains all exception classes for LLM operations:
- ProviderError: The generation call failed or returned no content
- EmptyResponseError: The response reduced to nothing after cleanup
"""


class ProviderError(Exception):
    """Raised when a text-generation provider call fails."""

    pass


class EmptyResponseError(Exception):
    """Raised when the generated text contains no usable commit message."""

    pass
