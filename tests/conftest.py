"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from gitai.config import AIConfig
from gitai.llm.base import BaseLLMProvider, LLMResult
from gitai.models import DiffSummary, FileChange, FileStatus, PromptContext
from gitai.styles import CommitStyle


class FakeProvider(BaseLLMProvider):
    """Provider returning canned text and recording its prompts."""

    def __init__(self, responses=None, config=None):
        super().__init__(config or AIConfig(api_key="sk-test"))
        self.responses = list(responses or ["feat(auth): add login endpoint"])
        self.calls = []

    @property
    def name(self) -> str:
        return "Fake"

    def complete(self, system_prompt: str, user_prompt: str) -> LLMResult:
        self.calls.append((system_prompt, user_prompt))
        text = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        return LLMResult(text=text, model=self.model)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_dir(temp_dir, mocker):
    """Point the gitai config directory at a temporary directory."""
    config_path = temp_dir / ".gitai"
    mocker.patch("gitai.config._CONFIG_DIR", config_path)
    return config_path


@pytest.fixture
def sample_raw_diff():
    """Sample raw staged diff with two files."""
    return """diff --git a/src/auth.py b/src/auth.py
new file mode 100644
index 0000000..e69de29
--- /dev/null
+++ b/src/auth.py
@@ -0,0 +1,3 @@
+def login(user):
+    return True
+
diff --git a/README.md b/README.md
index 1234567..abcdefg 100644
--- a/README.md
+++ b/README.md
@@ -1,2 +1,2 @@
-# Old title
+# New title
 Some text
"""


@pytest.fixture
def sample_diff(sample_raw_diff):
    """Sample DiffSummary matching sample_raw_diff."""
    return DiffSummary.from_files(
        [
            FileChange(path="src/auth.py", status=FileStatus.ADDED, insertions=3),
            FileChange(path="README.md", status=FileStatus.MODIFIED, insertions=1, deletions=1),
        ],
        raw=sample_raw_diff,
    )


@pytest.fixture
def sample_context(sample_diff):
    """Sample PromptContext with repository context."""
    return PromptContext(
        diff=sample_diff,
        style=CommitStyle.CONVENTIONAL,
        repo_name="gitai",
        branch="feature/login",
        previous_commits=("Add config loader", "Fix typo in docs"),
    )


@pytest.fixture
def fake_provider():
    """A FakeProvider with a conventional response."""
    return FakeProvider()


@pytest.fixture
def make_provider():
    """Factory for FakeProviders with custom responses."""
    return FakeProvider


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run
