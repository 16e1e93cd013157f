"""Configuration management for gitai.

Handles user-level configuration stored in ~/.gitai/:
- config.yaml: Provider, model, generation and UI settings (flat mapping)
- credentials: API keys for LLM providers
- .env: Optional environment file loaded at startup

Settings are resolved with the precedence environment > config file >
defaults into an explicit AppConfig value that is passed to the pipeline.
"""

import os
import stat
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import load_dotenv

from gitai.styles import CommitStyle


class ConfigurationError(Exception):
    """Raised when configuration is missing or invalid."""

    pass


class LLMProvider(Enum):
    """Supported LLM providers."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"


API_KEY_ENV_VARS = {
    LLMProvider.OPENAI: "OPENAI_API_KEY",
    LLMProvider.ANTHROPIC: "ANTHROPIC_API_KEY",
}

DEFAULT_MODELS = {
    LLMProvider.OPENAI: "gpt-4o-mini",
    LLMProvider.ANTHROPIC: "claude-3-5-haiku-latest",
}

# Environment variable overrides
ENV_PROVIDER = "GITAI_PROVIDER"
ENV_MODEL = "AI_MODEL"
ENV_MAX_TOKENS = "AI_MAX_TOKENS"
ENV_TEMPERATURE = "AI_TEMPERATURE"
ENV_ORGANIZATION = "OPENAI_ORGANIZATION"
ENV_DEFAULT_STYLE = "DEFAULT_COMMIT_STYLE"


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================

DEFAULT_PROVIDER = LLMProvider.OPENAI
DEFAULT_MAX_TOKENS = 100
DEFAULT_TEMPERATURE = 0.7
DEFAULT_STYLE = CommitStyle.CONVENTIONAL
DEFAULT_MAX_DIFF_SIZE = 50000
DEFAULT_EXCLUDE_FILES = ["package-lock.json", "yarn.lock", "*.min.js", "*.map"]

MAX_TOKENS_RANGE = (10, 4000)
TEMPERATURE_RANGE = (0.0, 2.0)

# Keys accepted in config.yaml
CONFIG_KEYS = (
    "provider",
    "api_key",
    "model",
    "max_tokens",
    "temperature",
    "organization",
    "default_style",
    "max_diff_size",
    "exclude_files",
    "color_output",
    "show_diff",
)


@dataclass
class AIConfig:
    """Settings for the text-generation provider."""

    provider: LLMProvider = DEFAULT_PROVIDER
    api_key: Optional[str] = None
    model: str = DEFAULT_MODELS[DEFAULT_PROVIDER]
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE
    organization: Optional[str] = None

    @property
    def api_key_env_var(self) -> str:
        return API_KEY_ENV_VARS[self.provider]


@dataclass
class GitConfig:
    """Settings for reading the staged changes."""

    default_style: CommitStyle = DEFAULT_STYLE
    max_diff_size: int = DEFAULT_MAX_DIFF_SIZE
    exclude_files: list[str] = field(default_factory=lambda: DEFAULT_EXCLUDE_FILES.copy())


@dataclass
class UIConfig:
    """Settings for terminal output."""

    color_output: bool = True
    show_diff: bool = False


@dataclass
class AppConfig:
    """Complete gitai configuration."""

    ai: AIConfig = field(default_factory=AIConfig)
    git: GitConfig = field(default_factory=GitConfig)
    ui: UIConfig = field(default_factory=UIConfig)


_CONFIG_DIR = Path.home() / ".gitai"


def get_config_dir() -> Path:
    """Get the gitai configuration directory.

    Returns:
        Path to ~/.gitai/
    """
    return _CONFIG_DIR


def ensure_config_dir() -> Path:
    """Ensure the config directory exists.

    Returns:
        Path to ~/.gitai/
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file."""
    return get_config_dir() / "config.yaml"


def get_credentials_file_path() -> Path:
    """Get path to credentials file."""
    return get_config_dir() / "credentials"


def load_env_files() -> None:
    """Load .env files into the process environment.

    Looks in the current directory, the home directory and ~/.gitai/, in
    that order. Variables that are already set are never overridden.
    """
    for env_file in (Path.cwd() / ".env", Path.home() / ".env", get_config_dir() / ".env"):
        if env_file.is_file():
            load_dotenv(env_file, override=False)


def load_file_config() -> Dict[str, Any]:
    """Load configuration from ~/.gitai/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        ConfigurationError: If the file cannot be read or is not a mapping.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise ConfigurationError(f"Config file {config_file} must contain a mapping")
    return config


def save_file_config(config: Dict[str, Any]) -> None:
    """Save configuration to ~/.gitai/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise ConfigurationError(f"Failed to save config to {config_file}: {e}")


def set_config_value(key: str, value: Any) -> None:
    """Set a single key in config.yaml.

    Args:
        key: One of CONFIG_KEYS.
        value: The value to store.

    Raises:
        ConfigurationError: If the key is unknown.
    """
    if key not in CONFIG_KEYS:
        raise ConfigurationError(f"Unknown config key: {key}")
    config = load_file_config()
    config[key] = value
    save_file_config(config)


def load_credentials() -> Dict[str, str]:
    """Load API keys from ~/.gitai/credentials.

    Returns:
        Dictionary mapping environment variable names to API keys.
    """
    credentials_file = get_credentials_file_path()

    if not credentials_file.exists():
        return {}

    credentials = {}
    try:
        with open(credentials_file, "r") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if "=" in line:
                    key, value = line.split("=", 1)
                    credentials[key.strip()] = value.strip()
    except OSError as e:
        raise ConfigurationError(f"Failed to load credentials from {credentials_file}: {e}")

    return credentials


def save_credential(env_var: str, api_key: str) -> None:
    """Save or update an API key in the credentials file.

    Args:
        env_var: Environment variable name (e.g., "OPENAI_API_KEY").
        api_key: The API key value.
    """
    ensure_config_dir()
    credentials_file = get_credentials_file_path()

    credentials = load_credentials()
    credentials[env_var] = api_key

    try:
        with open(credentials_file, "w") as f:
            f.write("# gitai API credentials\n")
            f.write("# Format: PROVIDER_API_KEY=your_key_here\n\n")
            for key, value in credentials.items():
                f.write(f"{key}={value}\n")

        # Owner read/write only
        os.chmod(credentials_file, stat.S_IRUSR | stat.S_IWUSR)
    except OSError as e:
        raise ConfigurationError(f"Failed to save credential: {e}")


def _parse_int(value: Any, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")


def _parse_float(value: Any, name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")


def _parse_style(value: Any, name: str) -> CommitStyle:
    try:
        return CommitStyle(str(value).strip().lower())
    except ValueError:
        valid = ", ".join(s.value for s in CommitStyle)
        raise ConfigurationError(f"{name} must be one of: {valid}. Got {value!r}")


def _parse_provider(value: Any, name: str) -> LLMProvider:
    try:
        return LLMProvider(str(value).strip().lower())
    except ValueError:
        valid = ", ".join(p.value for p in LLMProvider)
        raise ConfigurationError(f"{name} must be one of: {valid}. Got {value!r}")


def _pick(env: Mapping[str, str], env_var: str, file_config: Dict[str, Any], key: str):
    """Return (value, source name) with environment taking precedence over the file."""
    if env.get(env_var):
        return env[env_var], env_var
    if file_config.get(key) is not None:
        return file_config[key], key
    return None, key


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Resolve the complete configuration.

    Precedence is environment > ~/.gitai/config.yaml > defaults. The API key
    is taken from the environment, then the credentials file, then the
    api_key entry of config.yaml.

    Args:
        environ: Environment mapping to read. Defaults to os.environ.

    Returns:
        The resolved AppConfig. It is not validated; see validate_config.

    Raises:
        ConfigurationError: If a value cannot be parsed or a file is unreadable.
    """
    env = os.environ if environ is None else environ
    file_config = load_file_config()

    value, source = _pick(env, ENV_PROVIDER, file_config, "provider")
    provider = _parse_provider(value, source) if value is not None else DEFAULT_PROVIDER

    api_key_env_var = API_KEY_ENV_VARS[provider]
    api_key = (
        env.get(api_key_env_var)
        or load_credentials().get(api_key_env_var)
        or file_config.get("api_key")
    )

    value, _ = _pick(env, ENV_MODEL, file_config, "model")
    model = str(value) if value is not None else DEFAULT_MODELS[provider]

    value, source = _pick(env, ENV_MAX_TOKENS, file_config, "max_tokens")
    max_tokens = _parse_int(value, source) if value is not None else DEFAULT_MAX_TOKENS

    value, source = _pick(env, ENV_TEMPERATURE, file_config, "temperature")
    temperature = _parse_float(value, source) if value is not None else DEFAULT_TEMPERATURE

    value, _ = _pick(env, ENV_ORGANIZATION, file_config, "organization")
    organization = str(value) if value is not None else None

    value, source = _pick(env, ENV_DEFAULT_STYLE, file_config, "default_style")
    default_style = _parse_style(value, source) if value is not None else DEFAULT_STYLE

    max_diff_size = file_config.get("max_diff_size")
    max_diff_size = (
        _parse_int(max_diff_size, "max_diff_size")
        if max_diff_size is not None
        else DEFAULT_MAX_DIFF_SIZE
    )

    exclude_files = file_config.get("exclude_files")
    if exclude_files is None:
        exclude_files = DEFAULT_EXCLUDE_FILES.copy()
    elif not isinstance(exclude_files, list):
        raise ConfigurationError("exclude_files must be a list of glob patterns")

    return AppConfig(
        ai=AIConfig(
            provider=provider,
            api_key=api_key,
            model=model,
            max_tokens=max_tokens,
            temperature=temperature,
            organization=organization,
        ),
        git=GitConfig(
            default_style=default_style,
            max_diff_size=max_diff_size,
            exclude_files=[str(p) for p in exclude_files],
        ),
        ui=UIConfig(
            color_output=bool(file_config.get("color_output", True)),
            show_diff=bool(file_config.get("show_diff", False)),
        ),
    )


def validate_config(config: AppConfig) -> None:
    """Check that the configuration can be used for a provider call.

    Args:
        config: The resolved configuration.

    Raises:
        ConfigurationError: If the API key is missing or a numeric setting
            is out of range.
    """
    ai = config.ai

    if not ai.api_key:
        env_var = ai.api_key_env_var
        raise ConfigurationError(
            f"{ai.provider.value} API key not found. Please choose one of these options:\n\n"
            f"1. Create a global .env file:\n"
            f"   echo \"{env_var}=your_key_here\" > ~/.gitai/.env\n\n"
            f"2. Set environment variable:\n"
            f"   export {env_var}=your_key_here\n\n"
            f"3. Use CLI config:\n"
            f"   gitai config set-key"
        )

    low, high = MAX_TOKENS_RANGE
    if not low <= ai.max_tokens <= high:
        raise ConfigurationError(f"max_tokens must be between {low} and {high}")

    low, high = TEMPERATURE_RANGE
    if not low <= ai.temperature <= high:
        raise ConfigurationError(f"temperature must be between {low:g} and {high:g}")

    if config.git.max_diff_size <= 0:
        raise ConfigurationError("max_diff_size must be positive")


def mask_api_key(api_key: Optional[str]) -> str:
    """Mask an API key for display."""
    if not api_key:
        return "not set"
    if len(api_key) > 12:
        return api_key[:8] + "..." + api_key[-4:]
    return "***"


def config_to_dict(config: AppConfig) -> Dict[str, Any]:
    """Convert an AppConfig to a flat dictionary for display.

    The API key is masked.

    Args:
        config: The configuration.

    Returns:
        Flat dictionary keyed like config.yaml.
    """
    return {
        "provider": config.ai.provider.value,
        "api_key": mask_api_key(config.ai.api_key),
        "model": config.ai.model,
        "max_tokens": config.ai.max_tokens,
        "temperature": config.ai.temperature,
        "organization": config.ai.organization,
        "default_style": config.git.default_style.value,
        "max_diff_size": config.git.max_diff_size,
        "exclude_files": list(config.git.exclude_files),
        "color_output": config.ui.color_output,
        "show_diff": config.ui.show_diff,
    }
