"""CLI commands for configuration management."""

from typing import Optional

import typer

from gitai import config as app_config
from gitai.config import API_KEY_ENV_VARS, DEFAULT_MODELS, ConfigurationError, LLMProvider
from gitai.styles import STYLE_DESCRIPTIONS, CommitStyle

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage gitai configuration in ~/.gitai/",
    add_completion=False,
)

_VALID_PROVIDERS = ", ".join(p.value for p in LLMProvider)
_VALID_STYLES = ", ".join(s.value for s in CommitStyle)


def _parse_provider_arg(provider: str) -> LLMProvider:
    try:
        return LLMProvider(provider.lower())
    except ValueError:
        typer.echo(f"Invalid provider: {provider}", err=True)
        typer.echo(f"Valid providers: {_VALID_PROVIDERS}", err=True)
        raise typer.Exit(1)


@config_app.command("show")
def config_show() -> None:
    """Show the resolved configuration."""
    try:
        config = app_config.load_config()
    except ConfigurationError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Current gitai configuration ({app_config.get_config_file_path()}):")
    typer.echo()
    for key, value in app_config.config_to_dict(config).items():
        if isinstance(value, list):
            typer.echo(f"  {key}:")
            for item in value:
                typer.echo(f"    - {item}")
        else:
            typer.echo(f"  {key}: {value if value is not None else 'not set'}")


@config_app.command("set-key")
def config_set_key(
    provider: Optional[str] = typer.Option(
        None,
        "--provider",
        "-p",
        help=f"Provider to store the key for ({_VALID_PROVIDERS}). Defaults to the active provider.",
    ),
) -> None:
    """Set or update the API key for a provider."""
    if provider:
        llm_provider = _parse_provider_arg(provider)
    else:
        try:
            llm_provider = app_config.load_config().ai.provider
        except ConfigurationError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)

    env_var = API_KEY_ENV_VARS[llm_provider]
    api_key = typer.prompt(f"Enter your {llm_provider.value} API key", hide_input=True).strip()
    if not api_key:
        typer.echo("Error: API key cannot be empty", err=True)
        raise typer.Exit(1)

    try:
        app_config.save_credential(env_var, api_key)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ API key saved for {llm_provider.value}")


@config_app.command("set-provider")
def config_set_provider(
    provider: str = typer.Argument(..., help=f"Provider name ({_VALID_PROVIDERS})"),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Model name. Defaults to the provider's default model.",
    ),
) -> None:
    """Set the active LLM provider and model."""
    llm_provider = _parse_provider_arg(provider)
    selected_model = model or DEFAULT_MODELS[llm_provider]

    try:
        app_config.set_config_value("provider", llm_provider.value)
        app_config.set_config_value("model", selected_model)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Provider set to {llm_provider.value}")
    typer.echo(f"✓ Model set to {selected_model}")

    env_var = API_KEY_ENV_VARS[llm_provider]
    if not app_config.load_credentials().get(env_var):
        typer.echo()
        typer.echo(f"Note: no API key saved for {llm_provider.value}.")
        typer.echo("Run 'gitai config set-key' or set " + env_var)


@config_app.command("set-model")
def config_set_model(
    model: str = typer.Argument(..., help="Model name, e.g. gpt-4o-mini"),
) -> None:
    """Set the model used for generation."""
    try:
        app_config.set_config_value("model", model)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Model set to {model}")


@config_app.command("set-style")
def config_set_style(
    style: str = typer.Argument(..., help=f"Default commit style ({_VALID_STYLES})"),
) -> None:
    """Set the default commit message style."""
    try:
        commit_style = CommitStyle(style.lower())
    except ValueError:
        typer.echo(f"Invalid style: {style}", err=True)
        typer.echo(f"Valid styles: {_VALID_STYLES}", err=True)
        raise typer.Exit(1)

    try:
        app_config.set_config_value("default_style", commit_style.value)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Default style set to {commit_style.value}")
    typer.echo(f"  {STYLE_DESCRIPTIONS[commit_style]['description']}")


@config_app.command("path")
def config_path() -> None:
    """Show the path of the configuration file."""
    typer.echo(str(app_config.get_config_file_path()))
