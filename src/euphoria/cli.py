"""
Euphoria CLI — euphoria-config check | show | example
"""
import json
from pathlib import Path

import click
import yaml

from euphoria.config.schema import render_env_example
from euphoria.config.settings import load_configuration
from euphoria.config.validator import ValidationMode
from euphoria.core.exceptions import ConfigurationError, EnvValidationError
from euphoria.lifecycle import bootstrap

_ENV_DIR = click.option(
    "--env-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory containing .env / .env.prod (default: current directory)",
)


@click.group()
@click.version_option(package_name="euphoria")
def cli() -> None:
    """Euphoria — environment configuration tools."""
    pass


@cli.command()
@_ENV_DIR
def check(env_dir: Path | None) -> None:
    """Validate the environment the bot would start with."""
    try:
        context = bootstrap(mode=ValidationMode.TERMINATING, base_dir=env_dir)
    except ConfigurationError as e:
        click.echo(f"{e.user_message()}: {e.message}", err=True)
        raise SystemExit(1)

    config = context.config
    click.echo("Configuration validated successfully")
    click.echo()
    click.echo("Configuration Summary:")
    click.echo(f"  Environment: {config.environment.value}")
    click.echo(f"  GPT model: {config.openai.gpt_version}")
    click.echo(f"  Database: {config.database.host}:{config.database.port}/{config.database.name}")
    click.echo(f"  Log Level: {config.logging.level.name}")
    click.echo(f"  Admins: {len(config.support.admin_ids)}")


@cli.command()
@_ENV_DIR
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["yaml", "json"]),
    default="yaml",
    help="Output format",
)
def show(env_dir: Path | None, output_format: str) -> None:
    """Print the resolved configuration with secrets masked."""
    try:
        config = load_configuration(mode=ValidationMode.THROWING, base_dir=env_dir)
    except ConfigurationError as e:
        if isinstance(e, EnvValidationError):
            click.echo(e.report(), err=True)
        else:
            click.echo(f"{e.user_message()}: {e.message}", err=True)
        raise SystemExit(1)

    data = config.redacted()
    if output_format == "json":
        click.echo(json.dumps(data, indent=2))
    else:
        click.echo(yaml.safe_dump(data, sort_keys=False), nl=False)


@cli.command()
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path(".env.example"),
    show_default=True,
    help="Where to write the template",
)
def example(output: Path) -> None:
    """Generate an example .env file from the schema."""
    output.write_text(render_env_example() + "\n")
    click.echo(f"Generated {output}")
    click.echo(f"   Copy to .env and fill in your values: cp {output} .env")


if __name__ == "__main__":
    cli()
