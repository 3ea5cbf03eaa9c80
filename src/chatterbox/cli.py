"""Chatterbox CLI - personal task tracker."""

import logging
import sys

import click

from .config import load_config
from .session import ERROR_PREFIX, Session, create_session


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, level.upper(), logging.WARNING),
    )


@click.group()
@click.version_option(package_name="chatterbox")
@click.option("--file", "data_file", default=None, type=click.Path(dir_okay=False),
              help="Task file to use instead of the configured one")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, data_file: str | None, debug: bool):
    """Chatterbox - personal task tracker."""
    config = load_config()
    if data_file:
        config.data_file = data_file
    _setup_logging("DEBUG" if debug else config.log_level)
    ctx.obj = config


def _session(ctx) -> Session:
    return create_session(ctx.obj)


@main.command()
@click.pass_context
def chat(ctx):
    """Interactive session: one command per line, 'bye' to quit."""
    session = _session(ctx)
    click.echo(session.greeting())
    if session.has_tasks():
        click.echo("History found!")

    while True:
        try:
            line = click.prompt("", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            click.echo()
            break

        if not line.strip():
            continue

        response = session.process_input(line)
        if response is None:
            break
        click.echo(response)

    click.echo(session.goodbye())


@main.command()
@click.argument("words", nargs=-1, required=True)
@click.pass_context
def run(ctx, words: tuple[str, ...]):
    """Run a single command, e.g. chatterbox run todo read book."""
    session = _session(ctx)
    response = session.process_input(" ".join(words))
    if response is None:
        click.echo(session.goodbye())
        return
    click.echo(response)
    if response.startswith(ERROR_PREFIX):
        sys.exit(1)


@main.command("list")
@click.pass_context
def list_tasks(ctx):
    """List all tasks."""
    session = _session(ctx)
    click.echo(session.process_input("list"))


@main.command()
@click.pass_context
def bot(ctx):
    """Run the Telegram front-end."""
    try:
        from .telegram_bot import run_bot
        click.echo("Starting Chatterbox Telegram bot...")
        click.echo("Press Ctrl+C to stop")
        run_bot(ctx.obj)
    except ImportError as e:
        click.echo("Error: Missing dependencies. Run 'pip install python-telegram-bot'", err=True)
        click.echo(f"Details: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\nBot stopped.")


if __name__ == "__main__":
    main()
