"""
Main command-line interface for wut.
"""
import sys
import asyncio
from typing import List

import tomli_w
import typer
from rich.console import Console
from rich.syntax import Syntax

from wut import __version__
from wut.api.corrector import get_corrector, get_history_reader, get_terminal_formatter
from wut.config import config_manager
from wut.corrector.shortflag import explain_short_flag_cluster
from wut.utils.command_utils import get_root_command
from wut.utils.logging import setup_logging, get_logger

# Create the app
app = typer.Typer(help="wut: spot typos, risky commands and known error fixes in shell commands")
logger = get_logger(__name__)
console = Console()

# Let command lines such as "rm -rf /" through as plain arguments
PASSTHROUGH = {"ignore_unknown_options": True, "allow_extra_args": True}


def version_callback(value: bool):
    """Display version information and exit."""
    if value:
        console.print(f"wut version: {__version__}")
        sys.exit(0)


@app.callback()
def main(
    debug: bool = typer.Option(
        False, "--debug", "-d", help="Enable debug mode"
    ),
    version: bool = typer.Option(
        False, "--version", "-v", callback=version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """wut: spot typos, risky commands and known error fixes in shell commands"""
    debug = debug or config_manager.config.debug
    config_manager.config.debug = debug

    setup_logging(debug=debug, log_dir=config_manager.CONFIG_DIR / "logs")


@app.command(context_settings=PASSTHROUGH)
def fix(
    command: List[str] = typer.Argument(
        ..., help="The command line to check."
    ),
    history: bool = typer.Option(
        False, "--history", "-H", help="Fall back to matching against your shell history."
    ),
    execute: bool = typer.Option(
        False, "--execute", "-x", help="Run the command to diagnose its error output when nothing else applies."
    ),
):
    """Suggest a correction for a command line."""
    full_command = " ".join(command)
    formatter = get_terminal_formatter()
    corrector = get_corrector()

    try:
        past_commands = get_history_reader().read_commands() if history else None
        correction = corrector.correct(full_command, history=past_commands)

        if correction is None and execute:
            correction = asyncio.run(corrector.diagnose(full_command))

        formatter.print_correction(correction)

        if correction is None:
            root = get_root_command(full_command)
            formatter.print_alternatives(root, corrector.suggest_alternatives(full_command))

    except Exception as e:
        logger.exception("Error correcting command")
        formatter.print_error(str(e))
        sys.exit(1)


@app.command(context_settings=PASSTHROUGH)
def diagnose(
    command: List[str] = typer.Argument(
        ..., help="The command line to run and diagnose."
    ),
):
    """Run a command and derive a fix from its error output."""
    full_command = " ".join(command)
    formatter = get_terminal_formatter()

    try:
        correction = asyncio.run(get_corrector().diagnose(full_command))
    except Exception as e:
        logger.exception("Error diagnosing command")
        formatter.print_error(str(e))
        sys.exit(1)

    if correction is None:
        console.print("[yellow]No known fix for this output.[/yellow]")
        return
    formatter.print_correction(correction)


@app.command(context_settings=PASSTHROUGH)
def flags(
    root: str = typer.Argument(..., help="Root command, e.g. docker."),
    cluster: str = typer.Argument(..., help="Short-flag cluster, e.g. -it."),
):
    """Explain what each character of a short-flag cluster means."""
    explanation = explain_short_flag_cluster(root, cluster, get_corrector().store)
    get_terminal_formatter().print_flag_explanation(root, cluster, explanation)


@app.command()
def typos():
    """List the built-in typo table."""
    get_terminal_formatter().print_typos(get_corrector().store.typo_table())


@app.command()
def config(
    init: bool = typer.Option(
        False, "--init", help="Write the current configuration to the config file."
    ),
):
    """Show the configuration, or write it with --init."""
    if init:
        path = config_manager.save_config()
        console.print(f"[green]Configuration saved to {path}[/green]")
        return

    console.print(f"[bold]Config file:[/bold] {config_manager.config_file}")
    rendered = tomli_w.dumps(config_manager.config.model_dump())
    console.print(Syntax(rendered, "toml", theme="monokai"))
