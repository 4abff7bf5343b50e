#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os
import sys
import logging
from typing import List, Optional

import typer

from . import __version__
from .constants import Command, REQUIRED_SETTINGS
from .errors import AdotError
from .utils.config import Config, get_adot_home, load_config, load_env_file
from .utils.log import add_file_handler, setup_logging

from .commands.microblog import handle_microblog
from .commands.location import handle_location
from .commands.readme import handle_readme

app = typer.Typer(
    name="adot",
    help="CLI tool for microblogging and location tracking.",
    no_args_is_help=True,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]}
)


def common_setup(logger: logging.Logger, command: Command) -> Config:
    """加载 ADOT_HOME/.env 并校验配置，成功后再开启文件日志。"""
    adot_home = get_adot_home()
    load_env_file(logger, adot_home)
    config = load_config(logger, REQUIRED_SETTINGS[command])
    # The log file is the first thing written, after validation
    add_file_handler(logger, adot_home)
    logger.debug(f"Current working directory (CWD): {os.getcwd()}")
    logger.debug(f"ADOT home directory: {adot_home}")
    return config


def fail(logger: logging.Logger, command: Command, error: AdotError) -> None:
    """Reports a handler failure as one line on stderr and exits with 1."""
    logger.debug(f"{command.value} failed", exc_info=True)
    print(f"Error: {error.describe()}", file=sys.stderr)
    raise typer.Exit(code=1)


def _version_callback(value: bool):
    if value:
        print(f"adot {__version__}")
        raise typer.Exit()


@app.callback()
def root(
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
):
    """CLI tool for microblogging and location tracking."""


@app.command(Command.MICROBLOG.value)
def microblog(
    text: str = typer.Argument(..., help="The content of the microblog post"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="显示详细输出"),
):
    """Create a new microblog post."""
    if not text.strip():
        raise typer.BadParameter("must not be empty", param_hint="'TEXT'")

    logger = setup_logging(verbose=verbose)
    try:
        config = common_setup(logger, Command.MICROBLOG)
        handle_microblog(logger, config, text)
    except AdotError as e:
        fail(logger, Command.MICROBLOG, e)


@app.command(Command.LOCATION.value)
def location(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="显示详细输出"),
):
    """Send your current location to Firestore."""
    logger = setup_logging(verbose=verbose)
    try:
        config = common_setup(logger, Command.LOCATION)
        handle_location(logger, config)
    except AdotError as e:
        fail(logger, Command.LOCATION, e)


@app.command(Command.README.value)
def readme(
    target_dir: Optional[str] = typer.Option(
        None, "--target-dir", "-d", help="Directory holding README.md (default: current directory)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="显示详细输出"),
):
    """Append the adot footer to README.md and copy its images."""
    logger = setup_logging(verbose=verbose)
    try:
        common_setup(logger, Command.README)
        handle_readme(logger, target_dir or os.getcwd())
    except AdotError as e:
        fail(logger, Command.README, e)


def main(argv: Optional[List[str]] = None) -> None:
    """Console entry point: every failure, usage errors included, exits with 1.

    typer reports usage errors itself in standalone mode and exits with 2;
    only the code is remapped here.
    """
    try:
        app(args=argv, prog_name="adot", standalone_mode=True)
    except SystemExit as e:
        code = e.code
        sys.exit(0 if code in (0, None) else 1)
    sys.exit(0)


if __name__ == "__main__":
    main()
