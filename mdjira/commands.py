"""Command line interface for mdjira."""

import pathlib
import sys

import click

from . import config, defaults, pipeline, utils
from .exceptions import ConfigError
from .utils import clipboard


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--theme", help="Theme of rendered code blocks (default: RDark)")
@click.option(
    "--max-code-lines",
    type=int,
    help="Collapse code blocks longer than this many lines",
)
@click.option(
    "-c",
    "--config-file",
    default=defaults.CONFIG_FILE,
    type=click.Path(dir_okay=False, path_type=pathlib.Path),
    help="Config file to use",
)
@click.pass_context
def cli(ctx, verbose, theme, max_code_lines, config_file):
    """Convert Markdown to Jira wiki markup"""

    flag_config = {
        "verbose": verbose or None,
        "code_theme": theme,
        "max_code_lines": max_code_lines,
        "config_file": str(config_file),
    }
    try:
        wconfig = config.read_config(flag_config, config_file)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    if wconfig["verbose"]:
        pipeline.verbose()
    utils.log(
        f"Using config: {wconfig}",
        verbose=wconfig["verbose"],
        verbose_only=True,
        file=sys.stderr,
    )
    ctx.obj = wconfig


@cli.command("convert")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--output", "-o", help="Output file path (default: stdout)")
@click.option("--copy", is_flag=True, help="Copy the result to the clipboard")
@click.pass_obj
def convert(wconfig, source, output, copy):
    """
    Convert a Markdown file (or stdin) to Jira wiki markup.

    Example: mdjira convert README.md --copy
    """
    markup = pipeline.convert(
        source.read(), options=config.render_options(wconfig)
    ).strip()

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(markup + "\n")
        utils.log(f"Jira markup written to {output}", level="SUCCESS")
    else:
        click.echo(markup)

    if copy:
        if clipboard.copy_to_clipboard(markup):
            utils.log("Copied to clipboard", level="SUCCESS", file=sys.stderr)
        else:
            utils.log(
                f"Could not copy to clipboard (platform: {clipboard.detect_platform()})",
                level="WARNING",
                file=sys.stderr,
            )


@cli.command("languages")
def languages():
    """List the code block languages and their Jira highlighting tag."""
    for lang, jira_lang in defaults.LANG_MAP.items():
        click.echo(f"{lang} -> {jira_lang}")


@cli.command("init-config")
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
@click.pass_obj
def init_config(wconfig, force):
    """Write the current settings to the config file."""
    config_file = pathlib.Path(wconfig["config_file"])
    if config_file.exists() and not force:
        raise click.ClickException(
            f"{config_file} already exists, use --force to overwrite it"
        )
    config.write_config(wconfig, config_file)
    utils.log(f"Configuration saved to {config_file}", level="SUCCESS")
