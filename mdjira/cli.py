"""CLI entry point for mdjira."""

import sys

import click

from . import commands, utils


def main():
    verbose = "--verbose" in sys.argv or "-v" in sys.argv

    if "-h" in sys.argv:
        sys.argv.remove("-h")
        sys.argv.append("--help")

    try:
        # pylint: disable=no-value-for-parameter
        commands.cli(standalone_mode=False)
    except click.exceptions.Abort:
        click.secho("Operation cancelled by user", fg="yellow", err=True)
        sys.exit(1)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        if verbose:
            utils.log("Verbose mode enabled. Full error details:", file=sys.stderr)
            raise e
        sys.exit(1)


if __name__ == "__main__":
    main()
