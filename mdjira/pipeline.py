"""Markdown to Jira wiki markup pipeline."""

import mistune

from . import defaults, postprocess, utils
from .renderer import JiraRenderer


def verbose():
    """Send renderer diagnostics to stderr for the rest of the process."""
    utils.set_verbose(True)


def create_markdown(debug=None, options=None):
    return mistune.create_markdown(
        escape=False,
        hard_wrap=True,
        renderer=JiraRenderer(debug=debug, options=options),
        plugins=defaults.MISTUNE_PLUGINS,
    )


def convert(markdown, debug=None, options=None):
    """
    Convert Markdown to Jira wiki markup.

    Args:
        markdown: the Markdown source, raw HTML allowed
        debug: callable receiving diagnostic messages, defaults to the
            module sink enabled by verbose()
        options: render options overriding defaults.RENDER_OPTIONS

    Returns:
        the Jira markup
    """
    md = create_markdown(debug=debug, options=options)
    return postprocess.run_passes(md(markdown))
