"""
Text passes run over the rendered Jira markup.

Every pass is built on process_code_block_lines, which tells lines inside a
{code...}/{code} region apart from ordinary text without parsing again.
"""

import re

from . import defaults

API_ENDPOINT_RE = re.compile(
    r"((?:" + "|".join(defaults.HTTP_METHODS) + r")\s+)?"
    # at least one slash, so {quote} and {noformat} are left alone
    r"[a-zA-Z0-9\-.]*/[a-zA-Z0-9/\-.]*\{[^}]+\}[a-zA-Z0-9/\-.]*"
)

# Lines already carrying Jira markup are left alone
JIRA_MARKUP_GUARDS = ("{color", "{code", "{{")

HTML_ENTITIES = [
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&amp;", "&"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&nbsp;", " "),
]


def _keep(line):
    return line


def process_code_block_lines(
    markdown, on_code_start_line, on_code_block_line, on_code_end_line, on_non_code_line
):
    """
    Transform a rendered document line by line.

    Args:
        markdown: the rendered markup
        on_code_start_line: applied to a line opening a code block ({code:...)
        on_code_block_line: applied to lines inside a code block
        on_code_end_line: applied to a line closing a code block ({code})
        on_non_code_line: applied to every other line

    Returns:
        the transformed markup
    """
    in_code_block = False
    lines = []
    for line in markdown.split("\n"):
        # '{code' is a prefix of '{code}', check the closing marker first
        if "{code}" in line:
            in_code_block = False
            lines.append(on_code_end_line(line))
        elif "{code" in line:
            in_code_block = True
            lines.append(on_code_start_line(line))
        elif in_code_block:
            lines.append(on_code_block_line(line))
        else:
            lines.append(on_non_code_line(line))
    return "\n".join(lines)


def fix_commented_code_blocks(markdown):
    """Drop shell-style comment markers leaking into code blocks."""
    return process_code_block_lines(
        markdown,
        lambda line: line.replace("# ", ""),
        lambda line: line[1:] if line.startswith("#") else line,
        lambda line: line.replace("# ", ""),
        _keep,
    )


def fix_double_underscore(markdown):
    """
    Escape leftover __ outside of code blocks.

    Real __bold__ has been rendered as *bold* already, any remaining __ (as
    in one__two three__four) would turn into italics in Jira.
    """
    return process_code_block_lines(
        markdown,
        _keep,
        _keep,
        _keep,
        lambda line: line.replace("__", "\\_\\_"),
    )


def post_process_html_conversion(text):
    """Decode leftover HTML entities and squeeze horizontal whitespace."""
    processed = text
    for entity, char in HTML_ENTITIES:
        processed = processed.replace(entity, char)

    processed = re.sub(r"[ \t]+", " ", processed)
    processed = re.sub(r"\n[ \t]+", "\n", processed)
    return re.sub(r"[ \t]+\n", "\n", processed)


def escape_api_endpoint_patterns(text):
    """Escape the braces of endpoint paths like GET /api/items/{itemId}."""
    if any(guard in text for guard in JIRA_MARKUP_GUARDS):
        return text
    return API_ENDPOINT_RE.sub(lambda m: escape_braces(m.group(0)), text)


def escape_braces(text):
    return text.replace("{", "\\{").replace("}", "\\}")


def escape_api_endpoints(markdown):
    return process_code_block_lines(
        markdown, _keep, _keep, _keep, escape_api_endpoint_patterns
    )


PASSES = [
    fix_commented_code_blocks,
    fix_double_underscore,
    post_process_html_conversion,
    escape_api_endpoints,
]


def run_passes(markup):
    for fix in PASSES:
        markup = fix(markup)
    return markup
