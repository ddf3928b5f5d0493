"""Convert Markdown to Jira wiki markup."""

from .pipeline import convert, verbose
from .defaults import LANG_MAP, MAX_CODE_LINE
from .formatter import format_code
from .html_to_jira import convert_html_to_jira
from .postprocess import (
    escape_api_endpoints,
    fix_commented_code_blocks,
    fix_double_underscore,
    process_code_block_lines,
)
from .renderer import JiraRenderer

__all__ = [
    "convert",
    "verbose",
    "format_code",
    "convert_html_to_jira",
    "process_code_block_lines",
    "fix_commented_code_blocks",
    "fix_double_underscore",
    "escape_api_endpoints",
    "JiraRenderer",
    "LANG_MAP",
    "MAX_CODE_LINE",
]
