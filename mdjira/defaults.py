"""Default configuration values and constants for mdjira."""

import pathlib

# Code blocks longer than this render collapsed
MAX_CODE_LINE = 20

INLINE_CODE_COLOR = "#00875a"
CODE_THEME = "RDark"

FORMATTED_LANGUAGES = ["typescript", "ts", "javascript", "js", "json", "java"]

LANG_MAP = {
    "shell": "bash",
    "bash": "bash",
    "zsh": "bash",
    "actionscript3": "actionscript3",
    "csharp": "csharp",
    "coldfusion": "coldfusion",
    "cpp": "cpp",
    "css": "css",
    "delphi": "delphi",
    "diff": "diff",
    "erlang": "erlang",
    "groovy": "groovy",
    "java": "java",
    "javafx": "javafx",
    "js": "javascript",
    "javascript": "javascript",
    "ts": "typescript",
    "typescript": "typescript",
    "perl": "perl",
    "php": "php",
    "none": "none",
    "powershell": "powershell",
    "python": "python",
    "ruby": "ruby",
    "scala": "scala",
    "rust": "rust",
    "sql": "sql",
    "vb": "vb",
    "html/xml": "html/xml",
}

HTTP_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"]

MISTUNE_PLUGINS = ["strikethrough", "table", "task_lists", "url"]

RENDER_OPTIONS = {
    "inline_code_color": INLINE_CODE_COLOR,
    "code_theme": CODE_THEME,
    "max_code_lines": MAX_CODE_LINE,
}

LOG_LEVELS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "SUCCESS": "blue",
}

CONFIG_FILE = pathlib.Path.home() / ".config" / "mdjira" / "config.yaml"
