"""
Best-effort re-indentation of code block contents.

Only a handful of languages are touched. This is a bracket counter, not a
parser: brackets inside string or comment literals are counted too.
"""

import json

from . import defaults, utils

OPENERS = ("{", "[", "(")
CLOSERS = ("}", "]", ")")


def format_code(code, language, debug=None):
    """Format code with basic indentation for supported languages.

    Unsupported languages, and code that fails to format, come back as is.
    """
    debug = debug or utils.debug
    try:
        lang = (language or "").lower()
        if lang not in defaults.FORMATTED_LANGUAGES:
            return code

        if lang == "json":
            return format_json(code)
        if lang in ("typescript", "ts", "javascript", "js"):
            return reindent(code, indent_size=2, openers=OPENERS, closers=CLOSERS)
        if lang == "java":
            return reindent(code, indent_size=4, openers=("{",), closers=("}",))
        return code
    except Exception as e:  # pylint: disable=broad-exception-caught
        debug(f"Code formatting failed for {language}: {e}")
        return code


def _reject_constant(name):
    raise ValueError(f"{name} is not valid JSON")


def format_json(code):
    try:
        parsed = json.loads(code, parse_constant=_reject_constant)
    except ValueError:
        # json.JSONDecodeError is a ValueError
        return code
    return json.dumps(parsed, indent=2, ensure_ascii=False)


def reindent(code, indent_size, openers, closers):
    """Re-indent every line from a running bracket depth."""
    indent_level = 0
    lines = []
    for line in code.split("\n"):
        trimmed = line.strip()

        if trimmed.startswith(closers):
            indent_level = max(0, indent_level - 1)

        lines.append(" " * (indent_level * indent_size) + trimmed)

        if trimmed.endswith(openers):
            indent_level += 1
    return "\n".join(lines)
