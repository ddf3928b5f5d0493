"""Convert raw HTML fragments to Jira wiki markup."""

import re

from . import defaults

# Order matters: later rules rely on the earlier ones having fired.
HTML_RULES = [
    # line breaks
    (r"<br\s*/?>", "\n"),
    # bold, italic, underline, strikethrough
    (r"</?(strong|b)>", "*"),
    (r"</?(em|i)>", "_"),
    (r"</?u>", "+"),
    (r"</?(s|strike|del)>", "-"),
    # inline code, the opening tag takes the configured colour
    (r"<code>", None),
    (r"</code>", "}}{color}"),
    (r"</?pre>", "{noformat}"),
    (r"</?blockquote>", "{quote}"),
    (r"<h([1-6])>", r"h\1. "),
    (r"</h[1-6]>", "\n\n"),
    (r"<p>", ""),
    (r"</p>", "\n\n"),
    (r'<a\s+href="([^"]*)"[^>]*>([^<]+)</a>', r"[\2|\1]"),
    (r'<a\s+href="([^"]*)"[^>]*></a>', r"[\1]"),
    (r'<img\s+src="([^"]*)"[^>]*>', r"!\1!"),
    # lists, basic cases only
    (r"<(ul|ol)>", ""),
    (r"</(ul|ol)>", "\n"),
    (r"<li>", "* "),
    (r"</li>", "\n"),
    # tables
    (r"<table[^>]*>", ""),
    (r"</table>", "\n"),
    # before <th>, which would also match <thead>
    (r"</?tbody[^>]*>", ""),
    (r"</?thead[^>]*>", ""),
    (r"<tr[^>]*>", ""),
    (r"</tr>", "|\n"),
    (r"<th[^>]*>", "||"),
    (r"</th>", ""),
    (r"<td[^>]*>", "|"),
    (r"</td>", ""),
    (r"<hr\s*/?>", "----\n"),
    # containers, content is kept
    (r"<div[^>]*>", ""),
    (r"</div>", "\n"),
    (r"</?span[^>]*>", ""),
]

_COMPILED_RULES = [
    (re.compile(pattern, re.IGNORECASE), replacement)
    for pattern, replacement in HTML_RULES
]

_ANY_TAG = re.compile(r"<[^>]*>")
_EXTRA_NEWLINES = re.compile(r"\n{3,}")


def convert_html_to_jira(html, inline_code_color=None):
    """Convert HTML tags to Jira wiki markup.

    Unsupported tags are stripped, their content is kept. <code> is
    coloured with inline_code_color, defaults.INLINE_CODE_COLOR when unset.
    """
    color = inline_code_color or defaults.INLINE_CODE_COLOR
    code_open = "{color:" + color + "}{{"

    converted = html
    for pattern, replacement in _COMPILED_RULES:
        if replacement is None:
            converted = pattern.sub(lambda _: code_open, converted)
        else:
            converted = pattern.sub(replacement, converted)

    converted = _ANY_TAG.sub("", converted)
    return _EXTRA_NEWLINES.sub("\n\n", converted)
