"""Mistune renderer emitting Jira wiki markup."""

from typing import Any, Callable, Optional

import mistune
from mistune.util import safe_entity

from . import defaults, utils
from .formatter import format_code
from .html_to_jira import convert_html_to_jira
from .postprocess import escape_braces


class JiraRenderer(mistune.HTMLRenderer):
    """Render each Markdown node to Jira markup.

    Children are rendered before their parent, so every method receives
    already converted text.
    """

    def __init__(
        self,
        debug: Optional[Callable[[str], None]] = None,
        options: Optional[dict] = None,
    ):
        super().__init__(escape=False)
        self.debug = debug or utils.debug
        self.options = dict(defaults.RENDER_OPTIONS)
        if options:
            self.options.update(options)

    def text(self, text: str) -> str:
        self.debug(f"Text: {text}")
        return convert_html_to_jira(safe_entity(text))

    def paragraph(self, text: str) -> str:
        self.debug(f"Paragraph: {text}")
        return text + "\n\n"

    def heading(self, text: str, level: int, **attrs: Any) -> str:
        self.debug(f"Heading: {text}")
        return f"h{level}. {text}\n\n"

    def strong(self, text: str) -> str:
        self.debug(f"Strong: {text}")
        return f"*{text}*"

    def emphasis(self, text: str) -> str:
        self.debug(f"Em: {text}")
        return f"_{text}_"

    def strikethrough(self, text: str) -> str:
        self.debug(f"Del: {text}")
        return f"-{text}-"

    def codespan(self, text: str) -> str:
        self.debug(f"Codespan: {text}")
        # Inline code is not a literal block in Jira: braces would open macros
        color = self.options["inline_code_color"]
        return f"{{color:{color}}}{{{{{escape_braces(text)}}}}}{{color}}"

    def block_quote(self, text: str) -> str:
        self.debug(f"Blockquote: {text}")
        return f"{{quote}}{text}{{quote}}"

    def linebreak(self) -> str:
        return "\n"

    def softbreak(self) -> str:
        return "\n"

    def thematic_break(self) -> str:
        return "----\n\n"

    def link(self, text: str, url: str, title: Optional[str] = None) -> str:
        if text:
            return f"[{text}|{url}]"
        return f"[{url}]"

    def image(self, text: str, url: str, title: Optional[str] = None) -> str:
        return f"!{url}!"

    def list(self, text: str, ordered: bool, **attrs: Any) -> str:
        marker = "#" if ordered else "*"
        lines = [line for line in text.strip().split("\n") if line]
        # a nested bullet comes out as "* * item"
        body = "".join(f"\n{marker} {line}" for line in lines).replace("* *", "**")
        return body + "\n\n"

    def list_item(self, text: str) -> str:
        return text + "\n"

    def task_list_item(self, text: str, checked: bool = False) -> str:
        return self.list_item(f"{self.checkbox(checked)} {text}")

    def checkbox(self, checked: bool) -> str:
        return "[x]" if checked else "[-]"

    def table(self, text: str) -> str:
        return text + "\n"

    def table_head(self, text: str) -> str:
        return self.table_row(text)

    def table_body(self, text: str) -> str:
        return text

    def table_row(self, text: str) -> str:
        return text + "\n"

    def table_cell(
        self, text: str, align: Optional[str] = None, head: bool = False
    ) -> str:
        return ("||" if head else "|") + text

    def block_code(self, code: str, info: Optional[str] = None) -> str:
        lang = info.split(None, 1)[0] if info and info.strip() else ""
        code = code.rstrip("\n")

        formatted = format_code(code, lang, debug=self.debug)
        self.debug(f"Formatted code: {formatted}, type: {type(formatted).__name__}")
        safe_code = formatted or code

        # Braces inside {code} are literal text in Jira, no escaping here
        collapse = len(safe_code.split("\n")) > self.options["max_code_lines"]
        params = "|".join(
            [
                f"language={defaults.LANG_MAP.get(lang.lower(), '')}",
                "borderStyle=solid",
                f"theme={self.options['code_theme']}",
                "linenumbers=true",
                f"collapse={str(collapse).lower()}",
            ]
        )
        return f"{{code:{params}}}\n{safe_code}\n{{code}}\n\n"

    def block_html(self, html: str) -> str:
        self.debug(f"HTML: {html}")
        return convert_html_to_jira(html, self.options["inline_code_color"])

    def inline_html(self, html: str) -> str:
        self.debug(f"HTML: {html}")
        return convert_html_to_jira(html, self.options["inline_code_color"])

    def block_text(self, text: str) -> str:
        return text

    def blank_line(self) -> str:
        return ""
