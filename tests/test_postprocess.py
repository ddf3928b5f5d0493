"""Tests for the passes run over rendered markup."""

from mdjira import postprocess
from mdjira.postprocess import (
    escape_api_endpoints,
    fix_commented_code_blocks,
    fix_double_underscore,
    post_process_html_conversion,
    process_code_block_lines,
)

CODE_OPEN = "{code:language=java|borderStyle=solid|theme=RDark|linenumbers=true|collapse=false}"


def _tag(name):
    return lambda line: f"{name}:{line}"


def test_process_code_block_lines_classifies_lines():
    markup = "\n".join(["before", CODE_OPEN, "body", "{code}", "after"])
    result = process_code_block_lines(
        markup, _tag("start"), _tag("code"), _tag("end"), _tag("text")
    )
    assert result.split("\n") == [
        "text:before",
        f"start:{CODE_OPEN}",
        "code:body",
        "end:{code}",
        "text:after",
    ]


def test_process_code_block_lines_closing_marker_wins():
    """A line holding {code} closes the region even though it contains {code."""
    result = process_code_block_lines(
        "{code}\nplain", _tag("start"), _tag("code"), _tag("end"), _tag("text")
    )
    assert result == "end:{code}\ntext:plain"


def test_process_code_block_lines_keeps_empty_lines():
    result = process_code_block_lines(
        "\n{code:x}\n\n{code}\n", _tag("s"), _tag("c"), _tag("e"), _tag("t")
    )
    assert result == "t:\ns:{code:x}\nc:\ne:{code}\nt:"


def test_fix_commented_code_blocks():
    markup = "\n".join(["# heading", f"# {CODE_OPEN}", "#!/bin/sh", "##x", "echo", "# {code}"])
    assert fix_commented_code_blocks(markup).split("\n") == [
        "# heading",
        CODE_OPEN,
        "!/bin/sh",
        "#x",
        "echo",
        "{code}",
    ]


def test_fix_double_underscore_outside_code():
    assert fix_double_underscore("my__key my__key") == "my\\_\\_key my\\_\\_key"
    assert fix_double_underscore("a___b") == "a\\_\\__b"


def test_fix_double_underscore_leaves_code_alone():
    markup = "\n".join(["x__y", CODE_OPEN, "my__key", "{code}", "x__y"])
    assert fix_double_underscore(markup).split("\n") == [
        "x\\_\\_y",
        CODE_OPEN,
        "my__key",
        "{code}",
        "x\\_\\_y",
    ]


def test_fix_double_underscore_is_idempotent():
    markup = "\n".join(["one__two three__four", CODE_OPEN, "__init__", "{code}", "__x__"])
    once = fix_double_underscore(markup)
    assert fix_double_underscore(once) == once


def test_fix_double_underscore_false_code_boundary():
    """Literal {code text in prose opens a region, later lines are not escaped."""
    markup = "see the {code macro\nmy__key\n{code}\nmy__key"
    assert fix_double_underscore(markup) == (
        "see the {code macro\nmy__key\n{code}\nmy\\_\\_key"
    )


def test_post_process_html_conversion():
    assert post_process_html_conversion("a &lt;b&gt; &amp; &quot;c&quot; &#39;d&#39;") == (
        "a <b> & \"c\" 'd'"
    )
    assert post_process_html_conversion("a&nbsp;b") == "a b"
    assert post_process_html_conversion("a \t  b") == "a b"
    assert post_process_html_conversion("a  \n    b\t\nc") == "a\nb\nc"
    # only one level of entities is decoded
    assert post_process_html_conversion("&amp;lt;") == "&lt;"


def test_escape_api_endpoints():
    assert escape_api_endpoints("POST /api/pdf/{documentId}/processing/finalize") == (
        "POST /api/pdf/\\{documentId\\}/processing/finalize"
    )
    assert escape_api_endpoints(
        "GET /api/documents/{documentId}/versions/{versionId}/submissions"
    ) == "GET /api/documents/\\{documentId\\}/versions/\\{versionId\\}/submissions"
    assert escape_api_endpoints("call /users/{id} then") == "call /users/\\{id\\} then"
    assert escape_api_endpoints("no endpoint here") == "no endpoint here"
    assert escape_api_endpoints("{quote}said{quote}") == "{quote}said{quote}"
    assert escape_api_endpoints("{noformat}") == "{noformat}"


def test_escape_api_endpoints_skips_jira_markup():
    line = "{color:#00875a}{{x}}{color} GET /a/{id}"
    assert escape_api_endpoints(line) == line
    assert escape_api_endpoints("{{x}} /a/{id}") == "{{x}} /a/{id}"

    markup = "\n".join([CODE_OPEN, "GET /a/{id}", "{code}"])
    assert escape_api_endpoints(markup) == markup


def test_run_passes_order():
    assert postprocess.PASSES == [
        fix_commented_code_blocks,
        fix_double_underscore,
        post_process_html_conversion,
        escape_api_endpoints,
    ]
    assert postprocess.run_passes("a__b &amp; GET /x/{id}") == (
        "a\\_\\_b & GET /x/\\{id\\}"
    )
