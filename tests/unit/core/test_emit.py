"""Unit tests for core/emit.py"""

import json
import re

from mdsite.core.emit import backtickify, build_index_module, build_page_module


def _decode(literal: str) -> str:
    """Evaluate a JS template literal made only of plain text and backslash escapes."""
    assert literal[0] == literal[-1] == "`"
    return re.sub(r"\\(.)", r"\1", literal[1:-1], flags=re.DOTALL)


def _embedded_literal(module: str) -> str:
    return module.split("var content = ", 1)[1].split(";\nvar Post = ", 1)[0]


# --- backtickify ---

def test_backtickify_escapes_backslash_and_backtick():
    assert backtickify("a\\b`c") == "`a\\\\b\\`c`"


def test_backtickify_defangs_require():
    """require( is written as require\\( in the literal only."""
    literal = backtickify("var x = require('x');")
    assert "require(" not in literal
    assert "require\\(" in literal
    assert _decode(literal) == "var x = require('x');"


def test_backtickify_round_trips():
    """Backticks, backslashes, interpolation and require( all decode to the source."""
    body = "Use `jest` and C:\\dir\\ with ${HOME} and require('a') + \\` twice\n"
    assert _decode(backtickify(body)) == body


def test_backtickify_blocks_interpolation():
    assert "\\${" in backtickify("${x}")


# --- build_page_module ---

def test_build_page_module_with_content():
    module = build_page_module("DocsLayout", {"id": "api", "order": 2}, "# API\n")
    lines = module.split("\n")
    assert lines[:3] == ["/**", " * @generated", " */"]
    assert 'var Layout = require("DocsLayout");' in lines
    assert "  statics: { content: content }," in lines
    assert "        {content}" in lines
    assert '      <Layout metadata={{"id":"api","order":2}}>' in lines
    assert module.endswith("module.exports = Post;")


def test_build_page_module_embeds_body_verbatim():
    body = "See `require('x')` at C:\\tmp\n"
    module = build_page_module("DocsLayout", {}, body)
    assert _decode(_embedded_literal(module)) == body


def test_build_page_module_without_content():
    """No content lines at all when there is no raw body."""
    module = build_page_module("BlogPageLayout", {"page": 0, "perPage": 5})
    assert "content" not in module
    assert '<Layout metadata={{"page":0,"perPage":5}}>' in module
    assert module.count("\n") == 13


def test_build_page_module_empty_content_is_omitted():
    assert build_page_module("DocsLayout", {}, "") == build_page_module("DocsLayout", {})


def test_build_page_module_keeps_unicode():
    module = build_page_module("DocsLayout", {"title": "Café"})
    assert '"title":"Café"' in module


# --- build_index_module ---

def test_build_index_module():
    index = {"files": [{"id": "a"}], "toc": {"x": 1}}
    module = build_index_module(index, "Metadata")
    header, _, rest = module.partition("module.exports = ")
    assert header == "/**\n * @generated\n * @providesModule Metadata\n */\n"
    assert rest.endswith(";")
    assert json.loads(rest[:-1]) == index
    assert '\n  "files": [\n' in rest
