"""
Tests for the path-parameter reflow.
"""

from __future__ import annotations

from twig_cs_formatter.pipeline.reflow import PathParameterReflow

LINK = """<twig:Link
    href="{{ path('app_show', {id: item.id, slug: item.slug}) }}"
    label="Show"
/>"""

LINK_EXPECTED = """<twig:Link
    href="{{ path('app_show', {
        'id': item.id,
        'slug': item.slug
    }) }}"
    label="Show"
/>"""


class TestPathParameterReflow:
    def test_reflows_relative_to_attribute_line(self):
        assert PathParameterReflow().apply(LINK) == LINK_EXPECTED

    def test_skips_call_without_reference_attribute(self):
        text = "<p>{{ path('app_show', {id: 1}) }}</p>\n<a title=\"x\">link</a>"
        assert PathParameterReflow().apply(text) == text

    def test_uses_nearest_preceding_attribute(self):
        text = "<nav>\n" '    <a href="/">Home</a>\n' "        <twig:Link\n" "            href=\"{{ path('x', {a: 1}) }}\"\n" "        />\n" "</nav>"
        expected = (
            "<nav>\n"
            '    <a href="/">Home</a>\n'
            "        <twig:Link\n"
            "            href=\"{{ path('x', {\n"
            "                'a': 1\n"
            "            }) }}\"\n"
            "        />\n"
            "</nav>"
        )
        assert PathParameterReflow().apply(text) == expected

    def test_normalizes_spaces_inside_parentheses(self):
        text = "<a href=\"{{ path( 'home' , {page: 2} ) }}\">x</a>"
        expected = "<a href=\"{{ path('home', {\n    'page': 2\n}) }}\">x</a>"
        assert PathParameterReflow().apply(text) == expected

    def test_multiple_calls(self):
        text = (
            "<a href=\"{{ path('a', {id: 1}) }}\">A</a>\n"
            "    <a href=\"{{ path('b', {id: 2, tab: 'info'}) }}\">B</a>"
        )
        expected = (
            "<a href=\"{{ path('a', {\n"
            "    'id': 1\n"
            "}) }}\">A</a>\n"
            "    <a href=\"{{ path('b', {\n"
            "        'id': 2,\n"
            "        'tab': 'info'\n"
            "    }) }}\">B</a>"
        )
        assert PathParameterReflow().apply(text) == expected

    def test_edits_are_computed_on_original_offsets(self):
        text = "<a href=\"{{ path('a', {id: 1}) }}{{ path('b', {id: 2}) }}\">x</a>"
        edits = PathParameterReflow().find_edits(text)

        assert [text[start:end] for start, end, _ in edits] == ["path('a', {id: 1})", "path('b', {id: 2})"]

    def test_other_functions_are_ignored(self):
        text = "<a href=\"{{ xpath('a', {id: 1}) }}{{ app.path('b', {id: 2}) }}\">x</a>"
        assert PathParameterReflow().apply(text) == text

    def test_configured_functions_and_attribute(self):
        reflow = PathParameterReflow(functions=["path", "url"], attribute="action")
        text = "<form action=\"{{ url('search', {q: term}) }}\"></form>"
        assert reflow.apply(text) == "<form action=\"{{ url('search', {\n    'q': term\n}) }}\"></form>"

    def test_idempotent(self):
        reflow = PathParameterReflow()
        once = reflow.apply(LINK)
        assert reflow.apply(once) == once

    def test_crlf_line_endings(self):
        result = PathParameterReflow().apply(LINK.replace("\n", "\r\n"), "\r\n")
        assert result == LINK_EXPECTED.replace("\n", "\r\n")
