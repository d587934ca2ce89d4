"""
Tests for the component attribute reflow.
"""

from __future__ import annotations

import pytest

from twig_cs_formatter.pipeline.reflow import Attribute, ComponentAttributeReflow


@pytest.fixture
def reflow():
    return ComponentAttributeReflow()


class TestComponentAttributeReflow:
    def test_self_closing_tag(self, reflow):
        text = '<twig:Card title="A" subtitle="B" />'
        assert reflow.apply(text) == '<twig:Card\n    title="A"\n    subtitle="B"\n/>'

    def test_keeps_original_indentation(self, reflow):
        text = "<div>\n    <twig:Alert type='info' dismissible=\"true\" />\n</div>\n"
        expected = "<div>\n    <twig:Alert\n        type='info'\n        dismissible=\"true\"\n    />\n</div>\n"
        assert reflow.apply(text) == expected

    def test_tag_spanning_lines(self, reflow):
        text = '    <twig:Card title="A"\n        subtitle="B"\n        size="lg" />\nafter'
        expected = '    <twig:Card\n        title="A"\n        subtitle="B"\n        size="lg"\n    />\nafter'
        assert reflow.apply(text) == expected

    def test_crlf_line_endings(self, reflow):
        text = '<div>\r\n    <twig:Card title="A"\r\n        subtitle="B" />\r\n</div>\r\n'
        expected = '<div>\r\n    <twig:Card\r\n        title="A"\r\n        subtitle="B"\r\n    />\r\n</div>\r\n'
        assert reflow.apply(text, "\r\n") == expected

    def test_regular_close_marker_keeps_following_text(self, reflow):
        text = '<twig:Button variant="primary" size="sm">Save</twig:Button>'
        expected = '<twig:Button\n    variant="primary"\n    size="sm"\n>Save</twig:Button>'
        assert reflow.apply(text) == expected

    def test_expression_values_are_collapsed(self, reflow):
        text = '<twig:Card title="{{   item.title  }}" :count="{{ items|length }}" />'
        expected = '<twig:Card\n    title="{{ item.title }}"\n    :count="{{ items|length }}"\n/>'
        assert reflow.apply(text) == expected

    def test_unquoted_expression_value(self, reflow):
        text = "<twig:Card title={{  item.title }} subtitle=\"B\" />"
        expected = '<twig:Card\n    title={{ item.title }}\n    subtitle="B"\n/>'
        assert reflow.apply(text) == expected

    def test_boolean_attribute_is_kept(self, reflow):
        text = '<twig:Input name="email" required />'
        assert reflow.apply(text) == '<twig:Input\n    name="email"\n    required\n/>'

    def test_single_attribute_is_unchanged(self, reflow):
        text = '<twig:Card title="A" />\n<twig:Card\n    title="B" />'
        assert reflow.apply(text) == text

    def test_idempotent(self, reflow):
        text = (
            "{% block body %}\n"
            '    <twig:Card title="A" subtitle="B" />\n'
            '    <twig:List items="{{ items }}" empty="None" class="list">\n'
            "        <p>item</p>\n"
            "    </twig:List>\n"
            "{% endblock %}\n"
        )
        once = reflow.apply(text)
        assert once != text
        assert reflow.apply(once) == once

    def test_unterminated_tag_is_unchanged(self, reflow):
        text = '<twig:Card title="A" subtitle="B"\nno closing marker here'
        assert reflow.apply(text) == text

    def test_malformed_tag_name_is_unchanged(self, reflow):
        text = '<twig:="x" title="A" />'
        assert reflow.apply(text) == text

    def test_tag_with_template_logic_is_unchanged(self, reflow):
        text = '<twig:Card title="A" {% if x %}open{% endif %} subtitle="B" />'
        assert reflow.apply(text) == text

    def test_html_tags_are_ignored(self, reflow):
        text = '<div class="a" id="b"></div>'
        assert reflow.apply(text) == text


class TestParseTag:
    def test_parse_attributes_in_order(self, reflow):
        name, attributes, marker, rest = reflow.parse_tag("<twig:Card b='2' a=\"1\" c />")

        assert name == "Card"
        assert attributes == [Attribute("b", "'2'"), Attribute("a", '"1"'), Attribute("c")]
        assert marker == "/>"
        assert rest == ""

    def test_namespaced_component_name(self, reflow):
        name, attributes, _, _ = reflow.parse_tag('<twig:Ui:Button label="Go" />')
        assert name == "Ui:Button"
        assert len(attributes) == 1
