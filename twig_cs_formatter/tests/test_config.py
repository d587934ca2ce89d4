from __future__ import annotations

from twig_cs_formatter.pipeline import PipelineConfig, PrettierConfig, TwigSyntax


class TestPrettierConfig:
    def test_fixed_overrides_win(self):
        project = {"printWidth": 80, "singleQuote": True, "parser": "html", "endOfLine": "lf"}
        options = PrettierConfig().build_options(project, "templates/base.html.twig")

        assert options["printWidth"] == 120
        assert options["singleQuote"] is False
        assert options["parser"] == "melody"
        assert options["plugins"] == ["prettier-plugin-twig-melody"]
        assert options["filepath"] == "templates/base.html.twig"
        assert options["endOfLine"] == "lf"

    def test_indent_unit(self):
        assert PrettierConfig(tab_width=2).indent_unit == "  "


class TestPipelineConfig:
    def test_defaults(self):
        config = PipelineConfig()
        assert config.syntax.comment_start == "{#"
        assert config.syntax.comment_end == "#}"
        assert config.syntax.variable_start == "{{"
        assert config.syntax.component_prefix == "twig:"
        assert config.path_functions == ["path"]
        assert config.path_attribute == "href"
        assert config.strict_placeholders is False

    def test_from_dict(self):
        config = PipelineConfig.from_dict(
            {
                "formatter": {"print_width": 100, "command": ["npx", "prettier"]},
                "syntax": {"component_prefix": "x:"},
                "path_functions": ["path", "url"],
                "strict_placeholders": True,
                "unknown_option": 1,
            }
        )

        assert config.formatter.print_width == 100
        assert config.formatter.tab_width == 4
        assert config.formatter.command == ["npx", "prettier"]
        assert config.syntax == TwigSyntax(component_prefix="x:")
        assert config.path_functions == ["path", "url"]
        assert config.strict_placeholders is True
        assert not hasattr(config, "unknown_option")

    def test_dict_round_trip(self):
        config = PipelineConfig.from_dict({"formatter": {"timeout": 5.0}, "path_attribute": "action"})
        assert PipelineConfig.from_dict(config.to_dict()) == config
