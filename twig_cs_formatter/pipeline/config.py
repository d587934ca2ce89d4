"""
Configuration for the Twig formatting pipeline.

Holds the fixed Prettier overrides, the Twig delimiters the shields and
reflows look for, and the pipeline switches.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from jinja2 import defaults as jinja_defaults


@dataclass
class PrettierConfig:
    """Fixed Prettier options that always win over the project configuration."""

    # Maximum line width; also the inline-element shield limit
    print_width: int = 120

    # Spaces per indentation level; also the reflow indent unit
    tab_width: int = 4

    single_quote: bool = False
    bracket_spacing: bool = True
    semi: bool = True
    html_whitespace_sensitivity: str = "ignore"

    # Twig dialect parser and the plugin that provides it
    parser: str = "melody"
    plugin: str = "prettier-plugin-twig-melody"

    # Command line used to start Prettier (e.g. ["npx", "--no-install", "prettier"])
    command: list[str] = field(default_factory=lambda: ["prettier"])

    # Seconds to wait for Prettier; None trusts the engine's own bounds
    timeout: float | None = None

    def overrides(self, file_path: str) -> dict[str, Any]:
        """Return the fixed options in Prettier's own option names."""
        return {
            "parser": self.parser,
            "plugins": [self.plugin],
            "printWidth": self.print_width,
            "tabWidth": self.tab_width,
            "singleQuote": self.single_quote,
            "bracketSpacing": self.bracket_spacing,
            "semi": self.semi,
            "htmlWhitespaceSensitivity": self.html_whitespace_sensitivity,
            "filepath": file_path,
        }

    def build_options(self, project_options: dict[str, Any], file_path: str) -> dict[str, Any]:
        """
        Merge the fixed overrides on top of the project configuration.

        Args:
            project_options: Options resolved from the project's Prettier config
            file_path: Path of the document being formatted

        Returns:
            Options dictionary; fixed overrides win on conflicting keys
        """
        return {**project_options, **self.overrides(file_path)}

    @property
    def indent_unit(self) -> str:
        return " " * self.tab_width


@dataclass
class TwigSyntax:
    """Twig delimiters and component namespace.

    Twig shares Jinja's default delimiters, so the defaults come from jinja2.
    """

    comment_start: str = jinja_defaults.COMMENT_START_STRING
    comment_end: str = jinja_defaults.COMMENT_END_STRING
    block_start: str = jinja_defaults.BLOCK_START_STRING
    block_end: str = jinja_defaults.BLOCK_END_STRING
    variable_start: str = jinja_defaults.VARIABLE_START_STRING
    variable_end: str = jinja_defaults.VARIABLE_END_STRING

    # Prefix of Twig component tags, as in <twig:Card />
    component_prefix: str = "twig:"


@dataclass
class PipelineConfig:
    """Configuration options for the formatting pipeline."""

    formatter: PrettierConfig = field(default_factory=PrettierConfig)

    syntax: TwigSyntax = field(default_factory=TwigSyntax)

    # Helper functions whose object-literal parameters are reflowed
    path_functions: list[str] = field(default_factory=lambda: ["path"])

    # Attribute whose line gives the reference indentation for path reflow
    path_attribute: str = "href"

    # Raise instead of dropping placeholders the external formatter lost
    strict_placeholders: bool = False

    @staticmethod
    def from_dict(d: dict) -> PipelineConfig:
        """Create a config from a dictionary."""
        config = PipelineConfig()
        for k, v in d.items():
            if k == "formatter" and isinstance(v, dict):
                config.formatter = PrettierConfig(**v)
            elif k == "syntax" and isinstance(v, dict):
                config.syntax = TwigSyntax(**v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "formatter": {
                "print_width": self.formatter.print_width,
                "tab_width": self.formatter.tab_width,
                "single_quote": self.formatter.single_quote,
                "bracket_spacing": self.formatter.bracket_spacing,
                "semi": self.formatter.semi,
                "html_whitespace_sensitivity": self.formatter.html_whitespace_sensitivity,
                "parser": self.formatter.parser,
                "plugin": self.formatter.plugin,
                "command": list(self.formatter.command),
                "timeout": self.formatter.timeout,
            },
            "syntax": {
                "comment_start": self.syntax.comment_start,
                "comment_end": self.syntax.comment_end,
                "block_start": self.syntax.block_start,
                "block_end": self.syntax.block_end,
                "variable_start": self.syntax.variable_start,
                "variable_end": self.syntax.variable_end,
                "component_prefix": self.syntax.component_prefix,
            },
            "path_functions": list(self.path_functions),
            "path_attribute": self.path_attribute,
            "strict_placeholders": self.strict_placeholders,
        }
