"""
Summary: Path template feature exports.
Why: Give the sort service one import path for template rendering.
"""

from .domain.template import (
    LiteralSegment,
    PlaceholderSegment,
    Rendered,
    RenderResult,
    Skipped,
    TemplateField,
    TemplateRenderer,
    parse_template,
    render,
)

__all__ = [
    "LiteralSegment",
    "PlaceholderSegment",
    "RenderResult",
    "Rendered",
    "Skipped",
    "TemplateField",
    "TemplateRenderer",
    "parse_template",
    "render",
]
