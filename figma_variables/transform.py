"""Entry point of the core transformation: CSS text in, CSS text out."""

from dataclasses import dataclass

from .extractor import parse_variables
from .grouping import DroppedVariable, OutputLayout, build_layout
from .rules import ProcessedResult, process_variables
from .serializer import render_layout


@dataclass
class TransformResult:
    css: str
    processed: ProcessedResult
    layout: OutputLayout

    @property
    def dropped(self) -> list[DroppedVariable]:
        return self.layout.dropped


def transform_with_report(css_text: str) -> TransformResult:
    """Transform a Figma CSS export and keep track of what happened to each variable"""
    variables = parse_variables(css_text)
    processed = process_variables(variables, css_text)
    layout = build_layout(processed)

    return TransformResult(css=render_layout(layout), processed=processed, layout=layout)


def transform(css_text: str) -> str:
    """Transform a Figma CSS export into the organized stylesheet"""
    return transform_with_report(css_text).css
