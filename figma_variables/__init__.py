"""Transform Figma-exported CSS variables into an organized stylesheet."""

__version__ = '1.0.0'

from .errors import TransformError, ViewportConfigError
from .extractor import parse_variables
from .naming import simplify_name, simplify_variable_references
from .rules import ProcessedResult, process_variables
from .serializer import generate_output
from .transform import TransformResult, transform, transform_with_report
from .typography import generate_clamp, process_font_sizes

__all__ = [
    'TransformError',
    'ViewportConfigError',
    'ProcessedResult',
    'TransformResult',
    'parse_variables',
    'process_variables',
    'simplify_name',
    'simplify_variable_references',
    'process_font_sizes',
    'generate_clamp',
    'generate_output',
    'transform',
    'transform_with_report',
]
