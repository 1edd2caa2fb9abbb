"""
Rule Engine
-----------
Turns the raw Figma variables into three tables:
- primitives: colors, spacing, sizes, radii, font families and font sizes
- light_mode / dark_mode: semantic tokens split by their -light-mode / -dark-mode suffix

Rules run in a fixed order and a variable handled by one rule is not
touched by the rules after it.
"""

import logging
from dataclasses import dataclass, field

from .naming import VAR_REFERENCE_PATTERN, simplify_name, simplify_variable_references
from .typography import process_font_sizes

logger = logging.getLogger(__name__)

LIGHT_MODE_SUFFIX = '-light-mode'
DARK_MODE_SUFFIX = '-dark-mode'
REM_SUFFIX = '-rem'

# Intermediate values from the export that never reach the output
EXCLUDED_PREFIXES = ('font-size-mid-', 'font-weight-', 'type-', 'viewport-')

# These keep their px value even though a -rem companion exists
PX_PRESERVED_NAMES = {'radii-full', 'spacing-px'}

ZERO_VALUES = {'0rem', '0px'}


@dataclass
class ProcessedResult:
    primitives: dict[str, str] = field(default_factory=dict)
    light_mode: dict[str, str] = field(default_factory=dict)
    dark_mode: dict[str, str] = field(default_factory=dict)


def is_mode_variable(name: str) -> bool:
    return name.endswith(LIGHT_MODE_SUFFIX) or name.endswith(DARK_MODE_SUFFIX)


def is_excluded(name: str) -> bool:
    return name.startswith(EXCLUDED_PREFIXES)


def normalize_zero(value: str) -> str:
    """0rem and 0px are written as a plain 0"""
    return '0' if value in ZERO_VALUES else value


def separate_modes(variables: dict[str, str], result: ProcessedResult):
    """Move -light-mode / -dark-mode variables into their own tables"""
    for name, value in variables.items():
        if name.endswith(LIGHT_MODE_SUFFIX):
            base_name = simplify_name(name[:-len(LIGHT_MODE_SUFFIX)])
            result.light_mode[base_name] = simplify_variable_references(value)
        elif name.endswith(DARK_MODE_SUFFIX):
            base_name = simplify_name(name[:-len(DARK_MODE_SUFFIX)])
            result.dark_mode[base_name] = simplify_variable_references(value)


def resolve_rem_variables(variables: dict[str, str], result: ProcessedResult) -> set[str]:
    """Emit the rem value of every variable that has a -rem companion"""
    processed = set()

    for name, value in variables.items():
        if is_mode_variable(name) or is_excluded(name) or not name.endswith(REM_SUFFIX):
            continue

        base_name = name[:-len(REM_SUFFIX)]

        # Font sizes come from the typography rules; px-preserved names keep px
        if base_name.startswith('font-size-') or base_name in PX_PRESERVED_NAMES:
            if base_name in PX_PRESERVED_NAMES and base_name in variables:
                result.primitives[simplify_name(base_name)] = variables[base_name]
                processed.add(base_name)
            continue

        clean_name = simplify_name(base_name)

        # Font families are identifiers; the -rem companion is an export artefact
        if base_name.startswith('typography-font-'):
            result.primitives[clean_name] = variables.get(base_name, value)
        else:
            result.primitives[clean_name] = normalize_zero(value)

        processed.add(base_name)
        processed.add(name)

    return processed


def resolve_font_family_reference(value: str, variables: dict[str, str]) -> str:
    """Replace var(--typography-font-...) by the referenced value (one level only)"""
    if not value.startswith('var(--typography-font-'):
        return value

    match = VAR_REFERENCE_PATTERN.match(value)
    if not match:
        return value
    return variables.get(match.group(1), value)


def add_plain_variables(variables: dict[str, str], result: ProcessedResult, processed: set[str]):
    """Emit variables that have no -rem companion as they are"""
    for name, value in variables.items():
        if name in processed or name.endswith(REM_SUFFIX):
            continue
        if is_mode_variable(name) or is_excluded(name):
            continue
        if name + REM_SUFFIX in variables:
            logger.debug('Skipping %s, its rem companion is used instead', name)
            continue

        clean_name = simplify_name(name)
        clean_value = normalize_zero(value)

        if clean_name.startswith('font-family-'):
            clean_value = resolve_font_family_reference(clean_value, variables)

        result.primitives[clean_name] = clean_value


def process_variables(variables: dict[str, str], css_text: str) -> ProcessedResult:
    """Apply every transformation rule to the raw variables"""
    result = ProcessedResult()

    separate_modes(variables, result)
    processed = resolve_rem_variables(variables, result)
    add_plain_variables(variables, result, processed)

    # Fluid font sizes go last and may replace earlier entries
    result.primitives.update(process_font_sizes(variables, css_text))

    logger.debug(
        'Processed %d primitives, %d light mode and %d dark mode variables',
        len(result.primitives), len(result.light_mode), len(result.dark_mode),
    )
    return result
