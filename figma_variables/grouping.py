"""
Grouping & Ordering
-------------------
Decides where every variable appears in the generated stylesheet.

Primitives are grouped by color family first (known families in a preferred
order, newly found families alphabetically after them) and then by the other
primitive categories. Light and dark mode tokens are grouped by the four
semantic categories and ordered by meaning rather than alphabetically.

Example: adding --color-brand-500 to the export creates a `color-brand` group
placed after `color-accent`. To control its position, add it to
KNOWN_COLOR_ORDER.
"""

import logging
import re
from dataclasses import dataclass
from functools import cmp_to_key

logger = logging.getLogger(__name__)

KNOWN_COLOR_ORDER = [
    'color-default',
    'color-gray',
    'color-primary',
    'color-secondary',
    'color-tertiary',
    'color-highlight',
    'color-accent',
]

OTHER_GROUPS_ORDER = [
    'container',
    'header',
    'font-family',
    'border',
    'radii',
    'spacing',
    'size',
    'font-size',
    'surface',
    'text',
    'icon',
    'outline',
]

RADII_ORDER = {size: rank for rank, size in enumerate(
    ['xs', 'sm', 'md', 'lg', 'xl', '2xl', '3xl', '4xl', 'full']
)}

BORDER_ORDER = {size: rank for rank, size in enumerate(['xs', 'sm', 'md', 'lg', 'xl'])}

MODE_CATEGORY_ORDER = ['surface', 'text', 'icon', 'outline']

# Preferred order of known semantic tokens; unknown ones follow alphabetically
MODE_VARIABLE_ORDER = {
    'surface': [
        'background', 'background-0',
        'primary-default', 'primary-hover', 'primary-active',
        'secondary-default', 'secondary-hover', 'secondary-active',
        'tertiary-default', 'tertiary-hover', 'tertiary-active',
        'quaternary', 'quinary', 'senary', 'septenary', 'octonary',
        'accent',
        'highlight-default', 'highlight-active', 'highlight-hover',
        'focus', 'error', 'warning', 'success', 'info',
    ],
    'text': [
        'foreground-default', 'foreground-hover', 'foreground-active',
        'primary-default', 'primary-hover', 'primary-active',
        'secondary-default', 'secondary-hover', 'secondary-active',
        'tertiary-default', 'tertiary-hover', 'tertiary-active',
        'quaternary', 'quinary', 'senary', 'septenary', 'octonary',
        'inverted', 'accent',
        'highlight-default', 'highlight-hover', 'highlight-active',
        'focus', 'error', 'warning', 'success', 'info',
    ],
    'icon': [
        'foreground', 'foreground-hover', 'foreground-active',
        'primary-default', 'primary-hover', 'primary-active',
        'secondary-default', 'secondary-hover', 'secondary-active',
        'tertiary', 'quaternary', 'quinary', 'senary', 'septenary', 'octonary',
        'inverted',
        'highlight-default', 'highlight-hover', 'highlight-active',
    ],
    'outline': [
        'primary-default', 'primary-hover', 'primary-active',
        'secondary-default', 'secondary-hover', 'secondary-active',
        'tertiary-default', 'tertiary-hover', 'tertiary-active',
        'quaternary', 'quinary', 'senary', 'septenary',
        'octonary-default', 'octonary-hover', 'octonary-active',
        'disabled', 'inverted',
        'focus', 'error', 'warning', 'success', 'info',
    ],
}

MODE_VARIABLE_RANKS = {
    category: {suffix: rank for rank, suffix in enumerate(suffixes)}
    for category, suffixes in MODE_VARIABLE_ORDER.items()
}

STATE_ORDER = {'default': 0, 'hover': 1, 'active': 2}

COLOR_FAMILY_PATTERN = re.compile(r'^color-([a-z]+)')
STEP_PATTERN = re.compile(r'step-(-?\d+)')
SCALE_PATTERN = re.compile(r'-(\d+)$')
SPACING_PATTERN = re.compile(r'(\d+)(_\d+)?$')
STATE_PATTERN = re.compile(r'^(.+?)(?:-(default|hover|active))?$')


@dataclass
class DroppedVariable:
    table: str
    name: str
    value: str


def _compare(a, b) -> int:
    return (a > b) - (a < b)


def color_family(name: str):
    """Return the color group of a variable (color-brand-500 -> color-brand) or None"""
    match = COLOR_FAMILY_PATTERN.match(name)
    if match:
        return f'color-{match.group(1)}'
    return None


def detect_color_groups(names) -> list[str]:
    """Color families that are not in KNOWN_COLOR_ORDER, sorted alphabetically"""
    detected = {color_family(name) for name in names}
    detected.discard(None)
    return sorted(family for family in detected if family not in KNOWN_COLOR_ORDER)


def _compare_ranked(a, b, prefix, ranks):
    a_rank = ranks.get(a.replace(prefix, '', 1))
    b_rank = ranks.get(b.replace(prefix, '', 1))
    if a_rank is not None and b_rank is not None:
        return a_rank - b_rank
    return None


def _spacing_value(name):
    match = SPACING_PATTERN.search(name)
    if match:
        return float(match.group(0).replace('_', '.'))
    return None


def sort_variables(a: str, b: str, prefix: str) -> int:
    """Compare two primitive names belonging to the same group"""
    if prefix == 'radii':
        ranked = _compare_ranked(a, b, 'radii-', RADII_ORDER)
        if ranked is not None:
            return ranked

    if prefix == 'border':
        ranked = _compare_ranked(a, b, 'border-', BORDER_ORDER)
        if ranked is not None:
            return ranked

    # Font size steps go from largest to smallest
    if prefix == 'font-size':
        a_step = STEP_PATTERN.search(a)
        b_step = STEP_PATTERN.search(b)
        if a_step and b_step:
            return int(b_step.group(1)) - int(a_step.group(1))

    # Color scales (50-950) ascending
    a_scale = SCALE_PATTERN.search(a)
    b_scale = SCALE_PATTERN.search(b)
    if a_scale and b_scale:
        return int(a_scale.group(1)) - int(b_scale.group(1))

    if prefix in ('spacing', 'size'):
        # spacing-px should come first
        if a == 'spacing-px':
            return -1
        if b == 'spacing-px':
            return 1

        a_value = _spacing_value(a)
        b_value = _spacing_value(b)
        if a_value is not None and b_value is not None:
            return _compare(a_value, b_value)

    return _compare(a, b)


def sort_mode_variables(a: str, b: str) -> int:
    """
    Compare two semantic tokens by meaning.

    Known tokens keep the order of MODE_VARIABLE_ORDER. Unknown tokens come
    after them; tokens sharing a base name are ordered default, hover, active
    (no suffix counts as default), different base names alphabetically.
    """
    category = next((cat for cat in MODE_CATEGORY_ORDER if a.startswith(cat)), None)
    if category is None:
        return _compare(a, b)

    a_suffix = a.replace(category + '-', '', 1)
    b_suffix = b.replace(category + '-', '', 1)

    ranks = MODE_VARIABLE_RANKS[category]
    a_rank = ranks.get(a_suffix)
    b_rank = ranks.get(b_suffix)

    if a_rank is not None and b_rank is not None:
        return a_rank - b_rank
    if a_rank is not None:
        return -1
    if b_rank is not None:
        return 1

    a_match = STATE_PATTERN.match(a_suffix)
    b_match = STATE_PATTERN.match(b_suffix)
    if a_match and b_match:
        a_base, a_state = a_match.group(1), a_match.group(2) or 'default'
        b_base, b_state = b_match.group(1), b_match.group(2) or 'default'
        if a_base == b_base:
            return STATE_ORDER[a_state] - STATE_ORDER[b_state]
        return _compare(a_base, b_base)

    return _compare(a_suffix, b_suffix)


def group_primitives(primitives: dict[str, str]):
    """
    Split primitives into ordered, sorted groups.

    Returns (group_order, groups, dropped) where groups maps a group name to
    its sorted (name, value) pairs.
    """
    new_color_groups = detect_color_groups(primitives)
    group_order = KNOWN_COLOR_ORDER + new_color_groups + OTHER_GROUPS_ORDER
    groups = {prefix: [] for prefix in group_order}
    dropped = []

    for name, value in primitives.items():
        family = color_family(name)
        if family is not None:
            groups[family].append((name, value))
            continue

        prefix = next((p for p in OTHER_GROUPS_ORDER if name.startswith(p)), None)
        if prefix is None:
            logger.warning('Variable not grouped: %s', name)
            dropped.append(DroppedVariable('primitives', name, value))
            continue
        groups[prefix].append((name, value))

    for prefix, entries in groups.items():
        entries.sort(key=cmp_to_key(lambda a, b, prefix=prefix: sort_variables(a[0], b[0], prefix)))

    return group_order, groups, dropped


def group_mode_variables(variables: dict[str, str], table: str):
    """
    Split light or dark mode tokens into the four semantic categories.

    Returns (groups, dropped); groups follows MODE_CATEGORY_ORDER.
    """
    groups = {category: [] for category in MODE_CATEGORY_ORDER}
    dropped = []

    for name, value in variables.items():
        category = next((cat for cat in MODE_CATEGORY_ORDER if name.startswith(cat)), None)
        if category is None:
            logger.warning('%s variable not grouped: %s', table.capitalize(), name)
            dropped.append(DroppedVariable(table, name, value))
            continue
        groups[category].append((name, value))

    for entries in groups.values():
        entries.sort(key=cmp_to_key(lambda a, b: sort_mode_variables(a[0], b[0])))

    return groups, dropped


@dataclass
class OutputLayout:
    """Grouped and sorted variables, in the order they are written out"""
    primitives: dict[str, list[tuple[str, str]]]
    light_mode: dict[str, list[tuple[str, str]]]
    dark_mode: dict[str, list[tuple[str, str]]]
    dropped: list[DroppedVariable]
    has_dark_mode: bool = False


def build_layout(processed) -> OutputLayout:
    """Group and sort the processed tables, collecting variables that fit no group"""
    _, primitive_groups, dropped = group_primitives(processed.primitives)
    light_groups, light_dropped = group_mode_variables(processed.light_mode, 'light')
    dark_groups, dark_dropped = group_mode_variables(processed.dark_mode, 'dark')

    return OutputLayout(
        primitives=primitive_groups,
        light_mode=light_groups,
        dark_mode=dark_groups,
        dropped=dropped + light_dropped + dark_dropped,
        has_dark_mode=bool(processed.dark_mode),
    )
