"""Name simplification for Figma variable names and var() references."""

import re

# Ordered (prefix, replacement) pairs; repeated prefixes collapse to one
NAME_SIMPLIFICATIONS = [
    ('border-border-', 'border-'),
    ('size-size-', 'size-'),
    ('surface-surface-', 'surface-'),
    ('text-text-', 'text-'),
    ('icon-icon-', 'icon-'),
    ('outline-outline-', 'outline-'),
    ('typography-font-', 'font-family-'),
]

VAR_REFERENCE_PATTERN = re.compile(r'var\(--([^)]+)\)')


def simplify_name(name: str) -> str:
    """Remove redundant prefixes from a variable name"""
    for prefix, replacement in NAME_SIMPLIFICATIONS:
        while name.startswith(prefix):
            name = replacement + name[len(prefix):]
    return name


def simplify_variable_references(value: str) -> str:
    """Simplify names inside var() references, e.g. var(--surface-surface-x) -> var(--surface-x)"""
    if 'var(--' not in value:
        return value

    return VAR_REFERENCE_PATTERN.sub(
        lambda match: f'var(--{simplify_name(match.group(1))})', value
    )
