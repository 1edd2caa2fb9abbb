"""
Serializer
----------
Writes the grouped variables as a stylesheet wrapped in `@layer globals`.
Light mode tokens share the base :root block; dark mode tokens go into a
prefers-color-scheme media query.
"""

from .grouping import build_layout


def render_mode_groups(groups, indent: str) -> str:
    """Render semantic token groups separated by blank lines"""
    output = ''
    is_first = True

    for entries in groups.values():
        if not entries:
            continue
        if not is_first:
            output += '\n'
        is_first = False

        for name, value in entries:
            output += f'{indent}--{name}: {value};\n'

    return output


def render_layout(layout) -> str:
    """Render an OutputLayout as the final stylesheet"""
    output = '@layer globals {\n'
    output += '  :root {\n'

    for entries in layout.primitives.values():
        if entries:
            for name, value in entries:
                output += f'    --{name}: {value};\n'
            output += '\n'

    # Light mode tokens (semantic tokens) live in the base :root
    output += render_mode_groups(layout.light_mode, '    ')

    output += '  }\n'

    if layout.has_dark_mode:
        output += '\n  @media (prefers-color-scheme: dark) {\n'
        output += '    :root {\n'
        output += render_mode_groups(layout.dark_mode, '      ')
        output += '\n    }\n'
        output += '  }\n'

    output += '}\n'

    return output


def generate_output(processed) -> str:
    """Generate the output CSS from the processed tables"""
    return render_layout(build_layout(processed))
