"""
Fluid Typography
----------------
Builds `font-size-step-N` variables from the min/max font size pairs of the
Figma export. Each pair becomes a CSS clamp() that interpolates between the
two sizes across the viewport range given by --viewport-min-width and
--viewport-max-width.
"""

import logging
import math
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from .errors import ViewportConfigError

logger = logging.getLogger(__name__)

PX_PER_REM = 16

# A max step must appear within this many lines after its min step
STEP_PAIRING_WINDOW = 4

MIN_STEP_PATTERN = re.compile(r'--font-size-min-step-(\d+)-rem:\s*([\d.]+)rem;')
MAX_STEP_PATTERN = re.compile(r'--font-size-max-step-(\d+)-rem:\s*([\d.]+)rem;')


@dataclass
class FontSizeStep:
    original_step: int
    min: Optional[float]
    max: Optional[float]


def format_number(value: float) -> str:
    """Render a number in its shortest form (1.0 -> '1', 1.125 -> '1.125')"""
    if value == int(value):
        return str(int(value))
    return repr(value)


def to_fixed(value: float, places: int = 4) -> str:
    """Round to a fixed number of decimals, halves away from zero (0.78125 -> '0.7813')"""
    if value == 0:
        value = 0.0
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def parse_rem(text: str):
    """Parse the number in front of `rem`, or None when it is not a number"""
    try:
        return float(text)
    except ValueError:
        return None


def read_viewport_width(variables: dict[str, str], name: str) -> float:
    """Read a quoted pixel width such as "390" from the raw variables"""
    if name not in variables:
        raise ViewportConfigError(name)

    raw_value = variables[name]
    try:
        width = float(raw_value.replace('"', '').strip())
    except ValueError:
        raise ViewportConfigError(name, raw_value) from None

    if not math.isfinite(width):
        raise ViewportConfigError(name, raw_value)
    return width


def generate_clamp(min_width_px, max_width_px, min_font_size, max_font_size) -> str:
    """Generate a clamp() that scales linearly between the two viewport widths"""
    min_width = min_width_px / PX_PER_REM
    max_width = max_width_px / PX_PER_REM
    if max_width == min_width:
        raise ViewportConfigError('viewport-max-width', max_width_px, 'must differ from --viewport-min-width')

    slope = (max_font_size - min_font_size) / (max_width - min_width)
    y_axis_intersection = -min_width * slope + min_font_size

    return (
        f'clamp({format_number(min_font_size)}rem, '
        f'{to_fixed(y_axis_intersection)}rem + {to_fixed(slope * 100)}vw, '
        f'{format_number(max_font_size)}rem)'
    )


def collect_font_size_steps(css_text: str) -> list[FontSizeStep]:
    """Pair every min step with the max step of the same number that follows it closely"""
    lines = css_text.split('\n')
    steps = []

    for i, line in enumerate(lines):
        min_match = MIN_STEP_PATTERN.search(line)
        if not min_match:
            continue

        step = int(min_match.group(1))
        min_rem = parse_rem(min_match.group(2))
        if min_rem is None:
            logger.debug('Skipping font-size-min-step-%d, not a number: %s', step, min_match.group(2))
            continue

        # Look for the corresponding max in the next few lines
        max_rem = None
        for candidate in lines[i + 1:i + 1 + STEP_PAIRING_WINDOW]:
            max_match = MAX_STEP_PATTERN.search(candidate)
            if max_match and int(max_match.group(1)) == step:
                max_rem = parse_rem(max_match.group(2))
                break

        if max_rem is None:
            logger.debug('No max size found near font-size-min-step-%d', step)
        steps.append(FontSizeStep(original_step=step, min=min_rem, max=max_rem))

    return steps


def deduplicate_steps(steps: list[FontSizeStep]) -> list[FontSizeStep]:
    """Drop steps whose (min, max) pair was already seen"""
    unique_steps = []
    seen = set()

    for step in steps:
        key = (step.min, step.max)
        if key not in seen:
            seen.add(key)
            unique_steps.append(step)

    return unique_steps


def renumber_steps(steps: list[FontSizeStep]) -> list[tuple[int, FontSizeStep]]:
    """
    Number the sorted steps relative to the original step 0.

    Steps below step 0 count down to -1, step 0 stays 0 and steps above it
    keep their original number. Without a step 0 every step keeps its number.
    """
    zero_index = next(
        (i for i, step in enumerate(steps) if step.original_step == 0), -1
    )

    numbered = []
    for i, step in enumerate(steps):
        if i < zero_index:
            output_step = i - zero_index
        elif i == zero_index:
            output_step = 0
        else:
            output_step = step.original_step
        numbered.append((output_step, step))

    return numbered


def process_font_sizes(variables: dict[str, str], css_text: str) -> dict[str, str]:
    """Create the font-size-step-N variables, using clamp() where both sizes are known"""
    min_width = read_viewport_width(variables, 'viewport-min-width')
    max_width = read_viewport_width(variables, 'viewport-max-width')

    steps = deduplicate_steps(collect_font_size_steps(css_text))
    steps.sort(key=lambda step: step.min)

    font_sizes = {}
    for output_step, data in renumber_steps(steps):
        var_name = f'font-size-step-{output_step}'

        if data.min is not None and data.max is not None:
            font_sizes[var_name] = generate_clamp(min_width, max_width, data.min, data.max)
        elif data.min is not None:
            font_sizes[var_name] = f'{format_number(data.min)}rem'
        elif data.max is not None:
            font_sizes[var_name] = f'{format_number(data.max)}rem'

    return font_sizes
