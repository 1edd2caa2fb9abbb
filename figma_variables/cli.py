#!/usr/bin/env python3
"""
Figma Variables Transformer
---------------------------
Transforms Figma-exported CSS variables into a clean, organized stylesheet:
- Simplifies variable names (removes redundant prefixes)
- Converts px values to rem (except spacing-px and radii-full)
- Creates responsive font-size variables using CSS clamp()
- Separates light and dark mode variables
- Groups color palettes, detecting new color families automatically
- Wraps the output in @layer globals

Usage:
    figma-variables
    figma-variables ./src/figma-export.css ./src/globals.css
    figma-variables input.css --report reports/variables.csv
"""

import argparse
import logging
import os
import sys

from . import __version__
from .errors import TransformError
from .report import write_report
from .transform import transform_with_report


def transform_css(input_path='original.css', output_path='output.css', report_path=None):
    """Read the input file, transform it and write the output file"""
    with open(input_path, 'r', encoding='utf-8') as f:
        original_css = f.read()

    result = transform_with_report(original_css)

    # Ensure output directory exists
    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(result.css)

    if report_path:
        write_report(result, report_path)

    return result


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='figma-variables',
        description='Transform Figma-exported CSS variables into an organized stylesheet',
    )
    parser.add_argument('input', nargs='?', default='original.css',
                        help='Path to the input CSS file (default: original.css)')
    parser.add_argument('output', nargs='?', default='output.css',
                        help='Path to the output CSS file (default: output.css)')
    parser.add_argument('-v', '--version', action='version', version=__version__)
    parser.add_argument('--report', help='Write a CSV report of every variable to this path')
    parser.add_argument('--verbose', action='store_true', help='Show debug logging')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s: %(message)s',
    )

    try:
        result = transform_css(args.input, args.output, args.report)
    except FileNotFoundError:
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        sys.exit(1)
    except (OSError, UnicodeDecodeError, TransformError) as e:
        print(f"Error during transformation: {e}", file=sys.stderr)
        sys.exit(1)

    print("Transformation complete!")
    print(f"   Input:  {args.input}")
    print(f"   Output: {args.output}")
    if args.report:
        print(f"   Report: {args.report}")
    if result.dropped:
        print(f"Skipped {len(result.dropped)} variables that fit no group")


if __name__ == '__main__':
    main()
