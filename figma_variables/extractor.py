"""
Declaration Extractor
---------------------
Collects every `--name: value;` custom property found in a CSS text.
Declarations are matched anywhere in the text, not only inside :root.
"""

import re

VARIABLE_PATTERN = re.compile(r'--([^:]+):\s*([^;]+);')


def parse_variables(content: str) -> dict[str, str]:
    """Extract CSS variables from content (last declaration wins)"""
    variables = {}

    for match in VARIABLE_PATTERN.finditer(content):
        name = match.group(1).strip()
        value = match.group(2).strip()
        # Re-inserting keeps the first position but the latest value
        variables[name] = value

    return variables
