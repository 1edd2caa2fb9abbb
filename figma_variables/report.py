"""
Transformation Report
---------------------
Lists every output variable with its group and position, plus the variables
that were dropped because they fit no group. Written as CSV for easy viewing.
"""

import os

import pandas as pd

REPORT_COLUMNS = ['position', 'table', 'group', 'name', 'value', 'status']


def build_report(result) -> pd.DataFrame:
    """Build one row per emitted or dropped variable, in output order"""
    rows = []

    layout = result.layout
    for prefix, entries in layout.primitives.items():
        for name, value in entries:
            rows.append({'table': 'primitives', 'group': prefix, 'name': name,
                         'value': value, 'status': 'emitted'})

    for table, mode_groups in (('light', layout.light_mode), ('dark', layout.dark_mode)):
        for category, entries in mode_groups.items():
            for name, value in entries:
                rows.append({'table': table, 'group': category, 'name': name,
                             'value': value, 'status': 'emitted'})

    for position, row in enumerate(rows, 1):
        row['position'] = position

    for variable in result.dropped:
        rows.append({'position': None, 'table': variable.table, 'group': None,
                     'name': variable.name, 'value': variable.value, 'status': 'dropped'})

    df = pd.DataFrame(rows, columns=REPORT_COLUMNS)
    df['position'] = df['position'].astype('Int64')
    return df


def write_report(result, report_path):
    """Write the transformation report as CSV"""
    report_dir = os.path.dirname(report_path)
    if report_dir:
        os.makedirs(report_dir, exist_ok=True)

    df = build_report(result)
    df.to_csv(report_path, index=False)
    return df
