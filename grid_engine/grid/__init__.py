"""
Grid column math and rule generation.
"""

from .columns import ColumnSpec, ColumnWidth, GridConfig, PushPull, column_width, push_pull_offset
from .generator import StyleRule, column_rules, push_pull_rules, setup_columns, setup_push_pull

__all__ = [
    'ColumnSpec', 'ColumnWidth', 'GridConfig', 'PushPull', 'column_width',
    'push_pull_offset', 'StyleRule', 'column_rules', 'push_pull_rules',
    'setup_columns', 'setup_push_pull',
]
