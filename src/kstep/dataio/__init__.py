"""Reading data files and writing reports."""

from .loader import LoadedData, read_data, load_data
from .report import format_snapshot, format_iteration, write_report

__all__ = [
    # Input
    'LoadedData',
    'read_data',
    'load_data',

    # Output
    'format_snapshot',
    'format_iteration',
    'write_report'
]
