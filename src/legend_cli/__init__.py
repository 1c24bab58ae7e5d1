"""
Legend Patcher

Command-line front end for applying legend scripts to text files.
"""

__version__ = "1.0.0"

from .console_resolver import ConsoleResolver
from .reporter import LegendReporter

__all__ = [
    "ConsoleResolver",
    "LegendReporter"
]
