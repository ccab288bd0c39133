"""
cli - Command Line Interface for the Prefix Removal Tool
"""

from .cli_entry import main
from .cli_interactive import process_directory, run_remove_prefix

__all__ = ["main", "process_directory", "run_remove_prefix"]
