"""
gui - PySide6 front end for the Prefix Removal Tool
"""

from .gui_entry import main

__all__ = ["main"]
