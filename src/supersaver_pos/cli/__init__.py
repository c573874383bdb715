"""
Command line interface module
"""

from supersaver_pos.cli.controller import PosController, MenuOption
from supersaver_pos.cli.main import main, create_parser

__all__ = [
    "PosController",
    "MenuOption",
    "main",
    "create_parser",
]
