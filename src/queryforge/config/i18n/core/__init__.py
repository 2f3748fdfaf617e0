"""
Registers the "queries" catalog stored beside this module.
"""

from pathlib import Path
from ..manager import get_manager


def register_core_translations():
    get_manager().register_module("queries", Path(__file__).parent)


register_core_translations()
