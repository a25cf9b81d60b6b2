"""
USSD-диалог: меню, конечный автомат и режим накопленного пути.
"""

from src.core.dialog.engine import DialogEngine, DialogReply
from src.core.dialog.menus import Page, build_menu, paginate, parse_selection, resolve_index
from src.core.dialog.replay import PathReplayAdapter, split_path

__all__ = [
    "DialogEngine",
    "DialogReply",
    "Page",
    "PathReplayAdapter",
    "build_menu",
    "paginate",
    "parse_selection",
    "resolve_index",
    "split_path",
]
