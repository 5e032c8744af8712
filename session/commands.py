"""
Commands a front end can send to the session.
Input sources (mouse clicks, typed indices) are turned into these.
"""

from dataclasses import dataclass
from typing import Union

from logic.game_state import GameMode


@dataclass(frozen=True)
class CellSelected:
    index: int


@dataclass(frozen=True)
class Restart:
    pass


@dataclass(frozen=True)
class SwitchMode:
    mode: GameMode


Command = Union[CellSelected, Restart, SwitchMode]
