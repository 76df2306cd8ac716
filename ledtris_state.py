"""Game state aggregate and the lock-delay state machine"""
from dataclasses import dataclass, field
from enum import Enum

from ledtris_board import Board, new_board
from ledtris_config import CONFIG
from ledtris_piece import ActiveBlock


class GameMode(Enum):
    PLAYING = "playing"
    CLEARING = "clearing"
    ENDING = "ending"


@dataclass
class LockState:
    """
    Grace period for a grounded block.

    Free -> Grounded starts the timer; staying grounded keeps the original start;
    becoming free again drops it. update() reports True once the block has been
    grounded continuously for longer than LOCK_DELAY_MS.
    """
    in_grace: bool = False
    grace_start: int = 0

    def update(self, is_grounded: bool, now: int) -> bool:
        if not is_grounded:
            self.in_grace = False
            return False
        if not self.in_grace:
            self.in_grace = True
            self.grace_start = now
            return False
        return now - self.grace_start > CONFIG["LOCK_DELAY_MS"]

    def reset(self) -> None:
        self.in_grace = False
        self.grace_start = 0


@dataclass
class GameState:
    block: ActiveBlock
    board: Board = field(default_factory=new_board)
    lock: LockState = field(default_factory=LockState)
    mode: GameMode = GameMode.PLAYING
    last_fall: int = 0
