"""
Game State Machine - manages different game states and transitions
"""

import logging
from enum import Enum, auto

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Game states"""
    MENU = auto()
    INFO = auto()
    CREDITS = auto()
    PLAYING = auto()
    WIN = auto()
    LOSE = auto()


# Info and credits are leaf screens that only return to the menu
TRANSITIONS = {
    GameState.MENU: {GameState.PLAYING, GameState.INFO, GameState.CREDITS},
    GameState.INFO: {GameState.MENU},
    GameState.CREDITS: {GameState.MENU},
    GameState.PLAYING: {GameState.PLAYING, GameState.WIN, GameState.LOSE, GameState.MENU},
    GameState.WIN: {GameState.PLAYING, GameState.MENU},
    GameState.LOSE: {GameState.PLAYING, GameState.MENU},
}


class GameStateManager:
    """
    Manages game state transitions and flow
    """
    def __init__(self):
        self.current_state = GameState.MENU
        self.previous_state = None

    def can_transition(self, new_state):
        """Check if new_state is reachable from the current state"""
        return new_state in TRANSITIONS[self.current_state]

    def transition_to(self, new_state):
        """
        Transition to a new state

        Args:
            new_state: GameState enum value

        Returns:
            True if the transition happened
        """
        if not self.can_transition(new_state):
            logger.debug("Ignored transition %s -> %s", self.current_state.name, new_state.name)
            return False

        self.previous_state = self.current_state
        self.current_state = new_state
        logger.info("State %s -> %s", self.previous_state.name, new_state.name)
        return True

    def is_state(self, state):
        """Check if current state matches"""
        return self.current_state == state

    def is_game_over(self):
        """True once the run has been won or lost"""
        return self.current_state in (GameState.WIN, GameState.LOSE)

    def __repr__(self):
        return f"GameStateManager(state={self.current_state.name})"
