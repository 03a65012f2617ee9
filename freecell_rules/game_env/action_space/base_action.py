from abc import ABC, abstractmethod
from typing import Any
from gymnasium import spaces
from ...game.config import GameConfig
from ...game.piles import PileKind

class BaseActionSpace(ABC):
    """Base abstract class for freecell action space"""

    def __init__(self, config: GameConfig):
        self.config = config

    @abstractmethod
    def get_gym_space(self) -> spaces.Space:
        """
        Generate a Gym space as the action space

        Returns:
            spaces.Space: action space
        """

    @abstractmethod
    def parse_action(self, action: Any) -> tuple[PileKind, int, int, PileKind, int]:
        """
        Parse action into a move tuple of length 5, containing source and destination info

        Returns:
            PileKind: source kind
            int: source pile number
            int: index of the card to pick up in the source pile
            PileKind: destination kind
            int: destination pile number
        """
