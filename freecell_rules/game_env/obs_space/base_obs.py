from abc import ABC, abstractmethod
import numpy as np
from gymnasium import spaces
from ...game.config import GameConfig
from ...game.snapshot import GameSnapshot

class BaseObsSpace(ABC):
    """Base abstract class for freecell observation space"""

    def __init__(self, config: GameConfig):
        self.config = config

    @abstractmethod
    def get_gym_space(self) -> spaces.Space:
        """
        Generate a Gym space as the observation space

        Returns:
            spaces.Space: observation space
        """

    @abstractmethod
    def encode(self, snapshot: GameSnapshot) -> np.ndarray:
        """
        Encode the piles of a game into an observation

        Args:
            snapshot (GameSnapshot): piles of the game

        Returns:
            np.ndarray: observation
        """

    @abstractmethod
    def decode(self, obs: np.ndarray) -> GameSnapshot:
        """
        Rebuild the piles of a game from an observation

        Args:
            obs (np.ndarray): observation

        Returns:
            GameSnapshot: piles of the game
        """
