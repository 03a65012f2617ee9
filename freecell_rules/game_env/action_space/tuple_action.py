from typing import TypeAlias
from gymnasium import spaces
import numpy as np
import numpy.typing as npt
from .base_action import BaseActionSpace
from ...game.config import GameConfig
from ...game.piles import PileKind
from ...game.standard_spec import StandardSpec as Spec

class TupleActionSpace(BaseActionSpace):
    """
    tuple as the freecell action space

    every tuple (source kind, source pile, card index, destination kind, destination pile)
    represents a move of the card at card index, together with the cards above it,
    pile kinds being encoded as 0 cascade, 1 foundation, 2 open
    """

    _action_type: TypeAlias = npt.NDArray[np.int8]
    _kinds: list[PileKind] = list(PileKind)

    def __init__(self, config: GameConfig):
        super().__init__(config)
        self.num_piles = max(config.cascade_count, config.open_count, config.foundation_count)
        self.cascade_max_len = Spec.num_cards // config.cascade_count + len(Spec.ranks)

    def get_gym_space(self) -> spaces.Space:
        num_kinds = len(self._kinds)
        return spaces.MultiDiscrete(
            [num_kinds, self.num_piles, self.cascade_max_len, num_kinds, self.num_piles],
            dtype=np.int8
        )

    def parse_action(self, action: _action_type) -> tuple[PileKind, int, int, PileKind, int]:
        if len(action) != 5:
            raise ValueError(f'expect 5 components, but get {len(action)}')
        source_kind, source_idx, card_idx, dest_kind, dest_idx = (int(a) for a in action)
        return (
            self._parse_kind(source_kind),
            self._parse_index(source_idx, self.num_piles, 'pile'),
            self._parse_index(card_idx, self.cascade_max_len, 'card'),
            self._parse_kind(dest_kind),
            self._parse_index(dest_idx, self.num_piles, 'pile'),
        )

    @classmethod
    def _parse_kind(cls, kind: int) -> PileKind:
        """
        Helper method for parsing action

        Raises:
            ValueError: when kind is out of range
        """
        if kind < 0 or kind >= len(cls._kinds):
            raise ValueError(f'pile kind cannot be {kind}')
        return cls._kinds[kind]

    @staticmethod
    def _parse_index(index: int, limit: int, name: str) -> int:
        if index < 0 or index >= limit:
            raise ValueError(f'{name} index cannot be {index}')
        return index
