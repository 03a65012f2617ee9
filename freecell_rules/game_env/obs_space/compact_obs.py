from gymnasium import spaces
import numpy as np
import numpy.typing as npt
from typing import TypeAlias
from .base_obs import BaseObsSpace
from ...game.cards import Card, Rank, Suit
from ...game.config import GameConfig
from ...game.snapshot import GameSnapshot
from ...game.standard_spec import StandardSpec as Spec

class CompactObsSpace(BaseObsSpace):
    """
    Compact freecell observation space with shape (num_cascades * cascade_max_len + num_opens + 4, 4)

    obs[:num_cascades * cascade_max_len] represents cascades, cascade_max_len rows each
    obs[-(num_opens + 4):-4] represents open piles
    obs[-4:] represents foundations by their top card

    Every row is a card slot: the column is the suit and the value is the rank, 0 for no card.
    """

    _obs_type: TypeAlias = npt.NDArray[np.int8]

    def __init__(self, config: GameConfig):
        super().__init__(config)
        # a dealt cascade can grow by at most one descending build
        self.cascade_max_len = Spec.num_cards // config.cascade_count + len(Spec.ranks)
        self.num_rows = config.cascade_count * self.cascade_max_len + config.open_count + Spec.num_foundations

    def get_gym_space(self) -> spaces.Space:
        return spaces.MultiDiscrete(np.full(
            (self.num_rows, len(Spec.suits)), len(Spec.ranks) + 1, dtype=np.int8
        ), dtype=np.int8)

    def encode(self, snapshot: GameSnapshot) -> _obs_type:
        obs = np.zeros((self.num_rows, len(Spec.suits)), dtype=np.int8)
        for i, cascade in enumerate(snapshot.cascades):
            if len(cascade) > self.cascade_max_len:
                raise ValueError(f'cascade {i} holds {len(cascade)} cards, more than {self.cascade_max_len}')
            self._put_cards(obs, i * self.cascade_max_len, cascade)
        open_offset = self.config.cascade_count * self.cascade_max_len
        for i, pile in enumerate(snapshot.opens):
            self._put_cards(obs, open_offset + i, pile)
        for i, pile in enumerate(snapshot.foundations):
            self._put_cards(obs, self.num_rows - Spec.num_foundations + i, pile[-1:])
        return obs

    def decode(self, obs: _obs_type) -> GameSnapshot:
        if obs.shape != (self.num_rows, len(Spec.suits)):
            raise ValueError(f'expect shape {(self.num_rows, len(Spec.suits))}, but get {obs.shape}')
        cascades = tuple(
            self._get_cards(obs[i * self.cascade_max_len:(i + 1) * self.cascade_max_len])
            for i in range(self.config.cascade_count)
        )
        open_offset = self.config.cascade_count * self.cascade_max_len
        opens = tuple(
            self._get_cards(obs[open_offset + i:open_offset + i + 1])
            for i in range(self.config.open_count)
        )
        foundations = []
        for row in obs[-Spec.num_foundations:]:
            top = self._get_cards(row[np.newaxis, :])
            if top:
                # foundations are built from the ace up in a single suit
                foundations.append(tuple(Card(top[0].suit, Rank(r)) for r in range(1, top[0].rank + 1)))
            else:
                foundations.append(())
        return GameSnapshot(foundations=tuple(foundations), opens=opens, cascades=cascades)

    @classmethod
    def _put_cards(cls, obs: _obs_type, row: int, cards) -> None:
        for j, card in enumerate(cards):
            obs[row + j, int(card.suit)] = int(card.rank)

    @classmethod
    def _get_cards(cls, rows: _obs_type) -> tuple[Card, ...]:
        cards = []
        for row in rows:
            if not np.any(row):
                break
            suit = int(np.argmax(row))
            cards.append(Card(Suit(suit), Rank(int(row[suit]))))
        return tuple(cards)
