import logging
from enum import Enum
from typing import Iterable
import numpy as np
from .cards import Card, validate_deck
from .config import GameConfig
from .errors import DestinationOutOfRangeError, EmptyPileError, OpenPileOccupiedError
from .standard_spec import StandardSpec as Spec

logger = logging.getLogger(__name__)


class PileKind(Enum):
    CASCADE = 'C'
    FOUNDATION = 'F'
    OPEN = 'O'

    @classmethod
    def coerce(cls, value: 'PileKind | str') -> 'PileKind':
        """Accept a PileKind, its letter or its name"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip().upper()
            for kind in cls:
                if text in (kind.value, kind.name):
                    return kind
        raise ValueError(f'pile kind cannot be {value!r}')


class PileStore():
    """
    Sparse storage for the cascade, foundation and open piles of a game

    A pile number only appears in its collection once a card has been put
    there, and it disappears again when its last card leaves. "Absent" and
    "empty" therefore mean the same thing for a pile number within range,
    while pile numbers outside the configured range never exist.
    """

    def __init__(self, config: GameConfig):
        self._config = config
        self._piles: dict[PileKind, dict[int, list[Card]]] = {kind: {} for kind in PileKind}

    @property
    def config(self) -> GameConfig:
        return self._config

    def limit(self, kind: PileKind) -> int:
        """Number of piles of the given kind the game is configured with"""
        if kind == PileKind.CASCADE:
            return self._config.cascade_count
        if kind == PileKind.OPEN:
            return self._config.open_count
        return self._config.foundation_count

    def in_range(self, kind: PileKind, number: int) -> bool:
        return 0 <= number < self.limit(kind)

    def clear(self) -> None:
        for piles in self._piles.values():
            piles.clear()

    def deal(self, deck: Iterable[Card], shuffle: bool = False,
             rng: np.random.Generator | None = None) -> None:
        """
        Clear every pile and deal the deck round-robin onto the cascades

        Args:
            deck (Iterable[Card]): 52 distinct cards, left unmodified
            shuffle (bool): randomize the order before dealing
            rng (np.random.Generator | None): source of randomness for shuffling

        Raises:
            InvalidDeckError: when the deck is not 52 distinct cards
        """
        cards = list(deck) if deck is not None else None
        validate_deck(cards)
        if shuffle:
            if rng is None:
                rng = np.random.default_rng()
            cards = [cards[i] for i in rng.permutation(len(cards))]

        self.clear()
        cascades = self._piles[PileKind.CASCADE]
        for i, card in enumerate(cards):
            cascades.setdefault(i % self._config.cascade_count, []).append(card)
        logger.info('dealt %d cards onto %d cascades (shuffle=%s)',
                    len(cards), self._config.cascade_count, shuffle)

    def pile_exists(self, kind: PileKind, number: int) -> bool:
        return number in self._piles[kind]

    def pile_size(self, kind: PileKind, number: int) -> int:
        return len(self._piles[kind].get(number, ()))

    def cards(self, kind: PileKind, number: int) -> list[Card]:
        return list(self._piles[kind].get(number, ()))

    def top_card(self, kind: PileKind, number: int) -> Card:
        pile = self._piles[kind].get(number)
        if not pile:
            raise EmptyPileError(f'{kind.name.lower()} pile {number} holds no cards')
        return pile[-1]

    def append_cards(self, kind: PileKind, number: int, cards: Iterable[Card]) -> None:
        cards = list(cards)
        if not self.in_range(kind, number):
            raise DestinationOutOfRangeError('Destination Pile Number is invalid')
        if kind == PileKind.OPEN and self.pile_size(kind, number) + len(cards) > 1:
            raise OpenPileOccupiedError('Destination Open Pile already holds a card')
        if cards:
            self._piles[kind].setdefault(number, []).extend(cards)

    def append_card(self, kind: PileKind, number: int, card: Card) -> None:
        self.append_cards(kind, number, [card])

    def truncate_from(self, kind: PileKind, number: int, index: int) -> list[Card]:
        """Remove and return the cards at and above index"""
        pile = self._piles[kind].get(number)
        if pile is None:
            return []
        removed = pile[index:]
        del pile[index:]
        if not pile:
            del self._piles[kind][number]
        return removed

    def count_empty(self, kind: PileKind) -> int:
        return self.limit(kind) - len(self._piles[kind])

    def is_empty(self) -> bool:
        return not any(self._piles.values())

    def is_complete(self) -> bool:
        foundations = self._piles[PileKind.FOUNDATION]
        if len(foundations) != Spec.num_foundations:
            return False
        return all(len(pile) == len(Spec.ranks) for pile in foundations.values())

    def total_cards(self) -> int:
        return sum(len(pile) for piles in self._piles.values() for pile in piles.values())

    def view(self, kind: PileKind) -> tuple[tuple[Card, ...], ...]:
        """Every configured pile of the kind in number order; absent piles are empty"""
        piles = self._piles[kind]
        return tuple(tuple(piles.get(number, ())) for number in range(self.limit(kind)))
