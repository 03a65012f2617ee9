import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable
import numpy as np
from . import rules
from .cards import Card, standard_deck
from .config import GameConfig
from .errors import (
    FreecellError,
    GameNotStartedError,
    MultiCardDestinationUnsupportedError,
    NotTopCardError,
    SourcePileNotFoundError,
)
from .piles import PileKind, PileStore
from .snapshot import GameSnapshot, render_state

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    NOT_STARTED = 'not started'
    IN_PROGRESS = 'in progress'
    OVER = 'over'


class MoveEngine(ABC):
    """Base abstract class deciding which cards a move picks up"""

    @abstractmethod
    def check_card_index(self, store: PileStore, source: PileKind, pile_number: int,
                         card_index: int, destination: PileKind) -> None:
        """
        Check that card_index names a card that may be picked up

        Raises:
            NotTopCardError: when the index cannot start a move
        """

    def check_run(self, cards: list[Card], destination: PileKind) -> None:
        """
        Check the picked up cards as a unit before the destination is consulted

        Raises:
            FreecellError: when the cards cannot travel together
        """

    def check_capacity(self, store: PileStore, cards: list[Card],
                       destination: PileKind, dest_pile_number: int) -> None:
        """
        Check that the game has room to carry the cards

        Raises:
            InsufficientCapacityError: when there are not enough empty piles
        """


class SingleMoveEngine(MoveEngine):
    """Only the top card of a pile ever moves"""

    def check_card_index(self, store, source, pile_number, card_index, destination):
        top_index = store.pile_size(source, pile_number) - 1
        if card_index != top_index:
            raise NotTopCardError('provided source card isn\'t the last card in the source pile')


class MultiMoveEngine(MoveEngine):
    """
    Builds may move from cascade to cascade as a unit

    The move is accepted when the run is a valid build and no longer than
    the empty open and cascade piles could shuttle one card at a time.
    Moves to foundation and open piles stay single card.
    """

    def check_card_index(self, store, source, pile_number, card_index, destination):
        top_index = store.pile_size(source, pile_number) - 1
        if source != PileKind.CASCADE:
            if card_index != top_index:
                raise NotTopCardError('provided source card isn\'t the last card in the source pile')
            return
        if card_index < 0 or card_index > top_index:
            raise NotTopCardError(f'Invalid card index {card_index} for a pile of {top_index + 1} cards')

    def check_run(self, cards, destination):
        if len(cards) > 1 and destination != PileKind.CASCADE:
            raise MultiCardDestinationUnsupportedError(
                f'only a single card may be moved to a {destination.name.lower()} pile'
            )
        rules.validate_run(cards)

    def check_capacity(self, store, cards, destination, dest_pile_number):
        if destination == PileKind.CASCADE:
            rules.check_capacity(store, len(cards), dest_pile_number)


class Game():
    """
    A freecell game: the piles, the configuration they obey and the move engine

    Moves are validated completely before any pile changes, so a rejected move
    leaves the game exactly as it was.
    """

    def __init__(self, config: GameConfig | None = None, engine: MoveEngine | None = None):
        self._config = config if config is not None else GameConfig()
        self._engine = engine if engine is not None else SingleMoveEngine()
        self._store = PileStore(self._config)

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def engine(self) -> MoveEngine:
        return self._engine

    @property
    def piles(self) -> PileStore:
        return self._store

    @property
    def state(self) -> GameStatus:
        if self._store.is_empty():
            return GameStatus.NOT_STARTED
        if self._store.is_complete():
            return GameStatus.OVER
        return GameStatus.IN_PROGRESS

    def get_deck(self) -> list[Card]:
        return standard_deck()

    def start_game(self, deck: Iterable[Card], shuffle: bool = False,
                   rng: np.random.Generator | None = None) -> None:
        """
        Deal a new game, discarding whatever was on the piles

        Raises:
            InvalidDeckError: when the deck is not 52 distinct cards
        """
        self._store.deal(deck, shuffle, rng)

    deal = start_game

    def move(self, source: PileKind | str, pile_number: int, card_index: int,
             destination: PileKind | str, dest_pile_number: int) -> None:
        """
        Move the card at card_index, and for builds every card above it, to another pile

        Pile numbers and card indices are 0-based.

        Raises:
            FreecellError: the subclass naming the rule the move breaks
        """
        source = PileKind.coerce(source)
        destination = PileKind.coerce(destination)
        store = self._store

        if store.is_empty():
            raise GameNotStartedError('Move can\'t be called before the game has started')
        if not store.pile_exists(source, pile_number):
            raise SourcePileNotFoundError('provided source pile number doesn\'t exist')
        self._engine.check_card_index(store, source, pile_number, card_index, destination)

        top_index = store.pile_size(source, pile_number) - 1
        if source == destination and pile_number == dest_pile_number and card_index == top_index:
            logger.debug('%s%d[%d] is already in place', source.value, pile_number, card_index)
            return

        cards = store.cards(source, pile_number)[card_index:]
        try:
            self._engine.check_run(cards, destination)
            rules.check_destination(store, cards[0], destination, dest_pile_number)
            self._engine.check_capacity(store, cards, destination, dest_pile_number)
        except FreecellError as exc:
            logger.debug('rejected %s%d[%d] -> %s%d: %s', source.value, pile_number, card_index,
                         destination.value, dest_pile_number, exc)
            raise

        store.append_cards(destination, dest_pile_number, cards)
        store.truncate_from(source, pile_number, card_index)
        logger.debug('moved %s from %s%d to %s%d', ', '.join(map(str, cards)),
                     source.value, pile_number, destination.value, dest_pile_number)

    def is_game_over(self) -> bool:
        return self._store.is_complete()

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot.from_store(self._store)

    def get_game_state(self) -> str:
        return render_state(self.snapshot())
