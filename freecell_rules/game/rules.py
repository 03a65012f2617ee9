"""Destination legality and build rules shared by the move engines"""
from typing import Sequence
from .cards import Card, Rank
from .errors import (
    BrokenFoundationSequenceError,
    DestinationOutOfRangeError,
    FoundationMustStartWithAceError,
    InsufficientCapacityError,
    InvalidBuildError,
    OpenPileOccupiedError,
)
from .piles import PileKind, PileStore

def is_build_pair(lower: Card, upper: Card) -> bool:
    """
    Check whether upper may sit on lower in a cascade

    Args:
        lower (Card): card nearer the bottom of the pile
        upper (Card): card placed on top of it

    Returns:
        bool: True if upper is one rank below lower and of the other color
    """
    return upper.rank == lower.rank - 1 and upper.color != lower.color


def is_build(cards: Sequence[Card]) -> bool:
    return all(is_build_pair(lower, upper) for lower, upper in zip(cards[:-1], cards[1:]))


def validate_run(cards: Sequence[Card]) -> None:
    if not is_build(cards):
        raise InvalidBuildError('Source cards doesn\'t form a valid build')


def max_run_length(empty_opens: int, empty_cascades: int) -> int:
    """Most cards that can travel together using the empty piles as scratch space"""
    return (empty_opens + 1) * 2 ** empty_cascades


def check_capacity(store: PileStore, run_length: int, dest_pile_number: int) -> None:
    empty_opens = store.count_empty(PileKind.OPEN)
    empty_cascades = store.count_empty(PileKind.CASCADE)
    if not store.pile_exists(PileKind.CASCADE, dest_pile_number):
        # the destination itself cannot serve as scratch space
        empty_cascades -= 1
    capacity = max_run_length(empty_opens, empty_cascades)
    if run_length > capacity:
        raise InsufficientCapacityError(
            f'No. of cards you wanted to move ({run_length}) is greater than the '
            f'available intermediate slots allow ({capacity})'
        )


def check_foundation(store: PileStore, card: Card, dest_pile_number: int) -> None:
    if store.pile_exists(PileKind.FOUNDATION, dest_pile_number):
        top = store.top_card(PileKind.FOUNDATION, dest_pile_number)
        if card.suit != top.suit:
            raise BrokenFoundationSequenceError(
                f'{card} cannot go on {top}: a foundation pile holds a single suit'
            )
        if card.rank != top.rank + 1:
            raise BrokenFoundationSequenceError(
                f'{card} cannot go on {top}: face value should be one more than the last card'
            )
        return
    if not store.in_range(PileKind.FOUNDATION, dest_pile_number):
        raise DestinationOutOfRangeError('Destination Pile Number is invalid')
    if card.rank != Rank.ACE:
        raise FoundationMustStartWithAceError('The first card in a foundation pile should be an ace.')


def check_cascade(store: PileStore, card: Card, dest_pile_number: int) -> None:
    if store.pile_exists(PileKind.CASCADE, dest_pile_number):
        top = store.top_card(PileKind.CASCADE, dest_pile_number)
        if card.rank != top.rank - 1:
            raise InvalidBuildError(
                f'{card} cannot go on {top}: face value should be one less than the last card'
            )
        if card.color == top.color:
            raise InvalidBuildError(
                f'{card} cannot go on {top}: the card should have a different color'
            )
        return
    if not store.in_range(PileKind.CASCADE, dest_pile_number):
        raise DestinationOutOfRangeError('Destination Pile Number is invalid')


def check_open(store: PileStore, dest_pile_number: int) -> None:
    if not store.in_range(PileKind.OPEN, dest_pile_number):
        raise DestinationOutOfRangeError('Destination pile number isn\'t valid')
    if store.pile_exists(PileKind.OPEN, dest_pile_number):
        raise OpenPileOccupiedError('Destination Open Pile already holds a card')


def check_destination(store: PileStore, card: Card, destination: PileKind, dest_pile_number: int) -> None:
    """
    Check that card may be placed on the given pile

    For runs, card is the bottom card of the run.

    Raises:
        FreecellError: the subclass naming the broken rule
    """
    if destination == PileKind.FOUNDATION:
        check_foundation(store, card, dest_pile_number)
    elif destination == PileKind.CASCADE:
        check_cascade(store, card, dest_pile_number)
    else:
        check_open(store, dest_pile_number)
