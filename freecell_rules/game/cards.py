from dataclasses import dataclass
from enum import Enum, IntEnum
from .errors import InvalidDeckError
from .standard_spec import StandardSpec as Spec

class Color(Enum):
    BLACK = 'black'
    RED = 'red'


class Suit(IntEnum):
    """Card suits, in the order the standard deck lists them"""

    SPADE = 0
    CLUB = 1
    DIAMOND = 2
    HEART = 3

    @property
    def symbol(self) -> str:
        return Spec.suits[self]

    @property
    def color(self) -> Color:
        if self in (Suit.SPADE, Suit.CLUB):
            return Color.BLACK
        return Color.RED


class Rank(IntEnum):
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def label(self) -> str:
        return Spec.ranks[self - 1]


@dataclass(frozen=True, order=True)
class Card:
    """Immutable playing card, compared by value"""

    suit: Suit
    rank: Rank

    @property
    def color(self) -> Color:
        return self.suit.color

    def __str__(self) -> str:
        return self.rank.label + self.suit.symbol

    @classmethod
    def parse(cls, text: str) -> 'Card':
        """
        Parse the canonical text form of a card, e.g. '10♦' or 'A♠'

        Raises:
            ValueError: when text is not a card
        """
        text = text.strip()
        if len(text) < 2 or text[:-1] not in Spec.ranks or text[-1] not in Spec.suits:
            raise ValueError(f'cannot parse card from {text!r}')
        return cls(Suit(Spec.suits.index(text[-1])), Rank(Spec.ranks.index(text[:-1]) + 1))


def standard_deck() -> list[Card]:
    """
    Build a fresh list of the 52 cards

    Ranks run from King down to Ace; each rank lists spades, clubs, diamonds, hearts.
    """
    return [Card(suit, rank) for rank in reversed(Rank) for suit in Suit]


def validate_deck(deck) -> None:
    """
    Check that a deck holds every card exactly once

    Raises:
        InvalidDeckError: when the deck is missing or is not 52 distinct cards
    """
    if deck is None:
        raise InvalidDeckError('Provided deck of cards is invalid')
    cards = list(deck)
    if any(not isinstance(card, Card) for card in cards):
        raise InvalidDeckError('Provided deck contains something that is not a card')
    if len(cards) != Spec.num_cards or len(set(cards)) != Spec.num_cards:
        raise InvalidDeckError(f'Provided deck of cards isn\'t valid: expected {Spec.num_cards} distinct cards')
