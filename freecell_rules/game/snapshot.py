from dataclasses import dataclass
from typing import Any
from termcolor import colored
from .cards import Card, Color
from .piles import PileKind, PileStore

@dataclass(frozen=True)
class GameSnapshot:
    """
    Read-only copy of every pile of a game

    Each field holds one tuple per configured pile, indexed by pile number.
    Piles that hold no cards are reported as empty tuples.
    """

    foundations: tuple[tuple[Card, ...], ...]
    opens: tuple[tuple[Card, ...], ...]
    cascades: tuple[tuple[Card, ...], ...]

    @classmethod
    def from_store(cls, store: PileStore) -> 'GameSnapshot':
        return cls(
            foundations=store.view(PileKind.FOUNDATION),
            opens=store.view(PileKind.OPEN),
            cascades=store.view(PileKind.CASCADE),
        )

    def piles(self, kind: PileKind) -> tuple[tuple[Card, ...], ...]:
        if kind == PileKind.FOUNDATION:
            return self.foundations
        if kind == PileKind.OPEN:
            return self.opens
        return self.cascades

    def pile(self, kind: PileKind | str, number: int) -> tuple[Card, ...]:
        if number < 0:
            raise IndexError(f'pile number cannot be {number}')
        return self.piles(PileKind.coerce(kind))[number]

    def card_count(self) -> int:
        return sum(len(pile) for kind in PileKind for pile in self.piles(kind))

    def is_empty(self) -> bool:
        return self.card_count() == 0

    def as_dict(self) -> dict[str, Any]:
        """Plain lists of card strings, keyed by pile kind name"""
        return {
            kind.name.lower(): [[str(card) for card in pile] for pile in self.piles(kind)]
            for kind in (PileKind.FOUNDATION, PileKind.OPEN, PileKind.CASCADE)
        }


def _render_card(card: Card, color: bool) -> str:
    if color and card.color == Color.RED:
        return colored(str(card), 'red')
    return str(card)


def render_state(snapshot: GameSnapshot, color: bool = False) -> str:
    """
    Render the snapshot as lines of 1-based pile labels followed by their cards

    Foundations come first, then open piles, then cascades, e.g.

        F1: A♠, 2♠
        ...
        O1: 3♦
        C1: K♠, Q♥

    Args:
        snapshot (GameSnapshot): piles to render
        color (bool): color red suits for a terminal

    Returns:
        str: rendered state without a trailing newline, empty before the first deal
    """
    if snapshot.is_empty():
        return ''
    lines = []
    for kind in (PileKind.FOUNDATION, PileKind.OPEN, PileKind.CASCADE):
        for number, pile in enumerate(snapshot.piles(kind)):
            line = f'{kind.value}{number + 1}:'
            if pile:
                line += ' ' + ', '.join(_render_card(card, color) for card in pile)
            lines.append(line)
    return '\n'.join(lines)
