import argparse
import logging
import re
import sys
from typing import Iterable, Iterator, TextIO
import numpy as np
from ..game.cards import Card
from ..game.config import FreecellBuilder
from ..game.engine import Game
from ..game.errors import ConfigurationError, FreecellError
from ..game.piles import PileKind
from ..game.snapshot import render_state
from ..game.standard_spec import StandardSpec as Spec

logger = logging.getLogger(__name__)

_PILE_TOKEN = re.compile(r'([CFO])([0-9]+)')
_INDEX_TOKEN = re.compile(r'[0-9]+')


class FreecellController():
    """
    Plays a game from a stream of text commands

    A move is three whitespace separated tokens, all 1-based:
    the source pile (e.g. C1, F2, O3), the card index within it and the
    destination pile. Tokens that do not fit the field expected next are
    skipped, and 'q' or 'Q' quits at any point.
    """

    def __init__(self, readable: TextIO, writable: TextIO, color: bool = False):
        if readable is None:
            raise ValueError('readable object can\'t be None')
        if writable is None:
            raise ValueError('writable object can\'t be None')
        self._in = readable
        self._out = writable
        self._color = color

    def play_game(self, deck: Iterable[Card], game: Game, shuffle: bool,
                  rng: np.random.Generator | None = None) -> None:
        """
        Deal the deck and play until the game is won, quit or input runs out

        Raises:
            ValueError: when game is None
            InvalidDeckError: when the deck cannot be dealt
        """
        if game is None:
            raise ValueError('game can\'t be None')
        game.start_game(deck, shuffle, rng)
        self._write_state(game)

        fields = []
        for token in self._tokens():
            if token in ('q', 'Q'):
                self._write('Game quit prematurely.')
                logger.info('game quit by player')
                return
            if not self._accepts(len(fields), token):
                logger.debug('ignored token %r', token)
                continue
            fields.append(token)
            if len(fields) < 3:
                continue

            source, card_index, destination = fields
            fields = []
            self._call_move(game, source, card_index, destination)
            if game.is_game_over():
                self._write_state(game)
                self._write('Game over.')
                logger.info('game over')
                return

    def _tokens(self) -> Iterator[str]:
        for line in self._in:
            yield from line.split()

    @staticmethod
    def _accepts(position: int, token: str) -> bool:
        if position == 1:
            return _INDEX_TOKEN.fullmatch(token) is not None
        return _PILE_TOKEN.fullmatch(token) is not None

    @staticmethod
    def _parse_pile(token: str) -> tuple[PileKind, int]:
        letter, number = _PILE_TOKEN.fullmatch(token).groups()
        return PileKind(letter), int(number) - 1

    def _call_move(self, game: Game, source: str, card_index: str, destination: str) -> None:
        source_kind, source_number = self._parse_pile(source)
        dest_kind, dest_number = self._parse_pile(destination)
        try:
            game.move(source_kind, source_number, int(card_index) - 1, dest_kind, dest_number)
        except FreecellError as exc:
            self._write(f'Invalid move. Try again. {exc.detail}\n')
            return
        self._write_state(game)

    def _write_state(self, game: Game) -> None:
        self._write(render_state(game.snapshot(), color=self._color) + '\n')

    def _write(self, message: str) -> None:
        try:
            self._out.write(message)
        except OSError as exc:
            raise RuntimeError('controller is unable to transmit the output properly') from exc


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description='Play freecell from the terminal')
    parser.add_argument('--cascades', type=int, default=Spec.default_cascades,
                        help=f'number of cascade piles ({Spec.min_cascades}-{Spec.max_cascades})')
    parser.add_argument('--opens', type=int, default=Spec.default_opens,
                        help=f'number of open piles ({Spec.min_opens}-{Spec.max_opens})')
    parser.add_argument('--multi-move', action='store_true', help='allow moving whole builds')
    parser.add_argument('--no-shuffle', action='store_true', help='deal the deck in standard order')
    parser.add_argument('--seed', type=int, help='seed for shuffling')
    parser.add_argument('--color', action='store_true', help='color red suits')
    parser.add_argument('-v', '--verbose', action='store_true', help='log every move')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    try:
        game = FreecellBuilder().cascades(args.cascades).opens(args.opens).multi_move(args.multi_move).build()
    except ConfigurationError as exc:
        parser.error(str(exc))

    controller = FreecellController(sys.stdin, sys.stdout, color=args.color)
    controller.play_game(game.get_deck(), game, not args.no_shuffle, np.random.default_rng(args.seed))
    sys.stdout.write('\n')
    return 0


if __name__ == '__main__':
    sys.exit(main())
