from .cards import Card, Color, Rank, Suit, standard_deck, validate_deck
from .config import FreecellBuilder, GameConfig
from .engine import Game, GameStatus, MoveEngine, MultiMoveEngine, SingleMoveEngine
from .errors import ConfigurationError, EmptyPileError, ErrorKind, FreecellError
from .piles import PileKind, PileStore
from .snapshot import GameSnapshot, render_state
