from .game import (
    Card,
    ErrorKind,
    FreecellBuilder,
    FreecellError,
    Game,
    GameConfig,
    GameSnapshot,
    PileKind,
    render_state,
    standard_deck,
)
