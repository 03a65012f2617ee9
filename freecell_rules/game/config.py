from dataclasses import dataclass
from .errors import ConfigurationError
from .standard_spec import StandardSpec as Spec

def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigurationError(f'number of {name} piles must be an integer, got {value!r}')
    if value < low or value > high:
        raise ConfigurationError(f'number of {name} piles must be between {low} and {high}, got {value}')


@dataclass(frozen=True)
class GameConfig:
    """Pile counts a game is played with, fixed for the lifetime of the game"""

    cascade_count: int = Spec.default_cascades
    open_count: int = Spec.default_opens

    def __post_init__(self):
        _check_range('cascade', self.cascade_count, Spec.min_cascades, Spec.max_cascades)
        _check_range('open', self.open_count, Spec.min_opens, Spec.max_opens)

    @property
    def foundation_count(self) -> int:
        return Spec.num_foundations


class FreecellBuilder():
    """
    Fluent builder for games

    Every setter validates its argument straight away:

        game = FreecellBuilder().cascades(8).opens(4).multi_move().build()
    """

    def __init__(self):
        self._cascade_count = Spec.default_cascades
        self._open_count = Spec.default_opens
        self._multi_move = False

    def cascades(self, count: int) -> 'FreecellBuilder':
        _check_range('cascade', count, Spec.min_cascades, Spec.max_cascades)
        self._cascade_count = count
        return self

    def opens(self, count: int) -> 'FreecellBuilder':
        _check_range('open', count, Spec.min_opens, Spec.max_opens)
        self._open_count = count
        return self

    def multi_move(self, enabled: bool = True) -> 'FreecellBuilder':
        self._multi_move = enabled
        return self

    def config(self) -> GameConfig:
        return GameConfig(self._cascade_count, self._open_count)

    def build(self):
        # imported here, engine depends on this module
        from .engine import Game, MultiMoveEngine, SingleMoveEngine
        engine = MultiMoveEngine() if self._multi_move else SingleMoveEngine()
        return Game(self.config(), engine)
