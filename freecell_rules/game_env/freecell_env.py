import logging
from typing import Any
import gymnasium as gym
from .obs_space.base_obs import BaseObsSpace
from .obs_space.compact_obs import CompactObsSpace as ObsSpace
from .action_space.base_action import BaseActionSpace
from .action_space.tuple_action import TupleActionSpace as ActionSpace
from ..game.config import GameConfig
from ..game.engine import Game, MultiMoveEngine, SingleMoveEngine
from ..game.errors import FreecellError
from ..game.piles import PileKind
from ..game.snapshot import render_state

logger = logging.getLogger(__name__)


class FreeCellEnv(gym.Env):
    """Freecell game environment"""

    metadata = {'render_modes': ['ansi']}

    def __init__(self, obs_space_cls: type[BaseObsSpace] = ObsSpace,
                 action_space_cls: type[BaseActionSpace] = ActionSpace,
                 config: GameConfig | None = None, multi_move: bool = False,
                 max_steps: int = 1000, render_mode: str | None = 'ansi'):
        config = config if config is not None else GameConfig()
        self._game = Game(config, MultiMoveEngine() if multi_move else SingleMoveEngine())
        self._obs_space = obs_space_cls(config)
        self._action_space = action_space_cls(config)
        self._obs = None
        self._step = 0
        self._max_steps = max_steps
        self.render_mode = render_mode
        self.action_space = self._action_space.get_gym_space()
        self.observation_space = self._obs_space.get_gym_space()

    @property
    def game(self) -> Game:
        return self._game

    def step(self, action: Any) \
        -> tuple[Any, float, bool, bool, dict[str, Any]]:
        self._step += 1
        source_type, source_idx, card_idx, dest_type, dest_idx = self._action_space.parse_action(action)
        reward = -1.
        solved = False
        steps_exceed_limit = False
        result = {}
        try:
            self._game.move(source_type, source_idx, card_idx, dest_type, dest_idx)
        except FreecellError as exc:
            reward -= 100.
            result['status'] = 'failure'
            result['error'] = exc.kind.value
            result['detail'] = exc.detail
        else:
            result['status'] = 'success'
            if source_type == PileKind.FOUNDATION:
                reward -= 10.
            elif dest_type == PileKind.FOUNDATION:
                reward += 10.
                if self._game.is_game_over():
                    reward += 100.
                    solved = True
            self._obs = self._obs_space.encode(self._game.snapshot())
        if self._step >= self._max_steps:
            reward -= 200.
            steps_exceed_limit = True
        return self._obs, reward, solved, steps_exceed_limit, result

    def reset(self, *, seed: int | None = None, options: dict[str, Any] | None = None) \
        -> tuple[Any, dict[str, Any]]:
        super().reset(seed=seed)
        self._game.start_game(self._game.get_deck(), shuffle=True, rng=self.np_random)
        self._obs = self._obs_space.encode(self._game.snapshot())
        self._step = 0
        logger.debug('episode reset (seed=%s)', seed)
        return self._obs, {}

    def render(self) -> str | list[str] | None:
        return render_state(self._game.snapshot(), color=True)

    def close(self) -> None:
        pass
