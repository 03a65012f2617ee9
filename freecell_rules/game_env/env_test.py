import unittest
import numpy as np
from .freecell_env import FreeCellEnv
from .obs_space.compact_obs import CompactObsSpace as ObsSpace
from .action_space.tuple_action import TupleActionSpace as ActionSpace
from ..game.config import GameConfig
from ..game.piles import PileKind

CASCADE, FOUNDATION, OPEN = 0, 1, 2


class TestEnv(unittest.TestCase):
    """
    Unit test class for entire freecell environment

    Assert using TupleActionSpace on an unshuffled deal
    """

    def setUp(self):
        self.env = FreeCellEnv(ObsSpace, ActionSpace, GameConfig(cascade_count=4, open_count=2))
        self.env.reset(seed=0)
        # redeal in standard order: cascade i holds one suit, ace on top
        self.env.game.start_game(self.env.game.get_deck())

    def step(self, *action):
        return self.env.step(np.array(action, dtype=np.int8))

    def test_reset(self):
        obs, info = self.env.reset(seed=1)
        self.assertEqual(info, {})
        self.assertTrue(self.env.observation_space.contains(obs))
        self.assertEqual(self.env.game.snapshot().card_count(), 52)
        again, _ = FreeCellEnv(ObsSpace, ActionSpace, GameConfig(cascade_count=4, open_count=2)).reset(seed=1)
        np.testing.assert_array_equal(obs, again)

    def test_everything_in_one_episode(self):
        obs, reward, terminated, truncated, result = self.step(CASCADE, 0, 12, FOUNDATION, 0)
        self.assertEqual(result['status'], 'success')
        self.assertEqual(reward, 9.)
        self.assertFalse(terminated or truncated)
        np.testing.assert_array_equal(obs, self.env._obs_space.encode(self.env.game.snapshot()))

        _, reward, _, _, result = self.step(CASCADE, 0, 12, FOUNDATION, 0)
        self.assertEqual(result['status'], 'failure')
        self.assertEqual(result['error'], 'NotTopCard')
        self.assertEqual(reward, -101.)

        _, _, _, _, result = self.step(CASCADE, 1, 12, OPEN, 2)
        self.assertEqual(result['error'], 'DestinationOutOfRange')

        _, reward, _, _, result = self.step(FOUNDATION, 0, 0, OPEN, 1)
        self.assertEqual(result['status'], 'success')
        self.assertEqual(reward, -11.)
        self.assertEqual(self.env.game.snapshot().pile(PileKind.OPEN, 1)[0].rank, 1)

        self.step(OPEN, 1, 0, FOUNDATION, 0)
        for i in range(4):
            for j in range(12, -1, -1):
                if (i, j) == (0, 12):
                    continue
                _, reward, terminated, _, result = self.step(CASCADE, i, j, FOUNDATION, i)
                self.assertEqual(result['status'], 'success')
        self.assertTrue(terminated)
        self.assertEqual(reward, 109.)

    def test_truncation(self):
        env = FreeCellEnv(max_steps=2)
        env.reset(seed=3)
        _, _, _, truncated, _ = env.step(np.array([OPEN, 0, 0, OPEN, 0], dtype=np.int8))
        self.assertFalse(truncated)
        _, reward, _, truncated, _ = env.step(np.array([OPEN, 0, 0, OPEN, 0], dtype=np.int8))
        self.assertTrue(truncated)
        self.assertEqual(reward, -301.)

    def test_multi_move(self):
        env = FreeCellEnv(ObsSpace, ActionSpace, GameConfig(), multi_move=True)
        env.reset(seed=0)
        env.game.start_game(env.game.get_deck())
        _, _, _, _, result = env.step(np.array([CASCADE, 0, 11, OPEN, 0], dtype=np.int8))
        self.assertEqual(result['error'], 'MultiCardDestinationUnsupported')

    def test_render(self):
        text = self.env.render()
        self.assertIn('F1:', text)
        self.assertIn('O2:', text)
        self.assertIn('A♠', text)

if __name__ == '__main__':
    unittest.main()
