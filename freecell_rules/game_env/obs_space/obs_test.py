import unittest
import numpy as np
from .compact_obs import CompactObsSpace as ObsSpace
from ...game.cards import Card
from ...game.config import FreecellBuilder, GameConfig
from ...game.piles import PileKind
from ...game.snapshot import GameSnapshot

class TestObsSpace(unittest.TestCase):
    """
    Unit test class for observation space

    Import self-defined observation space as ObsSpace to test
    """

    def setUp(self):
        self.game = FreecellBuilder().cascades(8).opens(4).build()
        self.game.start_game(self.game.get_deck(), shuffle=True, rng=np.random.default_rng(0))
        self.obs_space = ObsSpace(self.game.config)

    def test_shape(self):
        self.assertEqual(self.obs_space.cascade_max_len, 19)
        obs = self.obs_space.encode(self.game.snapshot())
        self.assertEqual(obs.shape, (8 * 19 + 4 + 4, 4))
        self.assertEqual(obs.dtype, np.int8)
        self.assertTrue(self.obs_space.get_gym_space().contains(obs))

    def test_encode_cells(self):
        game = FreecellBuilder().build()
        game.start_game(game.get_deck())
        game.move(PileKind.CASCADE, 0, 12, PileKind.FOUNDATION, 2)
        game.move(PileKind.CASCADE, 3, 12, PileKind.OPEN, 0)
        obs_space = ObsSpace(game.config)
        obs = obs_space.encode(game.snapshot())
        # cascade 0 starts with the king of spades
        np.testing.assert_array_equal(obs[0], [13, 0, 0, 0])
        # cascade 3 ends with the two of hearts once the ace left
        np.testing.assert_array_equal(obs[3 * obs_space.cascade_max_len + 11], [0, 0, 0, 2])
        self.assertFalse(np.any(obs[3 * obs_space.cascade_max_len + 12]))
        np.testing.assert_array_equal(obs[-5], [0, 0, 0, 1])
        np.testing.assert_array_equal(obs[-2], [1, 0, 0, 0])
        self.assertFalse(np.any(obs[-4:-2]))
        self.assertFalse(np.any(obs[-1]))

    def test_decode(self):
        game = FreecellBuilder().opens(2).build()
        game.start_game(game.get_deck())
        for i in range(12, 9, -1):
            game.move(PileKind.CASCADE, 2, i, PileKind.FOUNDATION, 1)
        game.move(PileKind.CASCADE, 0, 12, PileKind.OPEN, 1)
        obs_space = ObsSpace(game.config)
        snapshot = obs_space.decode(obs_space.encode(game.snapshot()))
        self.assertEqual(snapshot, game.snapshot())
        self.assertEqual(snapshot.pile(PileKind.FOUNDATION, 1), tuple(Card.parse(c) for c in ['A♦', '2♦', '3♦']))
        self.assertEqual(snapshot.pile(PileKind.OPEN, 0), ())
        with self.assertRaises(ValueError):
            self.obs_space.decode(np.zeros((3, 4), dtype=np.int8))

    def test_rejects_oversized_cascade(self):
        obs_space = ObsSpace(GameConfig())
        deck = self.game.get_deck()
        snapshot = GameSnapshot(foundations=((),) * 4, opens=((),), cascades=(tuple(deck[:30]), (), (), ()))
        with self.assertRaises(ValueError):
            obs_space.encode(snapshot)

if __name__ == '__main__':
    unittest.main()
