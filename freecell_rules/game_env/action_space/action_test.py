import unittest
import numpy as np
from .tuple_action import TupleActionSpace as ActionSpace
from ...game.config import GameConfig
from ...game.piles import PileKind

class TestActionSpace(unittest.TestCase):
    """
    Unit test class for action space

    Import self-defined action space as ActionSpace to test
    """

    def setUp(self):
        self.action_space = ActionSpace(GameConfig(cascade_count=8, open_count=4))

    def test_random_action(self):
        random_action = self.action_space.get_gym_space().sample()
        parsed_action = self.action_space.parse_action(random_action)
        for i in (0, 3):
            kind, idx = parsed_action[i:i + 2]
            self.assertIn(kind, list(PileKind), 'wrong pile kind')
            self.assertGreaterEqual(idx, 0, 'negative pile index')
            self.assertLess(idx, 8, 'pile index out of range')
        self.assertLess(parsed_action[2], 19, 'card index out of range')

    def test_parse_action(self):
        parsed_action = self.action_space.parse_action(np.array([0, 1, 5, 2, 0], dtype=np.int8))
        self.assertEqual(parsed_action, (PileKind.CASCADE, 1, 5, PileKind.OPEN, 0))

    def test_invalid_action(self):
        for action in ([3, 0, 0, 0, 0], [0, 8, 0, 0, 0], [0, 0, 19, 0, 0], [0, 0, 0, 1]):
            with self.subTest(action=action):
                with self.assertRaises(ValueError):
                    self.action_space.parse_action(np.array(action, dtype=np.int8))

if __name__ == '__main__':
    unittest.main()
