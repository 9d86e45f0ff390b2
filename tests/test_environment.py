"""
Tests for the game session.

Tests cover session reset, scoring, tile spawning after moves, game termination and rendering.
"""

from unittest import TestCase, main
from unittest.mock import patch

import numpy as np

from tilemerge.core.types import Changed, Direction, EntropyError, Unchanged, new_grid
from tilemerge.envs import GameConfiguration, TileMergeGame


class TestSessionInterface(TestCase):
    """Test TileMergeGame API and state management."""

    def setUp(self):
        """Initialize a seeded session before each test."""
        self.game = TileMergeGame(GameConfiguration(seed=42))

    def test_reset_state_initialization(self):
        """Reset places a single tile and zeroes the score."""
        grid = self.game.reset(seed=1)

        # ##>: Exactly 1 tile, 2 or 4.
        self.assertEqual(np.count_nonzero(grid), 1)
        self.assertTrue(np.all(np.isin(grid[grid != 0], [2, 4])))

        self.assertEqual(self.game.score, 0)
        self.assertEqual(self.game.moves, 0)
        self.assertFalse(self.game.is_finished)

    def test_initial_tiles_setting(self):
        game = TileMergeGame(GameConfiguration(initial_tiles=2, seed=0))
        self.assertEqual(np.count_nonzero(game.grid), 2)

    def test_reset_seed_reproducibility(self):
        """Same seed produces identical games."""
        first = self.game.reset(seed=42).copy()
        self.game.step(Direction.LEFT)
        self.game.step(Direction.DOWN)
        after_first = self.game.grid.copy()

        second = self.game.reset(seed=42).copy()
        self.game.step(Direction.LEFT)
        self.game.step(Direction.DOWN)

        np.testing.assert_array_equal(first, second)
        np.testing.assert_array_equal(after_first, self.game.grid)


class TestSessionStep(TestCase):
    """Test move application, scoring and spawning."""

    def setUp(self):
        self.game = TileMergeGame(GameConfiguration(seed=7))

    def test_successful_move_scores_and_spawns(self):
        self.game.grid[:, :] = new_grid([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        grid, outcome, finished = self.game.step(Direction.LEFT)

        self.assertEqual(outcome, Changed(4))
        self.assertEqual(self.game.score, 4)
        self.assertEqual(self.game.moves, 1)
        self.assertEqual(grid[0, 0], 4)

        # ##>: One merged tile plus one new tile.
        self.assertEqual(np.count_nonzero(grid), 2)
        self.assertFalse(finished)

    def test_unchanged_move_does_nothing(self):
        self.game.grid[:, :] = new_grid([[2, 0, 0, 0], [4, 0, 0, 0], [8, 0, 0, 0], [16, 0, 0, 0]])
        original = self.game.grid.copy()
        grid, outcome, finished = self.game.step(Direction.LEFT)

        self.assertEqual(outcome, Unchanged())
        np.testing.assert_array_equal(grid, original)
        self.assertEqual(self.game.score, 0)
        self.assertEqual(self.game.moves, 0)
        self.assertFalse(finished)

    def test_score_accumulates(self):
        self.game.grid[:, :] = new_grid([[2, 2, 4, 4], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.game.step(Direction.LEFT)
        self.assertEqual(self.game.score, 12)

        self.game.grid[:, :] = new_grid([[0, 0, 0, 0], [16, 16, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.game.step(Direction.RIGHT)
        self.assertEqual(self.game.score, 44)

    def test_game_over(self):
        """The move that fills the last hole without leaving any pair ends the game."""
        self.game.grid[:, :] = new_grid(
            [[0, 8, 16, 32], [64, 128, 256, 512], [1024, 2048, 4096, 8192], [16384, 32768, 65536, 131072]]
        )
        self.assertFalse(self.game.is_finished)

        # ##>: The first row slides left and the new tile lands in the only hole, (0, 3).
        grid, outcome, finished = self.game.step(Direction.LEFT)

        self.assertEqual(outcome, Changed(0))
        self.assertIn(grid[0, 3], (2, 4))
        self.assertEqual(np.count_nonzero(grid), 16)
        self.assertTrue(finished)
        self.assertTrue(self.game.is_finished)

    def test_finished_grid(self):
        self.game.grid[:, :] = new_grid([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])
        for direction in Direction:
            _, outcome, finished = self.game.step(direction)
            self.assertEqual(outcome, Unchanged())
            self.assertTrue(finished)

    def test_entropy_failure_propagates(self):
        with patch("tilemerge.core.gameboard.PCG64DXSM", side_effect=OSError("no entropy")):
            with self.assertRaises(EntropyError):
                self.game.reset()


class TestRender(TestCase):
    def test_render(self):
        game = TileMergeGame(GameConfiguration(seed=0))
        game.grid[:, :] = new_grid([[2, 0, 0, 2048], [0, 0, 0, 0], [0, 16, 0, 0], [0, 0, 0, 4]])
        lines = game.render().splitlines()

        self.assertEqual(len(lines), 5)
        self.assertEqual(lines[0], "    2     0     0  2048")
        self.assertEqual(lines[2], "    0    16     0     0")
        self.assertEqual(lines[4], "Score: 0")


if __name__ == "__main__":
    main()
