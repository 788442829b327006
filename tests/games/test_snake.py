"""
Tests for game_hub.games.snake

Tests the grid-movement engine: lifecycle, heading rules, movement,
collisions and goal handling.
"""

import numpy as np
import pytest

from game_hub.core.types import DOWN, LEFT, RIGHT, UP, Position, Status
from game_hub.games.snake import SnakeGame, default_initial_body


def _seeded(**kwargs) -> SnakeGame:
    return SnakeGame(rng=np.random.default_rng(0), **kwargs)


class TestInitialization:
    """Initial state tests."""

    def test_initial_state(self, snake: SnakeGame):
        """Game starts idle with the default single-segment body."""
        assert snake.status is Status.IDLE
        assert list(snake.body) == [Position(8, 10)]
        assert snake.heading == RIGHT
        assert snake.score == 0
        assert snake.goal is not None
        assert snake.goal not in snake.body

    def test_metadata(self, snake: SnakeGame):
        assert snake.game_id() == "snake"
        assert snake.board_size == 20

    def test_default_body_scales_with_board(self):
        """Default head sits at (2N/5, N/2)."""
        assert default_initial_body(20) == (Position(8, 10),)
        assert default_initial_body(10) == (Position(4, 5),)

    @pytest.mark.parametrize("kwargs", [
        {"board_size": 1},
        {"initial_body": []},
        {"initial_body": [(1, 1), (1, 1)]},
        {"board_size": 5, "initial_body": [(5, 0)]},
        {"initial_heading": (1, 1)},
    ])
    def test_invalid_construction_raises(self, kwargs):
        """Bad construction parameters raise ValueError."""
        with pytest.raises(ValueError):
            _seeded(**kwargs)


class TestLifecycle:
    """start / reset tests."""

    def test_start_runs(self, snake: SnakeGame):
        snake.start()
        assert snake.status is Status.RUNNING

    def test_tick_while_idle_is_noop(self, snake: SnakeGame):
        """Ticks before start change nothing."""
        before = snake.snapshot()
        snake.tick()
        assert snake.snapshot() == before

    def test_start_while_running_is_noop(self, running_snake: SnakeGame):
        """A second start() does not reset a running round."""
        running_snake.tick()
        body = list(running_snake.body)
        running_snake.start()
        assert list(running_snake.body) == body

    def test_restart_after_end(self):
        """start() from Ended begins a fresh round."""
        game = _seeded(board_size=5, initial_body=[(4, 2)])
        game.start()
        game.tick()
        assert game.status is Status.ENDED

        game.start()
        assert game.status is Status.RUNNING
        assert list(game.body) == [Position(4, 2)]
        assert game.score == 0

    def test_reset_returns_to_idle(self, running_snake: SnakeGame):
        running_snake.set_heading(UP)
        running_snake.tick()
        running_snake.reset()
        assert running_snake.status is Status.IDLE
        assert list(running_snake.body) == [Position(8, 10)]
        assert running_snake.heading == RIGHT


class TestHeading:
    """set_heading tests."""

    def test_reverse_rejected(self, running_snake: SnakeGame):
        """Exact reverse of the current heading is ignored."""
        running_snake.set_heading(LEFT)
        assert running_snake.heading == RIGHT
        running_snake.tick()
        assert running_snake.body[0] == Position(9, 10)
        assert running_snake.heading == RIGHT

    def test_perpendicular_accepted(self, running_snake: SnakeGame):
        """Turns apply on the next tick."""
        running_snake.set_heading(UP)
        assert running_snake.body[0] == Position(8, 10)
        running_snake.tick()
        assert running_snake.body[0] == Position(8, 9)

    def test_plain_tuple_accepted(self, running_snake: SnakeGame):
        running_snake.set_heading((0, 1))
        assert running_snake.heading == DOWN

    @pytest.mark.parametrize("candidate", [(1, 1), (2, 0), (0, 0), (1,), "up", 3])
    def test_invalid_vectors_rejected(self, running_snake: SnakeGame, candidate):
        """Non-unit or malformed headings are ignored."""
        running_snake.set_heading(candidate)
        assert running_snake.heading == RIGHT

    def test_ignored_unless_running(self, snake: SnakeGame):
        """Heading changes before start are dropped."""
        snake.set_heading(UP)
        assert snake.heading == RIGHT

    def test_reverse_check_uses_latest_heading(self, running_snake: SnakeGame):
        """Two turns within one tick are each checked against the last accepted one."""
        running_snake.set_heading(UP)
        running_snake.set_heading(LEFT)
        assert running_snake.heading == LEFT


class TestMovement:
    """tick movement tests."""

    def test_moves_one_cell(self, running_snake: SnakeGame):
        running_snake.goal = Position(0, 0)
        running_snake.tick()
        assert list(running_snake.body) == [Position(9, 10)]

    def test_length_constant_without_goal(self):
        """Non-consuming ticks keep the body length."""
        game = _seeded(initial_body=[(5, 5), (4, 5), (3, 5)])
        game.start()
        game.goal = Position(0, 0)
        game.tick()
        assert list(game.body) == [Position(6, 5), Position(5, 5), Position(4, 5)]


class TestGoal:
    """Goal consumption and placement tests."""

    def test_consuming_goal(self, running_snake: SnakeGame):
        """Eating grows the body by one and scores one point."""
        running_snake.goal = Position(9, 10)
        running_snake.tick()

        assert running_snake.score == 1
        assert list(running_snake.body) == [Position(9, 10), Position(8, 10)]
        assert running_snake.goal is not None
        assert running_snake.goal not in running_snake.body

    def test_growth_relative_to_plain_tick(self):
        """Consuming vs not consuming differs by exactly one segment and one point."""
        eat = _seeded()
        plain = _seeded()
        for game in (eat, plain):
            game.start()
        eat.goal = Position(9, 10)
        plain.goal = Position(0, 0)

        eat.tick()
        plain.tick()

        assert len(eat.body) == len(plain.body) + 1
        assert eat.score == plain.score + 1

    def test_only_free_cell_chosen(self):
        """With a single free cell, the goal lands there."""
        body = [(x, y) for y in range(3) for x in range(3) if (x, y) != (2, 2)]
        game = _seeded(board_size=3, initial_body=body)
        assert game.goal == Position(2, 2)

    def test_full_board_leaves_goal_unset(self):
        """Filling the board leaves no goal."""
        game = _seeded(board_size=2, initial_body=[(0, 0), (1, 0), (1, 1)], initial_heading=DOWN)
        game.start()
        assert game.goal == Position(0, 1)

        game.tick()
        assert game.score == 1
        assert len(game.body) == 4
        assert game.goal is None

    def test_seeded_placement_is_reproducible(self):
        assert _seeded().goal == _seeded().goal


class TestCollisions:
    """Wall and self collision tests."""

    @pytest.mark.parametrize("head,heading", [
        ((4, 2), RIGHT),
        ((0, 2), LEFT),
        ((2, 0), UP),
        ((2, 4), DOWN),
    ])
    def test_wall_ends_game(self, head, heading):
        game = _seeded(board_size=5, initial_body=[head], initial_heading=heading)
        game.start()
        game.tick()
        assert game.status is Status.ENDED
        assert list(game.body) == [Position(*head)]

    def test_self_collision_ends_game(self):
        """Moving into a body segment ends the game."""
        body = [(2, 2), (3, 2), (3, 3), (2, 3), (1, 3)]
        game = _seeded(initial_body=body, initial_heading=DOWN)
        game.start()
        game.tick()
        assert game.status is Status.ENDED
        assert game.is_over()

    def test_ended_state_frozen(self):
        """Once ended, ticks and turns change nothing."""
        game = _seeded(board_size=5, initial_body=[(4, 2)])
        game.start()
        game.tick()
        frozen = game.snapshot()

        game.set_heading(UP)
        for _ in range(3):
            game.tick()

        assert game.snapshot() == frozen


class TestInvariants:
    """Randomised play invariants."""

    def test_no_duplicates_and_goal_free(self):
        """While running, the body never overlaps itself or the goal."""
        moves = np.random.default_rng(42)
        headings = [UP, DOWN, LEFT, RIGHT]

        for seed in range(5):
            game = SnakeGame(board_size=8, rng=np.random.default_rng(seed))
            game.start()
            for _ in range(300):
                if game.status is not Status.RUNNING:
                    break
                game.set_heading(headings[int(moves.integers(4))])
                game.tick()
                if game.status is Status.RUNNING:
                    assert len(set(game.body)) == len(game.body)
                    assert game.goal is None or game.goal not in game.body


class TestRendering:
    """snapshot / board / state_string tests."""

    def test_snapshot_is_detached(self, running_snake: SnakeGame):
        """Snapshots do not follow later engine changes."""
        snap = running_snake.snapshot()
        running_snake.tick()
        assert snap.body == (Position(8, 10),)
        assert snap.head == Position(8, 10)

    def test_board_encoding(self, running_snake: SnakeGame):
        board = running_snake.board()
        assert board.shape == (20, 20)
        assert board[10, 8] == 2
        goal = running_snake.goal
        assert board[goal.y, goal.x] == 3

    def test_state_string(self, running_snake: SnakeGame):
        text = running_snake.state_string()
        assert "@" in text and "*" in text
        assert "Score: 0" in text
