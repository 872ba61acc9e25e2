"""
Unit tests for the maze generator.
"""

import pytest

from gridpath.algorithms import AlgorithmStep, solve
from gridpath.errors import InvalidConfigurationError, MazeGenerationError
from gridpath.grid import Point, cell_key, parse_key
from gridpath.maze import MazeGenerator, create_maze
from gridpath.maze import generator as maze_module

# Mix of odd and even dimensions
SIZES = [
    (5, 5),
    (6, 5),
    (5, 6),
    (6, 6),
    (7, 9),
    (10, 8),
    (11, 11),
    (2, 2),
    (3, 4),
    (12, 7),
    (1, 6),
    (9, 1),
]

NO_PATH = AlgorithmStep(path=(), visited=frozenset(), frontier=frozenset(), is_final=True)


class TestSolvability:
    """Test that generated mazes always connect start and end."""

    def test_hundred_seeds_corner_to_corner(self):
        """Every maze should leave start/end open and connected."""
        for seed in range(100):
            width, height = SIZES[seed % len(SIZES)]
            start, end = Point(0, 0), Point(width - 1, height - 1)

            walls = create_maze(width, height, start, end, seed=seed)

            assert cell_key(start) not in walls
            assert cell_key(end) not in walls
            final = solve("bfs", start, end, width, height, walls)
            assert final.connects(start, end), f"seed {seed}, {width}x{height}"
            assert final.length >= 1

    def test_arbitrary_endpoints(self):
        """Off-lattice and interior endpoints should also be connected."""
        cases = [
            (8, 8, Point(1, 1), Point(6, 3)),
            (9, 7, Point(4, 3), Point(0, 6)),
            (10, 10, Point(0, 9), Point(9, 0)),
            (7, 7, Point(0, 0), Point(2, 0)),
            (6, 4, Point(5, 0), Point(0, 3)),
            (5, 5, Point(1, 1), Point(0, 0)),
            (10, 10, Point(1, 1), Point(0, 0)),
            (8, 6, Point(3, 1), Point(7, 4)),
        ]
        for seed in range(20):
            for width, height, start, end in cases:
                walls = create_maze(width, height, start, end, seed=seed)
                assert cell_key(start) not in walls
                assert cell_key(end) not in walls
                assert solve("dijkstra", start, end, width, height, walls).connects(start, end)

    @pytest.mark.parametrize("width,height", [(3, 3), (5, 5), (10, 10), (21, 15)])
    def test_off_lattice_end_solved_first_time(self, width, height):
        """An end off start's carve lattice should be wired in without retries."""
        start, end = Point(1, 1), Point(0, 0)
        for seed in range(10):
            generator = MazeGenerator(width, height, start, end, seed=seed)
            walls = generator.generate()
            assert generator.attempts == 1
            assert cell_key(end) not in walls
            final = solve("bfs", start, end, width, height, walls)
            assert final.connects(start, end)

    def test_off_lattice_end_connector(self):
        """The connector should step toward start one axis at a time onto the lattice."""
        generator = MazeGenerator(9, 9, Point(1, 1), Point(6, 4))
        assert generator._end_connector() == [Point(6, 4), Point(5, 4), Point(5, 3)]

        on_lattice = MazeGenerator(9, 9, Point(0, 0), Point(4, 6))
        assert on_lattice._end_connector() == [Point(4, 6)]

    def test_walls_within_bounds(self):
        """All wall keys should decode to cells of the requested grid."""
        walls = create_maze(10, 8, Point(0, 0), Point(9, 7), seed=3)
        for key in walls:
            p = parse_key(key)
            assert 0 <= p.x < 10
            assert 0 <= p.y < 8


class TestStructure:
    """Test the shape of the carved maze."""

    @pytest.mark.parametrize("seed", range(10))
    def test_odd_grid_is_spanning_tree(self, seed):
        """On an odd grid the carve should open 2L - 1 cells for L lattice cells."""
        walls = create_maze(7, 5, Point(0, 0), Point(6, 4), seed=seed)
        lattice = 4 * 3
        open_cells = 7 * 5 - len(walls)
        assert open_cells == 2 * lattice - 1

    @pytest.mark.parametrize("seed", range(10))
    def test_odd_odd_cells_are_walls(self, seed):
        """Cells off the carve lattice in both axes should stay walls."""
        walls = create_maze(9, 9, Point(0, 0), Point(8, 8), seed=seed)
        for x in range(1, 9, 2):
            for y in range(1, 9, 2):
                assert cell_key(x, y) in walls

    def test_lattice_cells_are_open(self):
        """Every stride-2 lattice cell should be carved on an odd grid."""
        walls = create_maze(9, 7, Point(0, 0), Point(8, 6), seed=11)
        for x in range(0, 9, 2):
            for y in range(0, 7, 2):
                assert cell_key(x, y) not in walls


class TestReproducibility:
    """Test seeded randomness."""

    def test_same_seed_same_maze(self):
        """A seed should always give the same maze."""
        a = create_maze(15, 11, Point(0, 0), Point(14, 10), seed=42)
        b = create_maze(15, 11, Point(0, 0), Point(14, 10), seed=42)
        assert a == b

    def test_different_seeds_differ(self):
        """Different seeds should not all give the same maze."""
        mazes = {create_maze(15, 11, Point(0, 0), Point(14, 10), seed=s) for s in range(5)}
        assert len(mazes) > 1

    def test_returns_frozenset_of_keys(self):
        """The result should be an immutable set of cell keys."""
        walls = create_maze(5, 5, Point(0, 0), Point(4, 4), seed=0)
        assert isinstance(walls, frozenset)
        assert all(isinstance(k, str) for k in walls)


class TestRetries:
    """Test the bounded solvability repair loop."""

    def test_gives_up_after_max_attempts(self, monkeypatch):
        """An always-unsolvable check should raise after exactly max_attempts."""
        calls = []

        def never_solvable(*args, **kwargs):
            calls.append(args)
            return NO_PATH

        monkeypatch.setattr(maze_module, "solve", never_solvable)

        generator = MazeGenerator(7, 7, Point(0, 0), Point(6, 6), seed=1, max_attempts=3)
        with pytest.raises(MazeGenerationError) as exc_info:
            generator.generate()

        assert exc_info.value.attempts == 3
        assert len(calls) == 3
        assert "3 attempts" in str(exc_info.value)

    def test_recovers_after_failed_attempts(self, monkeypatch):
        """A maze rejected twice should be regenerated and accepted on the third try."""
        real_solve = maze_module.solve
        calls = []

        def flaky(*args, **kwargs):
            calls.append(args)
            if len(calls) <= 2:
                return NO_PATH
            return real_solve(*args, **kwargs)

        monkeypatch.setattr(maze_module, "solve", flaky)

        generator = MazeGenerator(7, 7, Point(0, 0), Point(6, 6), seed=1, max_attempts=5)
        walls = generator.generate()

        assert generator.attempts == 3
        assert solve("bfs", Point(0, 0), Point(6, 6), 7, 7, walls).connects(Point(0, 0), Point(6, 6))

    def test_error_is_runtime_error(self):
        """MazeGenerationError should be catchable as RuntimeError."""
        assert issubclass(MazeGenerationError, RuntimeError)


class TestValidation:
    """Test invalid generator configurations."""

    def test_start_equals_end(self):
        """Identical start and end should be rejected."""
        with pytest.raises(InvalidConfigurationError):
            create_maze(5, 5, Point(2, 2), Point(2, 2))

    def test_out_of_bounds(self):
        """Endpoints outside the grid should be rejected."""
        with pytest.raises(InvalidConfigurationError):
            create_maze(5, 5, Point(0, 0), Point(5, 5))

    def test_non_positive_dimensions(self):
        """Zero dimensions should be rejected."""
        with pytest.raises(InvalidConfigurationError):
            create_maze(0, 5, Point(0, 0), Point(0, 1))

    def test_zero_attempts(self):
        """max_attempts below 1 should be rejected."""
        with pytest.raises(InvalidConfigurationError):
            MazeGenerator(5, 5, Point(0, 0), Point(4, 4), max_attempts=0)

    def test_unknown_solver(self):
        """An unknown solver name should raise ValueError."""
        with pytest.raises(ValueError, match="Available"):
            MazeGenerator(5, 5, Point(0, 0), Point(4, 4), solver="nope")
