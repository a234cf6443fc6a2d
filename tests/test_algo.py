import unittest
import random
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from perfect_maze.core.builder import build
from perfect_maze.core.grid import Grid
from perfect_maze.core.analysis import count_passages, is_connected, is_perfect
from perfect_maze.algo.dfs import RecursiveBacktracker, carve

def wall_snapshot(grid):
    return [[list(c.walls) for c in row] for row in grid.cells]

class TestGenerators(unittest.TestCase):
    def test_dfs_coverage(self):
        w, h = 20, 20
        grid = build(w, h)
        algo = RecursiveBacktracker(grid, seed=42)
        algo.run_all()

        visited_count = sum(1 for row in grid.cells for c in row if c.visited)
        self.assertEqual(visited_count, w * h, "DFS should visit every cell")
        self.assertEqual(algo.step_count, w * h - 1)

    def test_spanning_tree_all_sizes(self):
        rng = random.Random(7)
        for w in range(1, 7):
            for h in range(1, 7):
                grid = build(w, h)
                carve(grid, rng)
                self.assertEqual(count_passages(grid), w * h - 1, f"{w}x{h}")
                self.assertTrue(is_connected(grid), f"{w}x{h}")
                self.assertTrue(is_perfect(grid), f"{w}x{h}")

    def test_boundary_openings_survive(self):
        grid = build(8, 5)
        carve(grid, random.Random(1))
        self.assertFalse(grid.has_wall(0, 0, Grid.NORTH))
        self.assertFalse(grid.has_wall(7, 4, Grid.SOUTH))
        # No other outer wall is opened
        for x in range(8):
            self.assertTrue(grid.has_wall(x, 4, Grid.SOUTH) or x == 7)
            self.assertTrue(grid.has_wall(x, 0, Grid.NORTH) or x == 0)
        for y in range(5):
            self.assertTrue(grid.has_wall(0, y, Grid.WEST))
            self.assertTrue(grid.has_wall(7, y, Grid.EAST))

    def test_walls_removed_in_pairs(self):
        grid = build(12, 9)
        carve(grid, random.Random(3))
        for y in range(grid.height):
            for x in range(grid.width):
                for nx, ny, direction in grid.get_neighbors(x, y):
                    self.assertEqual(
                        grid.has_wall(x, y, direction),
                        grid.has_wall(nx, ny, Grid.OPPOSITE[direction]),
                    )

    def test_two_by_one_has_single_spanning_tree(self):
        grid = build(2, 1)
        carve(grid, random.Random())
        self.assertFalse(grid.has_wall(0, 0, Grid.EAST))
        self.assertFalse(grid.has_wall(1, 0, Grid.WEST))

    def test_single_cell(self):
        grid = build(1, 1)
        carve(grid, random.Random(0))
        self.assertEqual(grid.cells[0][0].walls, [False, True, False, True])

    def test_empty_grid_is_noop(self):
        grid = Grid(0, 0)
        algo = RecursiveBacktracker(grid, seed=1)
        self.assertEqual(list(algo.run()), ["Done"])
        RecursiveBacktracker(Grid(0, 4), seed=1).run_all()

    def test_progress_updates(self):
        grid = build(30, 30)
        updates = list(RecursiveBacktracker(grid, seed=5).run())
        self.assertEqual(updates[-1], "Done")
        self.assertGreater(len(updates), 1)

    def test_determinism(self):
        w, h = 10, 10
        grid1 = build(w, h)
        RecursiveBacktracker(grid1, seed=12345).run_all()

        grid2 = build(w, h)
        rec = RecursiveBacktracker(grid2, seed=12345)
        for _ in rec.run(): pass

        self.assertEqual(wall_snapshot(grid1), wall_snapshot(grid2))

    def test_injected_rng_determinism(self):
        grid1 = build(15, 11)
        carve(grid1, random.Random(99))
        grid2 = build(15, 11)
        carve(grid2, random.Random(99))
        self.assertTrue((grid1.to_array() == grid2.to_array()).all())

    def test_injected_rng_overrides_seed(self):
        grid1 = build(10, 10)
        RecursiveBacktracker(grid1, seed=1, rng=random.Random(2)).run_all()
        grid2 = build(10, 10)
        RecursiveBacktracker(grid2, seed=2).run_all()
        self.assertEqual(wall_snapshot(grid1), wall_snapshot(grid2))

if __name__ == '__main__':
    unittest.main()
