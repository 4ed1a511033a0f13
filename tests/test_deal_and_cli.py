import io
import unittest
from contextlib import redirect_stdout, redirect_stderr

from game import SAMPLE_LAYOUTS, deal_layout, deal_board, parse_layout, sample_board
from colorsort_core.cli import main as cli_main


class TestDeal(unittest.TestCase):
    def test_given_seed_when_dealing_then_deterministic_and_balanced(self):
        size1, cols1 = deal_layout(4, 4, 2, seed=42)
        size2, cols2 = deal_layout(4, 4, 2, seed=42)
        self.assertEqual((size1, cols1), (size2, cols2))
        self.assertEqual(len(cols1), 6)
        self.assertEqual(cols1[-2:], [[], []])
        board = deal_board(4, 4, 2, seed=42)
        self.assertEqual(board.colors_count, {1: 4, 2: 4, 3: 4, 4: 4})
        for col in board.columns[:4]:
            self.assertEqual(len(col), 4)

    def test_given_bad_counts_when_dealing_then_raises(self):
        with self.assertRaises(ValueError):
            deal_layout(0, 4)
        with self.assertRaises(ValueError):
            deal_layout(3, 0)
        with self.assertRaises(ValueError):
            deal_layout(3, 3, -1)

    def test_given_samples_when_building_then_counts_consistent(self):
        for name, (size, _) in SAMPLE_LAYOUTS.items():
            with self.subTest(name=name):
                board = sample_board(name)
                self.assertEqual(board.column_size, size)
                self.assertEqual(board.color_totals(), board.colors_count)
        with self.assertRaises(ValueError):
            sample_board('missing')

    def test_given_text_when_parsing_layout_then_columns_bottom_first(self):
        self.assertEqual(parse_layout("1 2 3 4 | 1,2,3,4 | |"), [[1, 2, 3, 4], [1, 2, 3, 4], [], []])
        self.assertEqual(parse_layout("7"), [[7]])
        with self.assertRaises(ValueError):
            parse_layout("1 x|2")


class TestCli(unittest.TestCase):
    def _run(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = cli_main(argv)
        return code, out.getvalue()

    def test_given_sample_when_running_cli_then_snapshots_and_solved(self):
        code, text = self._run(['--sample', 'two-stacks', '--depth', '3', '--iterations', '20'])
        self.assertEqual(code, 0)
        self.assertIn('Initial state:', text)
        self.assertIn('Move 0 -> 2', text)
        self.assertIn('Solved in', text)

    def test_given_quiet_layout_when_running_cli_then_move_list_only(self):
        code, text = self._run(['--layout', '1|1|', '--size', '2', '--depth', '2', '--quiet'])
        self.assertEqual(code, 0)
        self.assertTrue(text.startswith('0->1'))
        self.assertNotIn('Initial state:', text)

    def test_given_unsolvable_budget_when_running_cli_then_exit_one(self):
        code, text = self._run(['--sample', 'classic', '--depth', '1', '--iterations', '1', '--quiet'])
        self.assertEqual(code, 1)
        self.assertIn('Not solved after 1 cycles', text)

    def test_given_bad_layout_when_running_cli_then_usage_error(self):
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            cli_main(['--layout', '1 a|2'])
        self.assertEqual(ctx.exception.code, 2)

    def test_given_zero_depth_when_running_cli_then_usage_error(self):
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            cli_main(['--sample', 'two-stacks', '--depth', '0'])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == '__main__':
    unittest.main(verbosity=2)
