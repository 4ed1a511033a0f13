import unittest

from game import (
    Board,
    Move,
    Score,
    WIN,
    all_moves,
    column_moves,
    is_legal_move,
    is_solved,
    legal_moves,
    rank,
    sample_board,
)


class TestMoveGeneration(unittest.TestCase):
    def test_given_two_stacks_when_listing_moves_then_canonical_order(self):
        board = sample_board('two-stacks')
        self.assertEqual(
            legal_moves(board),
            [Move(0, 2), Move(0, 3), Move(0, 4), Move(1, 2), Move(1, 3), Move(1, 4)],
        )

    def test_given_empty_column_when_listing_column_moves_then_nothing(self):
        board = Board.new(3, [[], [1], []])
        self.assertEqual(list(column_moves(board, 0)), [])
        self.assertEqual(list(column_moves(board, 1)), [Move(1, 0), Move(1, 2)])

    def test_given_solved_full_board_when_listing_moves_then_empty(self):
        board = Board.new(2, [[1, 1], [2, 2], [3, 3]])
        self.assertEqual(list(all_moves(board)), [])

    def test_given_matching_tops_when_listing_moves_then_only_compatible_destinations(self):
        board = Board.new(3, [[1, 2], [2], [1], [2, 2, 2]])
        # column 3 is full, column 2 has the wrong top
        self.assertEqual(list(column_moves(board, 0)), [Move(0, 1)])

    def test_given_move_when_checking_legality_then_indices_validated(self):
        board = Board.new(2, [[1], []])
        self.assertTrue(is_legal_move(board, Move(0, 1)))
        self.assertFalse(is_legal_move(board, Move(0, 5)))
        self.assertFalse(is_legal_move(board, Move(-1, 0)))
        self.assertFalse(is_legal_move(board, Move(1, 0)))


class TestScore(unittest.TestCase):
    def test_given_scores_when_comparing_then_win_dominates(self):
        self.assertGreater(WIN, Score.of(10 ** 9))
        self.assertLess(Score.of(3), Score.of(4))
        self.assertEqual(WIN, Score(win=True))
        self.assertEqual(max([Score.of(7), WIN, Score.of(9)]), WIN)
        self.assertEqual(str(WIN), 'Win')
        self.assertEqual(str(Score.of(12)), '12')

    def test_given_two_stacks_when_ranking_then_mobility_plus_empty_bonus(self):
        # 6 legal moves + 3 empty columns * 10 * 5 columns
        self.assertEqual(rank(sample_board('two-stacks')), Score.of(156))

    def test_given_complete_monochrome_column_when_ranking_then_full_bonus(self):
        board = Board.new(4, [[1, 1, 1, 1], [2, 3]])
        # no legal moves; 1000 * 2 columns for the collected color
        self.assertEqual(rank(board), Score.of(2000))

    def test_given_partial_monochrome_column_when_ranking_then_lesser_bonus(self):
        board = Board.new(4, [[1, 1, 1, 1], [2, 1], [3, 1]])
        self.assertEqual(board.colors_count[1], 6)
        # moves: col0 -> 1, 2 (2), col1 -> 2 (1), col2 -> 1 (1); 100 * 3 for col0
        self.assertEqual(rank(board), Score.of(304))

    def test_given_mixed_partial_and_complete_when_ranking_then_sum_of_terms(self):
        board = Board.new(2, [[1, 1], [2], [2]])
        self.assertEqual(rank(board), Score.of(3000 + 300 + 1 + 300 + 1))
        self.assertFalse(is_solved(board))

    def test_given_empty_or_complete_columns_when_ranking_then_win(self):
        self.assertEqual(rank(Board.new(2, [[1, 1], [], [2, 2]])), WIN)
        self.assertEqual(rank(Board.new(3, [[], []])), WIN)
        self.assertTrue(is_solved(Board.new(4, [[5, 5, 5], []])))

    def test_given_color_split_across_columns_when_ranking_then_not_win(self):
        board = Board.new(4, [[1, 1], [1, 1], []])
        score = rank(board)
        self.assertNotEqual(score, WIN)
        self.assertFalse(score.win)

    def test_given_more_completed_columns_when_ranking_then_outranks_more_mobility(self):
        done = Board.new(4, [[1, 1], [], [2, 3], [3, 2], []])
        mobile = Board.new(4, [[1], [1], [2, 3], [3, 2], []])
        self.assertEqual(rank(done), Score.of(5106))
        self.assertEqual(rank(mobile), Score.of(1056))
        self.assertGreater(rank(done), rank(mobile))

    def test_given_color_missing_from_counts_when_ranking_then_runtime_error(self):
        board = Board(column_size=2, columns=[[5]], colors_count={})
        with self.assertRaises(RuntimeError):
            rank(board)


if __name__ == '__main__':
    unittest.main(verbosity=2)
