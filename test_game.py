import unittest

from game import (
    Board,
    EMPTY,
    GAME_OVER,
    PLAYING,
    GameSession,
    activate_cell,
    find_connected_cluster,
    has_any_legal_move,
    new_session,
    play_out,
)


def make_session(rows, image_count=4):
    return GameSession.from_board(Board.from_rows(rows), image_count=image_count)


class TestSameGameBasics(unittest.TestCase):
    def test_top_row_pair_cleared_and_tiles_fall(self):
        session = make_session([[0, 0], [1, 1]], image_count=2)
        res = activate_cell(session, 0, 0)
        self.assertIsNotNone(res)
        self.assertEqual(session.score, 4)
        self.assertEqual(session.board.rows(), [[EMPTY, EMPTY], [1, 1]])
        self.assertEqual(session.status, PLAYING)

    def test_checkerboard_is_game_over_from_the_start(self):
        session = make_session([
            [0, 1, 2, 0],
            [1, 2, 0, 1],
            [2, 0, 1, 2],
        ], image_count=3)
        self.assertEqual(session.status, GAME_OVER)
        self.assertFalse(has_any_legal_move(session.board))

    def test_score_is_square_of_cluster_size(self):
        session = make_session([
            [3, 3, 3, 1],
            [0, 1, 0, 2],
            [2, 2, 2, 2],
        ])
        self.assertEqual(activate_cell(session, 0, 0).score_delta, 9)
        self.assertEqual(activate_cell(session, 3, 2).score_delta, 25)
        self.assertEqual(session.score, 34)

    def test_cluster_never_crosses_other_types(self):
        board = Board.from_rows([
            [1, 0, 1],
            [1, 0, 1],
            [1, 1, 1],
        ])
        cluster = find_connected_cluster(board, 0, 0)
        self.assertEqual(len(cluster), 7)
        self.assertTrue(all(board.at(x, y) == 1 for x, y in cluster))

    def test_reference_size_game_runs_to_completion(self):
        session = new_session(15, 10, 4, seed=2024)
        play_out(session)
        self.assertTrue(session.is_over)
        self.assertFalse(has_any_legal_move(session.board))


if __name__ == '__main__':
    unittest.main(verbosity=2)
