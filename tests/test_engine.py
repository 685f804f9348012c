import unittest
from collections import Counter

from game import (
    AlreadyRevealed,
    CellStatus,
    CoordinateOverflow,
    Engine,
    OddBoardCells,
    Phase,
    UnparsableInput,
    fixed_order,
    pairs,
    seeded_shuffle,
)


def start(width=4, height=4, shuffle=fixed_order):
    """Engine in the guess phase. With fixed_order, (x, y) pairs with (x, y + height/2)."""
    engine = Engine(shuffle=shuffle, debug=False)
    engine.advance('\n')
    engine.advance(f'{width},{height}\n')
    assert engine.phase is Phase.GUESS
    return engine


class TestEngineSetup(unittest.TestCase):
    def test_given_new_engine_when_created_then_welcome_with_empty_board(self):
        engine = Engine(debug=False)
        self.assertIs(engine.phase, Phase.WELCOME)
        self.assertTrue(engine.is_running())
        self.assertEqual(len(engine.board), 0)
        self.assertIsNone(engine.error)
        self.assertEqual(engine.revealed, ())

    def test_given_welcome_when_any_input_then_set_dimensions(self):
        engine = Engine(debug=False)
        self.assertIs(engine.advance('whatever'), Phase.SET_DIMENSIONS)
        self.assertIsNone(engine.error)

    def test_given_bad_dimensions_when_advancing_then_error_recorded_and_phase_kept(self):
        engine = Engine(shuffle=fixed_order, debug=False)
        engine.advance()
        self.assertIs(engine.advance('3,3'), Phase.SET_DIMENSIONS)
        self.assertEqual(engine.error, OddBoardCells())
        self.assertEqual(engine.last_input, '3,3')
        # Next input clears the old error
        self.assertIs(engine.advance('2,2'), Phase.GUESS)
        self.assertIsNone(engine.error)

    def test_given_huge_dimensions_when_advancing_then_unparsable_and_phase_kept(self):
        engine = Engine(shuffle=fixed_order, debug=False)
        engine.advance()
        for line in ['9' * 5000 + ',2', '3000000000,2', '2,-2147483649']:
            self.assertIs(engine.advance(line), Phase.SET_DIMENSIONS)
            self.assertEqual(engine.error, UnparsableInput())
        self.assertEqual(len(engine.board), 0)

    def test_given_valid_dimensions_when_advancing_then_board_dealt(self):
        engine = start(3, 2, seeded_shuffle(5))
        board = engine.board
        self.assertEqual((board.width, board.height), (3, 2))
        self.assertTrue(all(n == 2 for n in Counter(board.cards).values()))
        self.assertEqual(engine.correct_pairs, 0)
        self.assertEqual(engine.guesses, 0)
        self.assertFalse(any(engine.is_discovered(c) for c in board.indexer.coords()))


class TestEngineGuessing(unittest.TestCase):
    def test_given_bad_coords_when_guessing_then_error_and_still_guessing(self):
        engine = start()
        self.assertIs(engine.advance('5,1'), Phase.GUESS)
        self.assertEqual(engine.error, CoordinateOverflow('x', 4))
        self.assertIs(engine.advance('hello'), Phase.GUESS)
        self.assertEqual(engine.error, UnparsableInput())
        self.assertEqual(engine.revealed, ())

    def test_given_huge_numbers_when_guessing_then_unparsable_and_still_guessing(self):
        engine = start()
        engine.advance('1,1')
        for line in ['1,' + '9' * 5000, '3000000000,1']:
            self.assertIs(engine.advance(line), Phase.GUESS)
            self.assertEqual(engine.error, UnparsableInput())
        self.assertEqual(engine.revealed, ((0, 0),))

    def test_given_first_pick_when_guessing_then_revealed_and_awaits_second(self):
        engine = start()
        self.assertIs(engine.advance('2,1'), Phase.GUESS)
        self.assertEqual(engine.revealed, ((1, 0),))
        self.assertTrue(engine.is_revealed((1, 0)))

    def test_given_same_cell_twice_when_guessing_then_already_revealed(self):
        engine = start()
        engine.advance('2,1')
        self.assertIs(engine.advance('2, 1'), Phase.GUESS)
        self.assertEqual(engine.error, AlreadyRevealed(2, 1))
        self.assertEqual(engine.revealed, ((1, 0),))

    def test_given_matching_pair_when_guessing_then_correct_confirm_then_discovered(self):
        engine = start()
        engine.advance('1,1')
        self.assertIs(engine.advance('1,3'), Phase.CORRECT_GUESS_CONFIRM)
        self.assertEqual(engine.revealed, ((0, 0), (0, 2)))
        self.assertEqual(engine.guesses, 0)

        self.assertIs(engine.advance(), Phase.GUESS)
        self.assertTrue(engine.is_discovered((0, 0)))
        self.assertTrue(engine.is_discovered((0, 2)))
        self.assertEqual(engine.guesses, 1)
        self.assertEqual(engine.correct_pairs, 1)
        self.assertEqual(engine.revealed, ())

    def test_given_discovered_cell_when_picking_again_then_already_revealed(self):
        engine = start()
        engine.advance('1,1')
        engine.advance('1,3')
        engine.advance()
        self.assertIs(engine.advance('1,3'), Phase.GUESS)
        self.assertEqual(engine.error, AlreadyRevealed(1, 3))

    def test_given_mismatch_when_guessing_then_incorrect_confirm_then_cells_reusable(self):
        engine = start()
        engine.advance('1,1')
        self.assertIs(engine.advance('2,1'), Phase.INCORRECT_GUESS_CONFIRM)
        self.assertIs(engine.advance('ignored'), Phase.GUESS)
        self.assertIsNone(engine.error)
        self.assertEqual(engine.guesses, 1)
        self.assertEqual(engine.correct_pairs, 0)
        self.assertFalse(engine.is_discovered((0, 0)))
        self.assertFalse(engine.is_discovered((1, 0)))
        # Both cells can be picked again
        self.assertIs(engine.advance('1,1'), Phase.GUESS)
        self.assertIsNone(engine.error)
        self.assertIs(engine.advance('2,1'), Phase.INCORRECT_GUESS_CONFIRM)

    def test_given_last_pair_when_confirmed_then_victory(self):
        engine = start(2, 2)
        engine.advance('1,1')
        engine.advance('1,2')
        self.assertIs(engine.advance(), Phase.GUESS)
        engine.advance('2,1')
        self.assertIs(engine.advance('2,2'), Phase.CORRECT_GUESS_CONFIRM)
        self.assertIs(engine.advance(), Phase.VICTORY)
        self.assertTrue(engine.all_discovered())
        self.assertEqual(engine.guesses, 2)
        self.assertEqual(engine.correct_pairs, 2)

    def test_given_random_board_when_playing_every_pair_then_victory_after_all_turns(self):
        engine = start(6, 4, seeded_shuffle(99))
        layout = pairs(engine.board)
        for (a, b) in layout.values():
            engine.advance(f'{a[0] + 1},{a[1] + 1}')
            self.assertIs(engine.advance(f'{b[0] + 1};{b[1] + 1}'), Phase.CORRECT_GUESS_CONFIRM)
            engine.advance()
        self.assertIs(engine.phase, Phase.VICTORY)
        self.assertEqual(engine.guesses, 12)


class TestEngineVictory(unittest.TestCase):
    def _won(self):
        engine = start(1, 2)
        engine.advance('1,1')
        engine.advance('1,2')
        engine.advance()
        assert engine.phase is Phase.VICTORY
        return engine

    def test_given_victory_when_unclear_answer_then_error_and_stay(self):
        engine = self._won()
        self.assertIs(engine.advance('maybe'), Phase.VICTORY)
        self.assertEqual(engine.error, UnparsableInput())

    def test_given_victory_when_yes_then_new_board_and_guesses_carry_over(self):
        engine = self._won()
        self.assertEqual(engine.guesses, 1)
        self.assertIs(engine.advance('Y'), Phase.SET_DIMENSIONS)
        self.assertIs(engine.advance('2,2'), Phase.GUESS)
        self.assertEqual(len(engine.board), 4)
        self.assertEqual(engine.correct_pairs, 0)
        self.assertEqual(engine.guesses, 1)
        engine.advance('1,1')
        engine.advance('2,1')
        engine.advance()
        self.assertEqual(engine.guesses, 2)
        self.assertFalse(engine.all_discovered())

    def test_given_victory_when_blank_answer_then_exit_and_exit_is_terminal(self):
        engine = self._won()
        self.assertIs(engine.advance('\n'), Phase.EXIT)
        self.assertFalse(engine.is_running())
        self.assertIs(engine.advance('y'), Phase.EXIT)
        self.assertIsNone(engine.error)


class TestEngineView(unittest.TestCase):
    def test_given_welcome_when_viewing_then_no_board_and_no_prompt(self):
        view = Engine(debug=False).view()
        self.assertIs(view.phase, Phase.WELCOME)
        self.assertEqual(view.cells, ())
        self.assertFalse(view.prompt)
        self.assertTrue(view.running)

    def test_given_mid_turn_when_viewing_then_cells_reflect_visibility(self):
        engine = start(2, 2)
        engine.advance('1,1')
        engine.advance('1,2')
        engine.advance()
        engine.advance('2,1')
        engine.advance('9,9')
        view = engine.view()
        self.assertTrue(view.prompt)
        self.assertEqual(view.error, 'x coordinate too large. Maximum possible value is 2.')
        self.assertEqual(view.cell((0, 0)).status, CellStatus.DISCOVERED)
        self.assertEqual(view.cell((0, 1)).status, CellStatus.DISCOVERED)
        self.assertEqual(view.cell((1, 0)).status, CellStatus.REVEALED)
        self.assertEqual(view.cell((1, 0)).card, engine.board.at((1, 0)))
        self.assertEqual(view.cell((1, 1)).status, CellStatus.HIDDEN)
        self.assertIsNone(view.cell((1, 1)).card)
        self.assertEqual((view.guesses, view.correct_pairs), (1, 1))

    def test_given_view_when_engine_advances_then_snapshot_unchanged(self):
        engine = start(2, 2)
        view = engine.view()
        engine.advance('1,1')
        self.assertEqual(view.cell((0, 0)).status, CellStatus.HIDDEN)
        self.assertEqual(engine.view().cell((0, 0)).status, CellStatus.REVEALED)


class TestEndToEnd(unittest.TestCase):
    def test_given_two_by_two_game_when_matched_and_declined_then_exit(self):
        engine = Engine(shuffle=seeded_shuffle(2024), debug=False)
        self.assertIs(engine.phase, Phase.WELCOME)
        self.assertIs(engine.advance('go'), Phase.SET_DIMENSIONS)
        self.assertIs(engine.advance('2,2'), Phase.GUESS)
        counts = Counter(engine.board.cards)
        self.assertEqual(len(counts), 2)
        self.assertEqual(set(counts.values()), {2})

        (a, b), (c, d) = pairs(engine.board).values()
        engine.advance(f'{a[0] + 1},{a[1] + 1}')
        self.assertIs(engine.advance(f'{b[0] + 1},{b[1] + 1}'), Phase.CORRECT_GUESS_CONFIRM)
        self.assertIs(engine.advance(), Phase.GUESS)
        engine.advance(f'{c[0] + 1},{c[1] + 1}')
        self.assertIs(engine.advance(f'{d[0] + 1},{d[1] + 1}'), Phase.CORRECT_GUESS_CONFIRM)
        self.assertIs(engine.advance(), Phase.VICTORY)
        self.assertIs(engine.advance('n'), Phase.EXIT)
        self.assertFalse(engine.is_running())


if __name__ == '__main__':
    unittest.main(verbosity=2)
