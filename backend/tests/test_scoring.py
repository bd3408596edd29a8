import pytest

from trivia.services.scoring import AttemptOutcome, Clue, InvalidWager
from trivia.services.scoring import clues, final_round, wagers

VALUES = [0, 200, 400, 600, 800, 1000, 2000, 3333]


def test_correct_after_decay_window_scores_zero():
    for value in VALUES:
        for elapsed in (15, 15.5, 20, 600):
            assert clues.score(value, elapsed, AttemptOutcome.CORRECT) == 0


def test_correct_instantly_scores_full_value():
    for value in VALUES:
        assert clues.score(value, 0, AttemptOutcome.CORRECT) == value


def test_incorrect_always_loses_full_value():
    for value in VALUES:
        for elapsed in (0, 3, 14.9, 15, 60):
            assert clues.score(value, elapsed, AttemptOutcome.INCORRECT) == -value


def test_skipped_is_free():
    for value in VALUES:
        for elapsed in (0, 7, 30):
            assert clues.score(value, elapsed, AttemptOutcome.SKIPPED) == 0


def test_linear_decay_is_rounded_to_integer():
    # 1000 over 15s loses 66.67 per second
    assert clues.score(1000, 1, AttemptOutcome.CORRECT) == 933
    assert clues.score(600, 7.5, AttemptOutcome.CORRECT) == 300
    assert isinstance(clues.score(1000, 1.3, AttemptOutcome.CORRECT), int)


def test_rounding_is_half_up():
    assert clues.round_half_up(2.5) == 3
    assert clues.round_half_up(0.5) == 1
    assert clues.round_half_up(2.4) == 2
    assert clues.round_half_up(-2.5) == -2


def test_points_lost_is_clamped_to_value():
    assert clues.points_lost(300, 100) == 300
    with pytest.raises(ValueError):
        clues.points_lost(300, -1)


def test_score_clue_uses_wager_for_daily_double():
    daily_double = Clue('dd', 'Go Blue', 'What is Ann Arbor?', 800, is_wager_clue=True)
    assert clues.score_clue(daily_double, 0, AttemptOutcome.CORRECT, wager=1500) == 1500
    assert clues.score_clue(daily_double, 3, AttemptOutcome.INCORRECT, wager=1500) == -1500
    with pytest.raises(ValueError):
        clues.score_clue(daily_double, 0, AttemptOutcome.CORRECT)


def test_daily_double_wager_floor_applies_below_2000():
    assert wagers.validate(2000, 500, False)
    assert not wagers.validate(2001, 500, False)
    assert wagers.validate(0, 500, False)
    assert not wagers.validate(-1, 500, False)


def test_wager_cap_is_current_score_above_floor():
    assert wagers.max_wager(5000) == 5000
    assert wagers.validate(5000, 5000, False)
    assert not wagers.validate(5001, 5000, False)


def test_final_round_cap_with_negative_score():
    assert wagers.max_wager(-800, is_final_round=True) == 2000
    assert wagers.max_wager(0, is_final_round=True) == 2000
    assert wagers.max_wager(4200, is_final_round=True) == 4200


def test_rejected_wager_reports_reason_and_raises():
    check = wagers.validate(2500, 100, True)
    assert not check.accepted
    assert check.max_wager == 2000
    assert '$2,000' in check.reason
    with pytest.raises(InvalidWager) as info:
        check.raise_for_rejection()
    assert info.value.max_wager == 2000


def test_non_integer_wagers_are_rejected():
    assert not wagers.validate(10.5, 1000, False)
    assert not wagers.validate('100', 1000, False)
    assert not wagers.validate(True, 1000, False)
    assert not wagers.validate(None, 1000, True)


def test_final_round_settlement():
    assert final_round.settle(1000, 500, 'IBM', 'What is IBM?') == 1500
    assert final_round.settle(1000, 500, 'Apple', 'What is IBM?') == 500


def test_final_round_can_go_negative():
    assert final_round.settle(300, 2000, 'Apple', 'What is IBM?') == -1700


def test_final_round_rejects_wager_before_judging():
    with pytest.raises(InvalidWager):
        final_round.settle(1000, 2001, 'IBM', 'What is IBM?')


def test_final_round_blank_answer_is_incorrect():
    outcome = final_round.resolve(1000, 400, '   ', 'What is IBM?')
    assert not outcome.correct
    assert outcome.final_score == 600
