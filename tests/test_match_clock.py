from datetime import timedelta

import pytest

from winkstimer.controllers import MatchClock
from winkstimer.exceptions import IllegalStateError, UnknownColourError
from winkstimer.models import MatchSetup, Phase, WinkColour

FIVE_MINUTES = timedelta(minutes=5)


def _new_clock(fake_clock, squidge_off_winner=WinkColour.BLUE, time_limit=FIVE_MINUTES):
    return MatchClock(
        MatchSetup(time_limit=time_limit), squidge_off_winner, clock=fake_clock
    )


def _phase_fields(match):
    return (
        match.time_remaining,
        match.end_time,
        match.current_round,
        match.colour_playing,
    )


def _in_rounds(fake_clock, squidge_off_winner, colour_playing):
    match = _new_clock(fake_clock, squidge_off_winner)
    match.start()
    match.time_expired(colour_playing)
    return match


def test_new_clock_is_paused_with_full_time(fake_clock):
    match = _new_clock(fake_clock)
    assert match.phase is Phase.PAUSED
    assert match.time_remaining == FIVE_MINUTES
    assert match.end_time is None
    assert match.current_round is None
    assert match.colour_playing is None
    assert match.squidge_off_winner is WinkColour.BLUE
    assert not match.is_finished


def test_squidge_off_winner_accepts_name(fake_clock):
    match = _new_clock(fake_clock, squidge_off_winner="green")
    assert match.squidge_off_winner is WinkColour.GREEN


def test_start_sets_end_time(fake_clock):
    match = _new_clock(fake_clock)
    match.start()
    assert match.phase is Phase.MAIN_TIME
    assert match.end_time == fake_clock.now + FIVE_MINUTES
    assert match.time_remaining is None
    assert match.current_round is None
    assert match.colour_playing is None


def test_pause_banks_remaining_time(fake_clock):
    match = _new_clock(fake_clock)
    match.start()
    fake_clock.advance(minutes=1, seconds=30)
    match.pause()
    assert match.phase is Phase.PAUSED
    assert match.time_remaining == timedelta(minutes=3, seconds=30)
    assert match.end_time is None


def test_pause_then_start_keeps_time_remaining(fake_clock):
    match = _new_clock(fake_clock)
    match.start()
    fake_clock.advance(seconds=40)
    match.pause()
    banked = match.time_remaining

    match.start()
    assert match.end_time == fake_clock.now + banked
    match.pause()
    assert match.time_remaining == banked


def test_time_paused_does_not_count(fake_clock):
    match = _new_clock(fake_clock)
    match.start()
    fake_clock.advance(minutes=1)
    match.pause()
    fake_clock.advance(minutes=10)
    match.start()
    fake_clock.advance(minutes=1)
    match.pause()
    assert match.time_remaining == timedelta(minutes=3)


def test_start_twice_fails(fake_clock):
    match = _new_clock(fake_clock)
    match.start()
    end_time = match.end_time
    with pytest.raises(IllegalStateError) as excinfo:
        match.start()
    assert excinfo.value.expected is Phase.PAUSED
    assert excinfo.value.actual is Phase.MAIN_TIME
    assert "Expected Paused but currently Main time" in str(excinfo.value)
    assert match.phase is Phase.MAIN_TIME
    assert match.end_time == end_time


def test_pause_when_paused_fails(fake_clock):
    match = _new_clock(fake_clock)
    with pytest.raises(IllegalStateError) as excinfo:
        match.pause()
    assert excinfo.value.expected is Phase.MAIN_TIME
    assert excinfo.value.actual is Phase.PAUSED
    assert match.time_remaining == FIVE_MINUTES


def test_time_expired_when_paused_fails(fake_clock):
    match = _new_clock(fake_clock)
    before = match.to_dict()
    with pytest.raises(IllegalStateError):
        match.time_expired(WinkColour.RED)
    assert match.to_dict() == before


def test_shot_played_outside_rounds_fails(fake_clock):
    match = _new_clock(fake_clock)
    with pytest.raises(IllegalStateError):
        match.shot_played()
    match.start()
    with pytest.raises(IllegalStateError) as excinfo:
        match.shot_played()
    assert excinfo.value.expected is Phase.ROUNDS
    assert excinfo.value.actual is Phase.MAIN_TIME


def test_failed_operations_do_not_mutate(fake_clock):
    match = _in_rounds(fake_clock, WinkColour.BLUE, WinkColour.RED)
    before = match.to_dict()
    for operation in (match.start, match.pause):
        with pytest.raises(IllegalStateError):
            operation()
        assert match.to_dict() == before
    with pytest.raises(IllegalStateError):
        match.time_expired(WinkColour.YELLOW)
    assert match.to_dict() == before


def test_time_expired_with_other_colour(fake_clock):
    match = _in_rounds(fake_clock, WinkColour.BLUE, WinkColour.RED)
    assert match.phase is Phase.ROUNDS
    assert match.current_round == 0
    assert match.colour_playing is WinkColour.YELLOW
    assert match.time_remaining is None
    assert match.end_time is None


def test_time_expired_with_squidge_off_winner(fake_clock):
    match = _in_rounds(fake_clock, WinkColour.BLUE, WinkColour.BLUE)
    assert match.phase is Phase.ROUNDS
    assert match.current_round == 1
    assert match.colour_playing is WinkColour.GREEN


def test_time_expired_accepts_colour_name(fake_clock):
    by_name = _in_rounds(fake_clock, WinkColour.BLUE, "red")
    by_member = _in_rounds(fake_clock, WinkColour.BLUE, WinkColour.RED)
    assert by_name.to_dict() == by_member.to_dict()


def test_time_expired_with_unknown_colour_does_not_mutate(fake_clock):
    match = _new_clock(fake_clock)
    match.start()
    before = match.to_dict()
    with pytest.raises(UnknownColourError):
        match.time_expired("purple")
    assert match.phase is Phase.MAIN_TIME
    assert match.to_dict() == before


def test_rounds_scenario_blue_squidge_off(fake_clock):
    match = _in_rounds(fake_clock, WinkColour.BLUE, WinkColour.RED)

    expected_colours = [
        WinkColour.YELLOW,
        WinkColour.BLUE,
        WinkColour.GREEN,
        WinkColour.RED,
    ]
    times_blue_seen = 0
    shots = 0
    while True:
        colour = match.colour_playing
        assert colour is expected_colours[shots % 4]
        round_before = match.current_round
        match.shot_played()
        shots += 1
        if colour is WinkColour.BLUE:
            times_blue_seen += 1
            if times_blue_seen == 6:
                assert round_before == 5
                break
            assert match.current_round == round_before + 1
        else:
            assert match.current_round == round_before

    assert shots == 22
    assert match.phase is Phase.FINISHED
    assert _phase_fields(match) == (None, None, None, None)


def test_match_finishes_on_twenty_second_shot(fake_clock):
    match = _in_rounds(fake_clock, WinkColour.BLUE, WinkColour.RED)
    for _ in range(21):
        match.shot_played()
        assert match.phase is Phase.ROUNDS
    assert match.current_round == 5
    assert match.colour_playing is WinkColour.BLUE
    match.shot_played()
    assert match.is_finished


@pytest.mark.parametrize("squidge_off_winner", list(WinkColour))
def test_every_colour_gets_five_more_turns(fake_clock, squidge_off_winner):
    match = _in_rounds(fake_clock, squidge_off_winner, squidge_off_winner.next())
    turns = {colour: 0 for colour in WinkColour}
    counting = False
    while not match.is_finished:
        colour = match.colour_playing
        if colour is squidge_off_winner:
            counting = True
        if counting:
            turns[colour] += 1
        match.shot_played()

    # The squidge-off winner's last visit ends the match rather than a turn
    turns[squidge_off_winner] -= 1
    assert all(count == 5 for count in turns.values())


@pytest.mark.parametrize("prepare", ["paused", "main_time", "rounds", "finished"])
def test_game_finished_from_any_phase(fake_clock, prepare):
    match = _new_clock(fake_clock)
    if prepare in ("main_time", "rounds"):
        match.start()
    if prepare == "rounds":
        match.time_expired(WinkColour.YELLOW)
    if prepare == "finished":
        match.game_finished()

    match.game_finished()
    assert match.phase is Phase.FINISHED
    assert _phase_fields(match) == (None, None, None, None)


def test_nothing_allowed_after_finish(fake_clock):
    match = _new_clock(fake_clock)
    match.game_finished()
    for operation in (match.start, match.pause, match.shot_played):
        with pytest.raises(IllegalStateError) as excinfo:
            operation()
        assert excinfo.value.actual is Phase.FINISHED
    with pytest.raises(IllegalStateError):
        match.time_expired(WinkColour.RED)
    assert match.phase is Phase.FINISHED


def test_time_left(fake_clock):
    match = _new_clock(fake_clock)
    assert match.time_left() == FIVE_MINUTES
    match.start()
    fake_clock.advance(minutes=2)
    assert match.time_left() == timedelta(minutes=3)
    assert match.time_left(fake_clock.now + timedelta(minutes=1)) == timedelta(minutes=2)


def test_time_left_never_negative_and_does_not_expire(fake_clock):
    match = _new_clock(fake_clock)
    match.start()
    fake_clock.advance(minutes=7)
    assert match.time_left() == timedelta(0)
    assert match.phase is Phase.MAIN_TIME
    match.pause()
    assert match.time_remaining == timedelta(minutes=-2)
    assert match.time_left() == timedelta(0)


def test_time_left_outside_main_time(fake_clock):
    match = _in_rounds(fake_clock, WinkColour.BLUE, WinkColour.RED)
    assert match.time_left() is None
    match.game_finished()
    assert match.time_left() is None


def test_to_dict_uses_colour_names(fake_clock):
    match = _new_clock(fake_clock, squidge_off_winner=WinkColour.YELLOW)
    assert match.to_dict() == {
        "phase": "Paused",
        "squidge_off_winner": "yellow",
        "time_remaining": 300.0,
        "end_time": None,
        "current_round": None,
        "colour_playing": None,
    }

    match.start()
    assert match.to_dict()["end_time"] == (fake_clock.now + FIVE_MINUTES).isoformat()

    match.time_expired(WinkColour.GREEN)
    snapshot = match.to_dict()
    assert snapshot["phase"] == "In rounds"
    assert snapshot["current_round"] == 0
    assert snapshot["colour_playing"] == "red"
    assert WinkColour.from_name(snapshot["colour_playing"]) is match.colour_playing


def test_default_clock_is_timezone_aware():
    match = MatchClock(MatchSetup(), WinkColour.RED)
    match.start()
    assert match.end_time.tzinfo is not None
