import pytest

from teamslots.scheduling.intervals import Interval, dropped_tokens, parse_day_schedule


def test_parse_multiple_tokens_in_order():
    assert parse_day_schedule("14:00-15:00;09:00-10:30") == [
        Interval(840, 900),
        Interval(540, 630),
    ]


@pytest.mark.parametrize("raw", ["", "   ", None])
def test_blank_day_has_no_intervals(raw):
    assert parse_day_schedule(raw) == []


def test_malformed_token_is_dropped_but_others_survive():
    assert parse_day_schedule("09:00-;10:00-11:00") == [Interval(600, 660)]


@pytest.mark.parametrize("raw", ["11:00-10:00", "10:00-10:00", "abc-10:00", "-10:00", "10:00"])
def test_degenerate_or_unparseable_tokens_are_dropped(raw):
    assert parse_day_schedule(raw) == []


def test_whitespace_around_sides_is_trimmed():
    assert parse_day_schedule(" 09:00 - 10:00 ; 13:00-14:00 ") == [
        Interval(540, 600),
        Interval(780, 840),
    ]


def test_duplicates_and_overlaps_are_kept():
    assert parse_day_schedule("09:00-10:00;09:00-10:00;09:30-11:00") == [
        Interval(540, 600),
        Interval(540, 600),
        Interval(570, 660),
    ]


def test_split_happens_on_first_hyphen():
    # "10:00-11:00" is not a valid end time, so the whole token is skipped. A positional
    # two-way split would have kept 09:00-10:00 here instead.
    assert parse_day_schedule("09:00-10:00-11:00") == []


def test_dropped_tokens_reports_skipped_entries():
    assert dropped_tokens("09:00-;10:00-11:00;x;") == ["09:00-", "x"]
    assert dropped_tokens("") == []


def test_interval_helpers():
    interval = Interval(540, 660)
    assert interval.duration == 120
    assert interval.contains(540, 660)
    assert not interval.contains(530, 600)
    assert interval.overlap(600, 720) == 60
    assert interval.overlap(700, 720) == 0
    assert interval.label() == "09:00-11:00"


def test_non_ascii_digits_drop_only_their_token():
    assert parse_day_schedule("²:00-10:00;11:00-12:00") == [Interval(660, 720)]
    assert dropped_tokens("²:00-10:00;11:00-12:00") == ["²:00-10:00"]
