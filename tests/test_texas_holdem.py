import io
from datetime import timedelta

from tddkata.poker.fakes import (
    ScheduledAlert,
    SpyBlindAlerter,
    StubPlayerStore,
    assert_player_win,
)
from tddkata.poker.texas_holdem import TexasHoldem


def check_scheduling_cases(cases, blind_alerter):
    assert len(blind_alerter.alerts) >= len(cases)
    for got, want in zip(blind_alerter.alerts, cases):
        assert got == want


def test_schedules_alerts_for_5_players():
    blind_alerter = SpyBlindAlerter()
    game = TexasHoldem(blind_alerter, StubPlayerStore())

    game.start(5, io.StringIO())

    cases = [
        ScheduledAlert(timedelta(seconds=0), 100),
        ScheduledAlert(timedelta(minutes=10), 200),
        ScheduledAlert(timedelta(minutes=20), 300),
        ScheduledAlert(timedelta(minutes=30), 400),
        ScheduledAlert(timedelta(minutes=40), 500),
        ScheduledAlert(timedelta(minutes=50), 600),
        ScheduledAlert(timedelta(minutes=60), 800),
        ScheduledAlert(timedelta(minutes=70), 1000),
        ScheduledAlert(timedelta(minutes=80), 2000),
        ScheduledAlert(timedelta(minutes=90), 4000),
        ScheduledAlert(timedelta(minutes=100), 8000),
    ]
    check_scheduling_cases(cases, blind_alerter)
    assert len(blind_alerter.alerts) == len(cases)


def test_schedules_alerts_for_7_players():
    blind_alerter = SpyBlindAlerter()
    game = TexasHoldem(blind_alerter, StubPlayerStore())

    game.start(7, io.StringIO())

    cases = [
        ScheduledAlert(timedelta(seconds=0), 100),
        ScheduledAlert(timedelta(minutes=12), 200),
        ScheduledAlert(timedelta(minutes=24), 300),
        ScheduledAlert(timedelta(minutes=36), 400),
    ]
    check_scheduling_cases(cases, blind_alerter)


def test_finish_records_winner():
    store = StubPlayerStore()
    game = TexasHoldem(SpyBlindAlerter(), store)

    game.finish("Ruth")

    assert_player_win(store, "Ruth")
    assert store.win_calls == ["Ruth"]


def test_finish_twice_records_two_wins():
    store = StubPlayerStore()
    game = TexasHoldem(SpyBlindAlerter(), store)
    game.finish("Ruth")
    game.finish("Cleo")
    assert store.win_calls == ["Ruth", "Cleo"]