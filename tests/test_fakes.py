import io
from datetime import timedelta

from tddkata.poker.fakes import (
    ScheduledAlert,
    SpyBlindAlerter,
    StubPlayerStore,
    assert_player_win,
)
from tddkata.poker.league import Player


def test_stub_store_returns_fixed_scores():
    store = StubPlayerStore(scores={"Pepper": 20, "Floyd": 10})
    assert store.get_player_score("Pepper") == 20
    assert store.get_player_score("Floyd") == 10
    assert store.get_player_score("Apollo") == 0


def test_stub_store_records_win_calls():
    store = StubPlayerStore()
    store.record_win("Pepper")
    store.record_win("Floyd")
    assert store.win_calls == ["Pepper", "Floyd"]


def test_stub_store_returns_fixed_league():
    wanted = [Player("Cleo", 32), Player("Chris", 20)]
    store = StubPlayerStore(league=wanted)
    assert list(store.get_league()) == wanted
    assert store.get_league().find("Chris") == Player("Chris", 20)


def test_assert_player_win_passes_for_single_matching_win():
    store = StubPlayerStore(win_calls=["Ruth"])
    assert_player_win(store, "Ruth")
    assert store.win_calls == ["Ruth"]


def test_spy_blind_alerter_records_alerts_in_order():
    spy = SpyBlindAlerter()
    spy.schedule_alert_at(timedelta(0), 100, io.StringIO())
    spy.schedule_alert_at(timedelta(minutes=10), 200, io.StringIO())
    assert spy.alerts == [
        ScheduledAlert(timedelta(0), 100),
        ScheduledAlert(timedelta(minutes=10), 200),
    ]


def test_scheduled_alert_string_form():
    assert str(ScheduledAlert(timedelta(0), 100)) == "100 chips at 0s"
    assert str(ScheduledAlert(timedelta(minutes=10), 200)) == "200 chips at 10m0s"


def test_scheduled_alert_string_mentions_amount():
    assert str(ScheduledAlert(timedelta(minutes=100), 8000)).startswith("8000 chips at ")