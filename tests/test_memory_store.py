from concurrent.futures import ThreadPoolExecutor

from tddkata.poker.league import Player
from tddkata.poker.memory_store import InMemoryPlayerStore


def test_unknown_player_has_zero_score():
    assert InMemoryPlayerStore().get_player_score("Apollo") == 0


def test_recorded_wins_are_counted():
    store = InMemoryPlayerStore()
    for _ in range(3):
        store.record_win("Pepper")
    assert store.get_player_score("Pepper") == 3


def test_league_lists_every_player():
    store = InMemoryPlayerStore()
    store.record_win("Pepper")
    store.record_win("Pepper")
    store.record_win("Floyd")
    league = store.get_league()
    assert sorted(league, key=lambda p: p.name) == [Player("Floyd", 1), Player("Pepper", 2)]


def test_empty_store_has_empty_league():
    assert list(InMemoryPlayerStore().get_league()) == []


def test_concurrent_wins_are_all_recorded():
    store = InMemoryPlayerStore()
    calls = 500
    with ThreadPoolExecutor(max_workers=20) as executor:
        list(executor.map(lambda _: store.record_win("Pepper"), range(calls)))
    assert store.get_player_score("Pepper") == calls