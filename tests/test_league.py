import io

import pytest

from tddkata.poker.league import League, Player, new_league


def test_find_returns_the_matching_player():
    league = League([Player("Cleo", 10), Player("Chris", 33)])
    assert league.find("Chris") == Player("Chris", 33)


def test_find_returns_the_same_object_so_it_can_be_updated():
    league = League([Player("Cleo", 10)])
    found = league.find("Cleo")
    found.wins += 1
    assert league[0].wins == 11


def test_find_missing_player_returns_none():
    league = League([Player("Cleo", 10)])
    assert league.find("Nobody") is None


def test_new_league_parses_players():
    text = '[{"Name": "Cleo", "Wins": 10}, {"Name": "Chris", "Wins": 33}]'
    league = new_league(io.StringIO(text))
    assert list(league) == [Player("Cleo", 10), Player("Chris", 33)]
    assert league.find("Cleo") == Player("Cleo", 10)


def test_new_league_of_empty_array_is_empty():
    assert len(new_league(io.StringIO("[]"))) == 0


def test_new_league_rejects_invalid_json():
    with pytest.raises(ValueError, match="problem parsing league"):
        new_league(io.StringIO("not json"))


def test_new_league_rejects_non_array():
    with pytest.raises(ValueError, match="problem parsing league"):
        new_league(io.StringIO('{"Name": "Cleo"}'))


def test_new_league_rejects_bad_wins():
    with pytest.raises(ValueError):
        new_league(io.StringIO('[{"Name": "Cleo", "Wins": "many"}]'))