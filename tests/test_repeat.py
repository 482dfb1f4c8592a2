from tddkata.repeat import repeat


def test_repeat():
    assert repeat("a", 5) == "aaaaa"


def test_repeat_zero_times():
    assert repeat("a", 0) == ""


def test_repeat_negative_times():
    assert repeat("ab", -3) == ""