import pytest

from tddkata.transactions import (
    Account,
    Person,
    Transaction,
    find,
    new_balance_for,
    new_transaction,
)

RIYA = Account(name="Riya", balance=100)
CHRIS = Account(name="Chris", balance=75)
ADIL = Account(name="Adil", balance=200)
TRANSACTIONS = [
    new_transaction(CHRIS, RIYA, 100),
    new_transaction(ADIL, CHRIS, 25),
]


def test_new_transaction_records_names():
    assert new_transaction(CHRIS, RIYA, 100) == Transaction("Chris", "Riya", 100)


@pytest.mark.parametrize(
    "account, expected",
    [(RIYA, 200), (CHRIS, 0), (ADIL, 175)],
)
def test_bad_bank(account, expected):
    assert new_balance_for(account, TRANSACTIONS).balance == expected


def test_new_balance_keeps_original_account_unchanged():
    new_balance_for(RIYA, TRANSACTIONS)
    assert RIYA.balance == 100


def test_find_first_even_number():
    assert find(range(1, 11), lambda x: x % 2 == 0) == 2


def test_find_the_best_programmer():
    people = [Person("Kent Beck"), Person("Martin Fowler"), Person("Chris James")]
    assert find(people, lambda p: "Chris" in p.name) == Person("Chris James")


def test_find_returns_default_when_missing():
    assert find([1, 3, 5], lambda x: x % 2 == 0, default=-1) == -1


def test_find_default_is_none():
    assert find([], lambda x: True) is None