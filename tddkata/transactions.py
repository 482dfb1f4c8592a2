"""Accounts, transactions and balances."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from typing import Any, TypeVar

from tddkata.sums import reduce

T = TypeVar("T")


@dataclass(frozen=True)
class Account:
    name: str
    balance: float


@dataclass(frozen=True)
class Person:
    name: str


@dataclass(frozen=True)
class Transaction:
    source: str
    target: str
    amount: float


def new_transaction(from_account: Account, to_account: Account, amount: float) -> Transaction:
    """Create a transaction between two accounts."""
    return Transaction(from_account.name, to_account.name, amount)


def _apply_transaction(account: Account, transaction: Transaction) -> Account:
    balance = account.balance
    if transaction.source == account.name:
        balance -= transaction.amount
    if transaction.target == account.name:
        balance += transaction.amount
    return replace(account, balance=balance)


def new_balance_for(account: Account, transactions: Iterable[Transaction]) -> Account:
    """Return ``account`` with all transactions applied."""
    return reduce(transactions, _apply_transaction, account)


def find(items: Iterable[T], predicate: Callable[[T], bool], default: Any = None) -> Any:
    """Return the first item matching ``predicate``, else ``default``."""
    return next((item for item in items if predicate(item)), default)