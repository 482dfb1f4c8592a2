"""A Bitcoin wallet."""

from __future__ import annotations


class Bitcoin(int):
    """An amount of Bitcoin."""

    def __str__(self) -> str:
        return f"{int(self)} BTC"


class InsufficientFundsError(Exception):
    def __init__(self) -> None:
        super().__init__("cannot withdraw, insufficient funds")


class Wallet:
    """Holds a Bitcoin balance."""

    def __init__(self, balance: int = 0) -> None:
        self._balance = Bitcoin(balance)

    @property
    def balance(self) -> Bitcoin:
        return self._balance

    def deposit(self, amount: int) -> None:
        self._balance = Bitcoin(self._balance + amount)

    def withdraw(self, amount: int) -> None:
        if amount > self._balance:
            raise InsufficientFundsError()
        self._balance = Bitcoin(self._balance - amount)