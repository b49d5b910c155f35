"""A wallet holding Bitcoin."""


class Bitcoin(int):
    def __str__(self) -> str:
        return f"{int(self)} BTC"


class InsufficientFundsError(Exception):
    """A withdrawal exceeds the wallet's balance."""


class Wallet:
    def __init__(self, balance: int = 0) -> None:
        self._balance = Bitcoin(balance)

    def deposit(self, amount: int) -> None:
        self._balance = Bitcoin(self._balance + amount)

    def balance(self) -> Bitcoin:
        return self._balance

    def withdraw(self, amount: int) -> None:
        if amount > self._balance:
            raise InsufficientFundsError("cannot withdraw, insufficient funds")
        self._balance = Bitcoin(self._balance - amount)