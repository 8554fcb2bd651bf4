"""A simple Bitcoin wallet."""


class Bitcoin(int):
    """An amount of Bitcoin."""

    def __str__(self) -> str:
        return f"{int(self)} BTC"


class InsufficientBalanceError(Exception):
    """Raised when withdrawing more than the wallet holds."""


class Wallet:
    """Holds a Bitcoin balance."""

    def __init__(self, balance: int = 0) -> None:
        self._balance = Bitcoin(balance)

    def deposit(self, value: int) -> None:
        self._balance = Bitcoin(self._balance + value)

    def withdraw(self, value: int) -> None:
        if value > self._balance:
            raise InsufficientBalanceError("insufficient balance")
        self._balance = Bitcoin(self._balance - value)

    @property
    def balance(self) -> Bitcoin:
        return self._balance