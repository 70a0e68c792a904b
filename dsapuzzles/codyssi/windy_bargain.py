"""Windy bargain: replaying transactions between accounts, with and without debts."""

from __future__ import annotations

from collections import deque

Transaction = tuple[str, str, int]
Balances = dict[str, int]
Debts = dict[str, deque[tuple[str, int]]]


def _parse(text: str) -> tuple[Balances, list[Transaction]]:
    sections = text.split("\n\n")
    if len(sections) < 2:
        raise ValueError("input needs a balance section and a transaction section")

    balances: Balances = {}
    for line in sections[0].splitlines():
        name, sep, amount = line.partition(" HAS ")
        if not sep:
            raise ValueError(f"not a balance: {line!r}")
        balances[name] = int(amount)

    transactions: list[Transaction] = []
    for line in sections[-1].splitlines():
        words = line.split()
        if len(words) < 6:
            raise ValueError(f"not a transaction: {line!r}")
        sender, receiver, amount = words[1], words[3], int(words[5])
        for name in (sender, receiver):
            if name not in balances:
                raise ValueError(f"unknown account: {name!r}")
        transactions.append((sender, receiver, amount))
    return balances, transactions


def _transfer(sender: str, receiver: str, amount: int, balances: Balances) -> None:
    balances[receiver] += amount
    balances[sender] -= amount


def _top_three(balances: Balances) -> int:
    return sum(sorted(balances.values(), reverse=True)[:3])


def _settle(name: str, debts: Debts, balances: Balances) -> None:
    while balances.get(name, 0) != 0:
        owed = debts.get(name)
        if not owed:
            return
        creditor, amount = owed.popleft()
        available = balances[name]
        if available < amount:
            owed.appendleft((creditor, amount - available))
            amount = available
        _transfer(name, creditor, amount, balances)
        _settle(creditor, debts, balances)


def solve(text: str) -> tuple[int, int, int]:
    """Return the top-three wealth after blind transfers, capped transfers and debts."""
    balances, transactions = _parse(text)

    blind = dict(balances)
    for sender, receiver, amount in transactions:
        _transfer(sender, receiver, amount, blind)

    capped = dict(balances)
    for sender, receiver, amount in transactions:
        _transfer(sender, receiver, min(capped[sender], amount), capped)

    owing = dict(balances)
    debts: Debts = {}
    for sender, receiver, amount in transactions:
        available = owing[sender]
        paid = amount
        if available < amount:
            paid = available
            debts.setdefault(sender, deque()).append((receiver, amount - available))
        _transfer(sender, receiver, paid, owing)
        _settle(receiver, debts, owing)

    return _top_three(blind), _top_three(capped), _top_three(owing)