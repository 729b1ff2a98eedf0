"""Atomic transaction groups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable

from .encoding import to_msg_pack
from .errors import EmptyTransactionListError, MaxTransactionGroupSizeError
from .transaction import Transaction, _sha512_256


@dataclass(frozen=True)
class TxGroup:
    """The ordered ids of the transactions that form a group."""

    tx_group_hashes: tuple[bytes, ...] = ()

    MAX_TX_GROUP_SIZE: ClassVar[int] = 16

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "tx_group_hashes", tuple(bytes(h) for h in self.tx_group_hashes)
        )

    @staticmethod
    def assign_group_id(txns: Iterable[Transaction]) -> None:
        """Set the common group id on every transaction."""
        txns = list(txns)
        group_id = compute_group_id(txns)
        for txn in txns:
            txn.assign_group_id(group_id)

    def to_msg_pack(self) -> bytes:
        return to_msg_pack({"txlist": list(self.tx_group_hashes)})

    def bytes_to_sign(self) -> bytes:
        return b"TG" + self.to_msg_pack()


def compute_group_id(txns: Iterable[Transaction]) -> bytes:
    """The hash that identifies a group of transactions, in their order."""
    txns = list(txns)
    if not txns:
        raise EmptyTransactionListError()
    if len(txns) > TxGroup.MAX_TX_GROUP_SIZE:
        raise MaxTransactionGroupSizeError(TxGroup.MAX_TX_GROUP_SIZE)
    group = TxGroup(tuple(txn.raw_id() for txn in txns))
    return _sha512_256(group.bytes_to_sign())