import msgpack
import pytest
from cryptography.hazmat.primitives import hashes

from algotxn.errors import EmptyTransactionListError, MaxTransactionGroupSizeError
from algotxn.transaction import Address, Payment, Transaction
from algotxn.tx_group import TxGroup, compute_group_id


def make_txn(amount):
    return Transaction(
        fee=1000,
        first_valid=1,
        genesis_hash=bytes([9]) * 32,
        last_valid=1001,
        sender=Address(bytes([1]) * 32),
        txn_type=Payment(receiver=Address(bytes([2]) * 32), amount=amount),
        genesis_id="testnet-v1.0",
    )


def sha512_256(data):
    digest = hashes.Hash(hashes.SHA512_256())
    digest.update(data)
    return digest.finalize()


def test_empty_list_raises():
    with pytest.raises(EmptyTransactionListError):
        compute_group_id([])
    with pytest.raises(EmptyTransactionListError):
        TxGroup.assign_group_id([])


def test_too_many_raises():
    with pytest.raises(MaxTransactionGroupSizeError) as info:
        compute_group_id([make_txn(i) for i in range(17)])
    assert info.value.size == 16


def test_sixteen_is_allowed():
    assert len(compute_group_id([make_txn(i) for i in range(16)])) == 32


def test_assign_sets_same_group():
    txns = [make_txn(1), make_txn(2), make_txn(3)]
    expected = compute_group_id(txns)
    TxGroup.assign_group_id(txns)
    assert all(txn.group == expected for txn in txns)


def test_order_matters():
    a, b = make_txn(1), make_txn(2)
    assert compute_group_id([a, b]) != compute_group_id([b, a])
    assert compute_group_id([a, b]) == compute_group_id([make_txn(1), make_txn(2)])


def test_group_id_is_hash_of_prefixed_encoding():
    txns = [make_txn(1), make_txn(2)]
    group = TxGroup(tuple(t.raw_id() for t in txns))
    assert compute_group_id(txns) == sha512_256(group.bytes_to_sign())


def test_encoding():
    hashes_ = (bytes([1]) * 32, bytes([2]) * 32)
    group = TxGroup(hashes_)
    assert msgpack.unpackb(group.to_msg_pack(), raw=False) == {"txlist": list(hashes_)}
    assert group.bytes_to_sign() == b"TG" + group.to_msg_pack()


def test_empty_group_encoding():
    assert msgpack.unpackb(TxGroup().to_msg_pack(), raw=False) == {"txlist": []}