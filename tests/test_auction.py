import dataclasses

import msgpack
import pytest

from algotxn.auction import Bid, SignedBid
from algotxn.errors import EncodeError
from algotxn.transaction import Address

AUCTION = Address(bytes([1]) * 32)
BIDDER = Address(bytes([2]) * 32)


def make_bid(**overrides):
    values = dict(
        auction_id=3,
        auction_key=AUCTION,
        bidder_key=BIDDER,
        bid_currency=100,
        bid_id=7,
        max_price=50,
    )
    values.update(overrides)
    return Bid(**values)


def test_encoding_keys_in_order():
    decoded = msgpack.unpackb(make_bid().to_msg_pack(), raw=False)
    assert list(decoded) == ["aid", "auc", "bidder", "cur", "id", "price"]


def test_encoding_values():
    decoded = msgpack.unpackb(make_bid().to_msg_pack(), raw=False)
    assert decoded["aid"] == 3
    assert decoded["auc"] == AUCTION.public_key
    assert decoded["bidder"] == BIDDER.public_key
    assert decoded["cur"] == 100
    assert decoded["id"] == 7
    assert decoded["price"] == 50


def test_equal_bids_encode_equally():
    assert make_bid().to_msg_pack() == make_bid().to_msg_pack()
    assert make_bid().to_msg_pack() != make_bid(bid_id=8).to_msg_pack()


def test_negative_currency_cannot_encode_out_of_range():
    with pytest.raises(EncodeError):
        make_bid(bid_currency=2**70).to_msg_pack()


def test_signed_bid_is_frozen_and_comparable():
    signed = SignedBid(make_bid(), bytes(64))
    assert signed == SignedBid(make_bid(), bytes(64))
    with pytest.raises(dataclasses.FrozenInstanceError):
        signed.sig = bytes([1]) * 64