"""Auction bids."""

from __future__ import annotations

from dataclasses import dataclass

from .encoding import to_msg_pack
from .transaction import Address


@dataclass(frozen=True)
class Bid:
    """A bid by a user as part of an auction."""

    auction_id: int
    auction_key: Address
    bidder_key: Address
    bid_currency: int
    bid_id: int
    max_price: int

    def to_msg_pack(self) -> bytes:
        return to_msg_pack(
            {
                "aid": self.auction_id,
                "auc": self.auction_key.public_key,
                "bidder": self.bidder_key.public_key,
                "cur": self.bid_currency,
                "id": self.bid_id,
                "price": self.max_price,
            }
        )


@dataclass(frozen=True)
class SignedBid:
    """A bid with the bidder's signature over it."""

    bid: Bid
    sig: bytes