"""Ed25519 accounts that sign transactions, bids, programs and multisignatures."""

from __future__ import annotations

import os
from dataclasses import replace

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from .auction import Bid, SignedBid
from .errors import InvalidSecretKeyInMultisigError, InvalidSenderInMultisigError
from .transaction import (
    Address,
    CompiledTeal,
    MultisigAddress,
    MultisigSignature,
    MultisigSubsig,
    SignedTransaction,
    Transaction,
)

SEED_LEN = 32


class Account:
    """A key pair derived from a 32 byte seed, with its address."""

    def __init__(self, seed: bytes) -> None:
        seed = bytes(seed)
        if len(seed) != SEED_LEN:
            raise ValueError(f"seed must be {SEED_LEN} bytes, got {len(seed)}")
        self._seed = seed
        self._private_key = Ed25519PrivateKey.from_private_bytes(seed)
        public_key = self._private_key.public_key().public_bytes(
            Encoding.Raw, PublicFormat.Raw
        )
        self._address = Address(public_key)

    @classmethod
    def generate(cls) -> Account:
        """A new account from a random seed."""
        return cls(os.urandom(SEED_LEN))

    @classmethod
    def from_seed(cls, seed: bytes) -> Account:
        """The account derived from a 32 byte seed."""
        return cls(seed)

    @property
    def address(self) -> Address:
        """The public key address of the account."""
        return self._address

    @property
    def seed(self) -> bytes:
        """The 32 byte seed."""
        return self._seed

    def __repr__(self) -> str:
        return f"Account({str(self._address)!r})"

    def _sign(self, data: bytes) -> bytes:
        return self._private_key.sign(bytes(data))

    def generate_program_sig(self, program: CompiledTeal) -> bytes:
        """Sign a compiled program."""
        return self._sign(b"Program" + bytes(program.program))

    def _transaction_sig(self, transaction: Transaction) -> bytes:
        return self._sign(transaction.bytes_to_sign())

    def sign_bid(self, bid: Bid) -> SignedBid:
        """Sign a bid with the account's private key."""
        return SignedBid(bid=bid, sig=self._sign(b"aB" + bid.to_msg_pack()))

    def sign_transaction(self, transaction: Transaction) -> SignedTransaction:
        """A single-signature signed transaction."""
        return SignedTransaction(
            transaction=replace(transaction),
            transaction_id=transaction.id(),
            sig=self._transaction_sig(transaction),
        )

    def sign_multisig_transaction(
        self, from_: MultisigAddress, transaction: Transaction
    ) -> SignedTransaction:
        """A multisignature signed transaction holding this account's signature."""
        return SignedTransaction(
            transaction=replace(transaction),
            transaction_id=transaction.id(),
            sig=self.init_transaction_msig(transaction, from_),
        )

    def init_transaction_msig(
        self, transaction: Transaction, from_: MultisigAddress
    ) -> MultisigSignature:
        """Start a transaction multisignature with this account's signature."""
        if from_.address() != transaction.sender:
            raise InvalidSenderInMultisigError()
        if not from_.contains(self._address):
            raise InvalidSecretKeyInMultisigError()
        return self._init_msig(from_, self._transaction_sig(transaction))

    def init_logic_msig(
        self, program: CompiledTeal, ma: MultisigAddress
    ) -> MultisigSignature:
        """Start a logic multisignature with this account's signature."""
        if not ma.contains(self._address):
            raise InvalidSecretKeyInMultisigError()
        return self._init_msig(ma, self.generate_program_sig(program))

    def append_to_logic_msig(
        self, program: CompiledTeal, msig: MultisigSignature
    ) -> MultisigSignature:
        """Add this account's program signature to a logic multisignature."""
        return self._append_sig(self.generate_program_sig(program), msig)

    def append_to_transaction_msig(
        self, transaction: Transaction, msig: MultisigSignature
    ) -> MultisigSignature:
        """Add this account's transaction signature to a multisignature."""
        return self._append_sig(self._transaction_sig(transaction), msig)

    def _init_msig(self, ma: MultisigAddress, sig: bytes) -> MultisigSignature:
        my_key = self._address.public_key
        subsigs = tuple(
            MultisigSubsig(key=key, sig=sig if key == my_key else None)
            for key in ma.public_keys
        )
        return MultisigSignature(
            version=ma.version, threshold=ma.threshold, subsigs=subsigs
        )

    def _append_sig(self, sig: bytes, msig: MultisigSignature) -> MultisigSignature:
        my_key = self._address.public_key
        if not any(subsig.key == my_key for subsig in msig.subsigs):
            raise InvalidSecretKeyInMultisigError()
        subsigs = tuple(
            MultisigSubsig(key=subsig.key, sig=sig) if subsig.key == my_key else subsig
            for subsig in msig.subsigs
        )
        return replace(msig, subsigs=subsigs)