"""Addresses, signatures and the transaction kinds that can appear in a block."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field, replace
from typing import Optional, Union

from cryptography.hazmat.primitives import hashes

MIN_TXN_FEE = 1000
PUBLIC_KEY_LEN = 32
CHECKSUM_LEN = 4
ADDRESS_STRING_LEN = 58
SIGNATURE_LEN = 64


def _sha512_256(data: bytes) -> bytes:
    digest = hashes.Hash(hashes.SHA512_256())
    digest.update(data)
    return digest.finalize()


def _b32encode(data: bytes) -> str:
    return base64.b32encode(data).decode("ascii").rstrip("=")


def _b32decode(text: str) -> bytes:
    return base64.b32decode(text + "=" * (-len(text) % 8))


@dataclass(frozen=True)
class Address:
    """An account address: a 32 byte ed25519 public key."""

    public_key: bytes

    def __post_init__(self) -> None:
        key = bytes(self.public_key)
        if len(key) != PUBLIC_KEY_LEN:
            raise ValueError(f"public key must be {PUBLIC_KEY_LEN} bytes, got {len(key)}")
        object.__setattr__(self, "public_key", key)

    @classmethod
    def from_string(cls, text: str) -> Address:
        """Parse the checksummed base32 form of an address."""
        if len(text) != ADDRESS_STRING_LEN:
            raise ValueError(f"address must be {ADDRESS_STRING_LEN} characters")
        raw = _b32decode(text)
        key, checksum = raw[:PUBLIC_KEY_LEN], raw[PUBLIC_KEY_LEN:]
        if _sha512_256(key)[-CHECKSUM_LEN:] != checksum:
            raise ValueError("address checksum does not match")
        address = cls(key)
        if str(address) != text:
            raise ValueError("address is not in canonical form")
        return address

    def __str__(self) -> str:
        return _b32encode(self.public_key + _sha512_256(self.public_key)[-CHECKSUM_LEN:])

    def __repr__(self) -> str:
        return f"Address({str(self)!r})"


@dataclass(frozen=True)
class MultisigAddress:
    """The preimage of a multisignature account."""

    version: int
    threshold: int
    public_keys: tuple[bytes, ...]

    def __post_init__(self) -> None:
        keys = tuple(bytes(key) for key in self.public_keys)
        if self.version != 1:
            raise ValueError(f"unknown multisig version: {self.version}")
        if not keys or not 1 <= self.threshold <= len(keys):
            raise ValueError("invalid multisig threshold")
        if any(len(key) != PUBLIC_KEY_LEN for key in keys):
            raise ValueError(f"public keys must be {PUBLIC_KEY_LEN} bytes")
        object.__setattr__(self, "public_keys", keys)

    def address(self) -> Address:
        """The address that this multisig identity controls."""
        preimage = (
            b"MultisigAddr"
            + bytes([self.version, self.threshold])
            + b"".join(self.public_keys)
        )
        return Address(_sha512_256(preimage))

    def contains(self, address: Address) -> bool:
        """Whether the address is one of the participants."""
        return address.public_key in self.public_keys


@dataclass(frozen=True)
class MultisigSubsig:
    """One participant of a multisignature, with its signature if given."""

    key: bytes
    sig: Optional[bytes] = None


@dataclass(frozen=True)
class MultisigSignature:
    version: int
    threshold: int
    subsigs: tuple[MultisigSubsig, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "subsigs", tuple(self.subsigs))


@dataclass(frozen=True)
class CompiledTeal:
    """Compiled program bytes."""

    program: bytes


@dataclass(frozen=True)
class ContractAccount:
    """Logic signature where the program itself is the account."""


LogicSignature = Union[ContractAccount, bytes, MultisigSignature]


@dataclass(frozen=True)
class SignedLogic:
    """A program with its arguments and the signature that authorises it."""

    logic: CompiledTeal
    args: tuple[bytes, ...] = ()
    sig: LogicSignature = field(default_factory=ContractAccount)

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(bytes(arg) for arg in self.args))


@dataclass
class Payment:
    receiver: Address
    amount: int = 0
    close_remainder_to: Optional[Address] = None


@dataclass
class KeyRegistration:
    vote_pk: bytes
    selection_pk: bytes
    vote_first: int = 0
    vote_last: int = 0
    vote_key_dilution: int = 0
    nonparticipating: Optional[bool] = None


@dataclass
class AssetParams:
    asset_name: Optional[str] = None
    decimals: int = 0
    default_frozen: bool = False
    total: int = 0
    unit_name: Optional[str] = None
    meta_data_hash: Optional[bytes] = None
    url: Optional[str] = None
    clawback: Optional[Address] = None
    freeze: Optional[Address] = None
    manager: Optional[Address] = None
    reserve: Optional[Address] = None


@dataclass
class AssetConfigurationTransaction:
    """Creates, reconfigures or destroys an asset; config_asset is unset on creation."""

    params: AssetParams
    config_asset: Optional[int] = None


@dataclass
class AssetTransferTransaction:
    xfer: int
    amount: int
    receiver: Address
    close_to: Address
    sender: Optional[Address] = None


@dataclass
class AssetAcceptTransaction:
    xfer: int
    sender: Address
    receiver: Address


@dataclass
class AssetClawbackTransaction:
    xfer: int
    asset_amount: int
    asset_sender: Address
    asset_receiver: Address
    asset_close_to: Address


@dataclass
class AssetFreezeTransaction:
    freeze_account: Address
    asset_id: int
    frozen: bool


@dataclass
class StateSchema:
    number_ints: int
    number_byteslices: int


@dataclass
class ApplicationCallTransaction:
    app_id: int = 0
    on_complete: int = 0
    accounts: Optional[list[Address]] = None
    approval_program: Optional[Address] = None
    app_arguments: Optional[bytes] = None
    clear_state_program: Optional[Address] = None
    foreign_apps: Optional[Address] = None
    foreign_assets: Optional[Address] = None
    global_state_schema: Optional[StateSchema] = None
    local_state_schema: Optional[StateSchema] = None


TransactionType = Union[
    Payment,
    KeyRegistration,
    AssetConfigurationTransaction,
    AssetTransferTransaction,
    AssetAcceptTransaction,
    AssetClawbackTransaction,
    AssetFreezeTransaction,
    ApplicationCallTransaction,
]


@dataclass
class Transaction:
    """A transaction that can appear in a block."""

    fee: int
    first_valid: int
    genesis_hash: bytes
    last_valid: int
    sender: Address
    txn_type: TransactionType
    genesis_id: str = ""
    group: Optional[bytes] = None
    lease: Optional[bytes] = None
    note: Optional[bytes] = None
    rekey_to: Optional[Address] = None

    def fee_per_byte(self, fee_per_byte: int) -> Transaction:
        """A copy whose fee is computed from the estimated encoded size."""
        return replace(self, fee=max(MIN_TXN_FEE, fee_per_byte * self._estimate_size()))

    def bytes_to_sign(self) -> bytes:
        """The domain-separated encoding that signatures cover."""
        from .encoding import to_msg_pack

        return b"TX" + to_msg_pack(self)

    def raw_id(self) -> bytes:
        return _sha512_256(self.bytes_to_sign())

    def id(self) -> str:
        return _b32encode(self.raw_id())

    def assign_group_id(self, group_id: bytes) -> None:
        self.group = group_id

    def _estimate_size(self) -> int:
        from .encoding import to_msg_pack

        # Any signature has the same encoded length, so a blank one gives the exact size.
        signed = SignedTransaction(self, self.id(), bytes(SIGNATURE_LEN))
        return len(to_msg_pack(signed))


TransactionSignature = Union[bytes, MultisigSignature, SignedLogic]


@dataclass
class SignedTransaction:
    """A transaction wrapped with its signature, ready to broadcast."""

    transaction: Transaction
    transaction_id: str
    sig: TransactionSignature