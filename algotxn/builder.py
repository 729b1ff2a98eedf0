"""Fluent builders for transactions and their kind-specific fields."""

from __future__ import annotations

from typing import Optional

from .transaction import (
    Address,
    ApplicationCallTransaction,
    AssetAcceptTransaction,
    AssetClawbackTransaction,
    AssetConfigurationTransaction,
    AssetFreezeTransaction,
    AssetParams,
    AssetTransferTransaction,
    KeyRegistration,
    Payment,
    StateSchema,
    Transaction,
    TransactionType,
)


def _required(value, name: str):
    if value is None:
        raise ValueError(f"{name} must be set before building")
    return value


class TxnBuilder:
    """Builds a Transaction."""

    def __init__(self) -> None:
        self._fee = 0
        self._first_valid = 0
        self._genesis_hash: Optional[bytes] = None
        self._last_valid = 0
        self._sender: Optional[Address] = None
        self._txn_type: Optional[TransactionType] = None
        self._genesis_id = ""
        self._group: Optional[bytes] = None
        self._lease: Optional[bytes] = None
        self._note: Optional[bytes] = None
        self._rekey_to: Optional[Address] = None

    def fee(self, fee: int) -> TxnBuilder:
        self._fee = fee
        return self

    def first_valid(self, first_valid: int) -> TxnBuilder:
        self._first_valid = first_valid
        return self

    def genesis_hash(self, genesis_hash: bytes) -> TxnBuilder:
        self._genesis_hash = genesis_hash
        return self

    def last_valid(self, last_valid: int) -> TxnBuilder:
        self._last_valid = last_valid
        return self

    def sender(self, sender: Address) -> TxnBuilder:
        self._sender = sender
        return self

    def payment(self, txn: Payment) -> TxnBuilder:
        self._txn_type = txn
        return self

    def key_registration(self, txn: KeyRegistration) -> TxnBuilder:
        self._txn_type = txn
        return self

    def asset_configuration(self, txn: AssetConfigurationTransaction) -> TxnBuilder:
        self._txn_type = txn
        return self

    def asset_transfer(self, txn: AssetTransferTransaction) -> TxnBuilder:
        self._txn_type = txn
        return self

    def asset_accept(self, txn: AssetAcceptTransaction) -> TxnBuilder:
        self._txn_type = txn
        return self

    def asset_clawback(self, txn: AssetClawbackTransaction) -> TxnBuilder:
        self._txn_type = txn
        return self

    def asset_freeze(self, txn: AssetFreezeTransaction) -> TxnBuilder:
        self._txn_type = txn
        return self

    def application_call(self, txn: ApplicationCallTransaction) -> TxnBuilder:
        self._txn_type = txn
        return self

    def genesis_id(self, genesis_id: str) -> TxnBuilder:
        self._genesis_id = genesis_id
        return self

    def group(self, group: bytes) -> TxnBuilder:
        self._group = group
        return self

    def lease(self, lease: bytes) -> TxnBuilder:
        self._lease = lease
        return self

    def note(self, note: bytes) -> TxnBuilder:
        self._note = note
        return self

    def rekey_to(self, rekey_to: Address) -> TxnBuilder:
        self._rekey_to = rekey_to
        return self

    def build(self) -> Transaction:
        """The transaction; genesis hash, sender and kind are required."""
        return Transaction(
            fee=self._fee,
            first_valid=self._first_valid,
            genesis_hash=_required(self._genesis_hash, "genesis_hash"),
            last_valid=self._last_valid,
            sender=_required(self._sender, "sender"),
            txn_type=_required(self._txn_type, "transaction type"),
            genesis_id=self._genesis_id,
            group=self._group,
            lease=self._lease,
            note=self._note,
            rekey_to=self._rekey_to,
        )


class Pay:
    """Builds a Payment."""

    def __init__(self) -> None:
        self._receiver: Optional[Address] = None
        self._amount = 0
        self._close_remainder_to: Optional[Address] = None

    def to(self, receiver: Address) -> Pay:
        self._receiver = receiver
        return self

    def amount(self, amount: int) -> Pay:
        self._amount = amount
        return self

    def close_remainder_to(self, close_remainder_to: Address) -> Pay:
        self._close_remainder_to = close_remainder_to
        return self

    def build(self) -> Payment:
        return Payment(
            receiver=_required(self._receiver, "receiver"),
            amount=self._amount,
            close_remainder_to=self._close_remainder_to,
        )


class RegisterKey:
    """Builds a KeyRegistration."""

    def __init__(self) -> None:
        self._vote_pk: Optional[bytes] = None
        self._selection_pk: Optional[bytes] = None
        self._vote_first = 0
        self._vote_last = 0
        self._vote_key_dilution = 0
        self._nonparticipating: Optional[bool] = None

    def vote_pk(self, vote_pk: bytes) -> RegisterKey:
        self._vote_pk = vote_pk
        return self

    def selection_pk(self, selection_pk: bytes) -> RegisterKey:
        self._selection_pk = selection_pk
        return self

    def vote_first(self, vote_first: int) -> RegisterKey:
        self._vote_first = vote_first
        return self

    def vote_last(self, vote_last: int) -> RegisterKey:
        self._vote_last = vote_last
        return self

    def vote_key_dilution(self, vote_key_dilution: int) -> RegisterKey:
        self._vote_key_dilution = vote_key_dilution
        return self

    def nonparticipating(self, nonparticipating: Optional[bool]) -> RegisterKey:
        self._nonparticipating = nonparticipating
        return self

    def build(self) -> KeyRegistration:
        return KeyRegistration(
            vote_pk=_required(self._vote_pk, "vote_pk"),
            selection_pk=_required(self._selection_pk, "selection_pk"),
            vote_first=self._vote_first,
            vote_last=self._vote_last,
            vote_key_dilution=self._vote_key_dilution,
            nonparticipating=self._nonparticipating,
        )


class ConfigureAsset:
    """Builds an AssetConfigurationTransaction."""

    def __init__(self) -> None:
        self._config_asset: Optional[int] = None
        self._total = 0
        self._decimals = 0
        self._default_frozen = False
        self._unit_name: Optional[str] = None
        self._asset_name: Optional[str] = None
        self._url: Optional[str] = None
        self._meta_data_hash: Optional[bytes] = None
        self._manager: Optional[Address] = None
        self._reserve: Optional[Address] = None
        self._freeze: Optional[Address] = None
        self._clawback: Optional[Address] = None

    def config_asset(self, config_asset: int) -> ConfigureAsset:
        self._config_asset = config_asset
        return self

    def total(self, total: int) -> ConfigureAsset:
        self._total = total
        return self

    def decimals(self, decimals: int) -> ConfigureAsset:
        self._decimals = decimals
        return self

    def default_frozen(self, default_frozen: bool) -> ConfigureAsset:
        self._default_frozen = default_frozen
        return self

    def unit_name(self, unit_name: str) -> ConfigureAsset:
        self._unit_name = unit_name
        return self

    def asset_name(self, asset_name: str) -> ConfigureAsset:
        self._asset_name = asset_name
        return self

    def url(self, url: str) -> ConfigureAsset:
        self._url = url
        return self

    def meta_data_hash(self, meta_data_hash: bytes) -> ConfigureAsset:
        self._meta_data_hash = meta_data_hash
        return self

    def manager(self, manager: Address) -> ConfigureAsset:
        self._manager = manager
        return self

    def reserve(self, reserve: Address) -> ConfigureAsset:
        self._reserve = reserve
        return self

    def freeze(self, freeze: Address) -> ConfigureAsset:
        self._freeze = freeze
        return self

    def clawback(self, clawback: Address) -> ConfigureAsset:
        self._clawback = clawback
        return self

    def build(self) -> AssetConfigurationTransaction:
        return AssetConfigurationTransaction(
            config_asset=self._config_asset,
            params=AssetParams(
                total=self._total,
                decimals=self._decimals,
                default_frozen=self._default_frozen,
                unit_name=self._unit_name,
                asset_name=self._asset_name,
                url=self._url,
                meta_data_hash=self._meta_data_hash,
                manager=self._manager,
                reserve=self._reserve,
                freeze=self._freeze,
                clawback=self._clawback,
            ),
        )


class TransferAsset:
    """Builds an AssetTransferTransaction."""

    def __init__(self) -> None:
        self._xfer = 0
        self._amount = 0
        self._sender: Optional[Address] = None
        self._receiver: Optional[Address] = None
        self._close_to: Optional[Address] = None

    def xfer(self, xfer: int) -> TransferAsset:
        self._xfer = xfer
        return self

    def amount(self, amount: int) -> TransferAsset:
        self._amount = amount
        return self

    def sender(self, sender: Address) -> TransferAsset:
        self._sender = sender
        return self

    def receiver(self, receiver: Address) -> TransferAsset:
        self._receiver = receiver
        return self

    def close_to(self, close_to: Address) -> TransferAsset:
        self._close_to = close_to
        return self

    def build(self) -> AssetTransferTransaction:
        return AssetTransferTransaction(
            xfer=self._xfer,
            amount=self._amount,
            sender=self._sender,
            receiver=_required(self._receiver, "receiver"),
            close_to=_required(self._close_to, "close_to"),
        )


class AcceptAsset:
    """Builds an AssetAcceptTransaction."""

    def __init__(self) -> None:
        self._xfer = 0
        self._sender: Optional[Address] = None
        self._receiver: Optional[Address] = None

    def xfer(self, xfer: int) -> AcceptAsset:
        self._xfer = xfer
        return self

    def sender(self, sender: Address) -> AcceptAsset:
        self._sender = sender
        return self

    def receiver(self, receiver: Address) -> AcceptAsset:
        self._receiver = receiver
        return self

    def build(self) -> AssetAcceptTransaction:
        return AssetAcceptTransaction(
            xfer=self._xfer,
            sender=_required(self._sender, "sender"),
            receiver=_required(self._receiver, "receiver"),
        )


class ClawbackAsset:
    """Builds an AssetClawbackTransaction."""

    def __init__(self) -> None:
        self._sender: Optional[Address] = None
        self._xfer = 0
        self._asset_amount = 0
        self._asset_sender: Optional[Address] = None
        self._asset_receiver: Optional[Address] = None
        self._asset_close_to: Optional[Address] = None

    def sender(self, sender: Address) -> ClawbackAsset:
        self._sender = sender
        return self

    def xfer(self, xfer: int) -> ClawbackAsset:
        self._xfer = xfer
        return self

    def asset_amount(self, asset_amount: int) -> ClawbackAsset:
        self._asset_amount = asset_amount
        return self

    def asset_sender(self, asset_sender: Address) -> ClawbackAsset:
        self._asset_sender = asset_sender
        return self

    def asset_receiver(self, asset_receiver: Address) -> ClawbackAsset:
        self._asset_receiver = asset_receiver
        return self

    def asset_close_to(self, asset_close_to: Address) -> ClawbackAsset:
        self._asset_close_to = asset_close_to
        return self

    def build(self) -> AssetClawbackTransaction:
        return AssetClawbackTransaction(
            xfer=self._xfer,
            asset_amount=self._asset_amount,
            asset_sender=_required(self._asset_sender, "asset_sender"),
            asset_receiver=_required(self._asset_receiver, "asset_receiver"),
            asset_close_to=_required(self._asset_close_to, "asset_close_to"),
        )


class FreezeAsset:
    """Builds an AssetFreezeTransaction."""

    def __init__(self) -> None:
        self._freeze_account: Optional[Address] = None
        self._asset_id = 0
        self._frozen = False

    def freeze_account(self, freeze_account: Address) -> FreezeAsset:
        self._freeze_account = freeze_account
        return self

    def asset_id(self, asset_id: int) -> FreezeAsset:
        self._asset_id = asset_id
        return self

    def frozen(self, frozen: bool) -> FreezeAsset:
        self._frozen = frozen
        return self

    def build(self) -> AssetFreezeTransaction:
        return AssetFreezeTransaction(
            freeze_account=_required(self._freeze_account, "freeze_account"),
            asset_id=self._asset_id,
            frozen=self._frozen,
        )


class CallApplication:
    """Builds an ApplicationCallTransaction."""

    def __init__(self) -> None:
        self._app_id = 0
        self._on_complete = 0
        self._accounts: Optional[list[Address]] = None
        self._approval_program: Optional[Address] = None
        self._app_arguments: Optional[bytes] = None
        self._clear_state_program: Optional[Address] = None
        self._foreign_apps: Optional[Address] = None
        self._foreign_assets: Optional[Address] = None
        self._global_state_schema: Optional[StateSchema] = None
        self._local_state_schema: Optional[StateSchema] = None

    def app_id(self, app_id: int) -> CallApplication:
        self._app_id = app_id
        return self

    def on_complete(self, on_complete: int) -> CallApplication:
        self._on_complete = on_complete
        return self

    def accounts(self, accounts: list[Address]) -> CallApplication:
        self._accounts = list(accounts)
        return self

    def approval_program(self, approval_program: Address) -> CallApplication:
        self._approval_program = approval_program
        return self

    def app_arguments(self, app_arguments: bytes) -> CallApplication:
        self._app_arguments = app_arguments
        return self

    def clear_state_program(self, clear_state_program: Address) -> CallApplication:
        self._clear_state_program = clear_state_program
        return self

    def foreign_apps(self, foreign_apps: Address) -> CallApplication:
        self._foreign_apps = foreign_apps
        return self

    def foreign_assets(self, foreign_assets: Address) -> CallApplication:
        self._foreign_assets = foreign_assets
        return self

    def global_state_schema(self, global_state_schema: StateSchema) -> CallApplication:
        self._global_state_schema = global_state_schema
        return self

    def local_state_schema(self, local_state_schema: StateSchema) -> CallApplication:
        self._local_state_schema = local_state_schema
        return self

    def build(self) -> ApplicationCallTransaction:
        return ApplicationCallTransaction(
            app_id=self._app_id,
            on_complete=self._on_complete,
            accounts=self._accounts,
            approval_program=self._approval_program,
            app_arguments=self._app_arguments,
            clear_state_program=self._clear_state_program,
            foreign_apps=self._foreign_apps,
            foreign_assets=self._foreign_assets,
            global_state_schema=self._global_state_schema,
            local_state_schema=self._local_state_schema,
        )