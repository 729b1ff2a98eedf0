"""Canonical msgpack encoding of transactions as the network expects them.

Transaction maps carry their keys sorted alphabetically and leave out keys
without a value; signatures do not validate otherwise.
"""

from __future__ import annotations

from typing import Any, Optional

import msgpack

from .errors import EncodeError
from .transaction import (
    Address,
    ApplicationCallTransaction,
    AssetAcceptTransaction,
    AssetClawbackTransaction,
    AssetConfigurationTransaction,
    AssetFreezeTransaction,
    AssetParams,
    AssetTransferTransaction,
    ContractAccount,
    KeyRegistration,
    MultisigSignature,
    Payment,
    SignedLogic,
    SignedTransaction,
    StateSchema,
    Transaction,
    TransactionType,
)

_TYPE_NAMES: dict[type, str] = {
    Payment: "pay",
    KeyRegistration: "keyreg",
    AssetConfigurationTransaction: "acfg",
    AssetTransferTransaction: "axfer",
    AssetAcceptTransaction: "axfer",
    AssetClawbackTransaction: "axfer",
    AssetFreezeTransaction: "afrz",
    ApplicationCallTransaction: "appl",
}


def _addr(address: Optional[Address]) -> Optional[bytes]:
    return None if address is None else address.public_key


def _opt_bytes(value: Optional[bytes]) -> Optional[bytes]:
    return None if value is None else bytes(value)


def _state_schema(schema: Optional[StateSchema]) -> Optional[dict[str, int]]:
    if schema is None:
        return None
    return {"nui": schema.number_ints, "nbs": schema.number_byteslices}


def _multisig(msig: Optional[MultisigSignature]) -> Optional[dict[str, Any]]:
    if msig is None:
        return None
    subsigs = []
    for subsig in msig.subsigs:
        entry: dict[str, Any] = {"pk": bytes(subsig.key)}
        if subsig.sig is not None:
            entry["s"] = bytes(subsig.sig)
        subsigs.append(entry)
    return {"subsig": subsigs, "thr": msig.threshold, "v": msig.version}


def api_transaction_type(txn_type: TransactionType) -> str:
    """The wire name of a transaction kind."""
    try:
        return _TYPE_NAMES[type(txn_type)]
    except KeyError:
        raise TypeError(f"unknown transaction type: {type(txn_type).__name__}") from None


def to_api_asset_params(params: AssetParams) -> dict[str, Any]:
    """Asset parameters as a wire map; the default-frozen flag is never sent."""
    fields = {
        "an": params.asset_name,
        "dc": params.decimals,
        "t": params.total,
        "un": params.unit_name,
        "am": _opt_bytes(params.meta_data_hash),
        "au": params.url,
        "c": _addr(params.clawback),
        "f": _addr(params.freeze),
        "m": _addr(params.manager),
        "r": _addr(params.reserve),
    }
    return {key: value for key, value in fields.items() if value is not None}


def _type_fields(txn_type: TransactionType) -> dict[str, Any]:
    match txn_type:
        case Payment():
            return {
                "rcv": txn_type.receiver.public_key,
                "amt": txn_type.amount,
                "close": _addr(txn_type.close_remainder_to),
            }
        case KeyRegistration():
            return {
                "votekey": bytes(txn_type.vote_pk),
                "selkey": bytes(txn_type.selection_pk),
                "votefst": txn_type.vote_first,
                "votelst": txn_type.vote_last,
                "votekd": txn_type.vote_key_dilution,
                "nonpart": txn_type.nonparticipating,
            }
        case AssetConfigurationTransaction():
            return {
                "apar": to_api_asset_params(txn_type.params),
                "caid": txn_type.config_asset,
            }
        case AssetTransferTransaction():
            return {
                "xaid": txn_type.xfer,
                "aamt": txn_type.amount,
                "asnd": _addr(txn_type.sender),
                "arcv": txn_type.receiver.public_key,
                "aclose": txn_type.close_to.public_key,
            }
        case AssetAcceptTransaction():
            return {
                "xaid": txn_type.xfer,
                "asnd": txn_type.sender.public_key,
                "arcv": txn_type.receiver.public_key,
            }
        case AssetClawbackTransaction():
            return {
                "xaid": txn_type.xfer,
                "aamt": txn_type.asset_amount,
                "asnd": txn_type.asset_sender.public_key,
                "arcv": txn_type.asset_receiver.public_key,
                "aclose": txn_type.asset_close_to.public_key,
            }
        case AssetFreezeTransaction():
            return {
                "fadd": txn_type.freeze_account.public_key,
                "faid": txn_type.asset_id,
                "afrz": txn_type.frozen,
            }
        case ApplicationCallTransaction():
            accounts = txn_type.accounts
            return {
                "apid": txn_type.app_id,
                "apan": txn_type.on_complete,
                "apat": None if accounts is None else [a.public_key for a in accounts],
                "apap": _addr(txn_type.approval_program),
                "apaa": _opt_bytes(txn_type.app_arguments),
                "apsu": _addr(txn_type.clear_state_program),
                "apfa": _addr(txn_type.foreign_apps),
                "apas": _addr(txn_type.foreign_assets),
                "apgs": _state_schema(txn_type.global_state_schema),
                "apls": _state_schema(txn_type.local_state_schema),
            }
    raise TypeError(f"unknown transaction type: {type(txn_type).__name__}")


def to_api_transaction(transaction: Transaction) -> dict[str, Any]:
    """A transaction as a wire map with sorted keys and no empty values."""
    fields: dict[str, Any] = {
        "fee": transaction.fee,
        "fv": transaction.first_valid,
        "gen": transaction.genesis_id,
        "gh": bytes(transaction.genesis_hash),
        "grp": _opt_bytes(transaction.group),
        "lv": transaction.last_valid,
        "lx": _opt_bytes(transaction.lease),
        "note": _opt_bytes(transaction.note),
        "rekey": _addr(transaction.rekey_to),
        "snd": transaction.sender.public_key,
        "type": api_transaction_type(transaction.txn_type),
    }
    fields.update(_type_fields(transaction.txn_type))
    return {key: fields[key] for key in sorted(fields) if fields[key] is not None}


def to_api_signed_logic(signed_logic: SignedLogic) -> dict[str, Any]:
    """A logic signature as a wire map; absent signatures are sent as nil."""
    sig = signed_logic.sig
    single: Optional[bytes] = None
    multi: Optional[MultisigSignature] = None
    if isinstance(sig, MultisigSignature):
        multi = sig
    elif not isinstance(sig, ContractAccount):
        single = bytes(sig)
    return {
        "l": bytes(signed_logic.logic.program),
        "arg": [bytes(arg) for arg in signed_logic.args],
        "sig": single,
        "msig": _multisig(multi),
    }


def to_api_signed_transaction(signed_transaction: SignedTransaction) -> dict[str, Any]:
    """A signed transaction as a wire map; the transaction id is not encoded."""
    sig = signed_transaction.sig
    result: dict[str, Any] = {}
    if isinstance(sig, MultisigSignature):
        result["msig"] = _multisig(sig)
    elif isinstance(sig, SignedLogic):
        result["lsig"] = to_api_signed_logic(sig)
    else:
        result["sig"] = bytes(sig)
    result["txn"] = to_api_transaction(signed_transaction.transaction)
    return result


def to_msg_pack(value: Any) -> bytes:
    """Encode a transaction, a signed transaction or plain data as msgpack."""
    if isinstance(value, Transaction):
        payload = to_api_transaction(value)
    elif isinstance(value, SignedTransaction):
        payload = to_api_signed_transaction(value)
    else:
        payload = value
    try:
        return msgpack.packb(payload, use_bin_type=True)
    except (TypeError, ValueError, OverflowError) as exc:
        raise EncodeError(exc) from exc