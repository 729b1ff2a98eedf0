import msgpack
import pytest

from algotxn.encoding import (
    api_transaction_type,
    to_api_asset_params,
    to_api_signed_logic,
    to_api_signed_transaction,
    to_api_transaction,
    to_msg_pack,
)
from algotxn.errors import EncodeError
from algotxn.transaction import (
    Address,
    ApplicationCallTransaction,
    AssetAcceptTransaction,
    AssetClawbackTransaction,
    AssetConfigurationTransaction,
    AssetFreezeTransaction,
    AssetParams,
    AssetTransferTransaction,
    CompiledTeal,
    KeyRegistration,
    MultisigSignature,
    MultisigSubsig,
    Payment,
    SignedLogic,
    SignedTransaction,
    StateSchema,
    Transaction,
)

SENDER = Address(bytes([1]) * 32)
RECEIVER = Address(bytes([2]) * 32)
OTHER = Address(bytes([3]) * 32)


def make_txn(txn_type=None, **kwargs):
    return Transaction(
        fee=1000,
        first_valid=10,
        genesis_hash=bytes([9]) * 32,
        last_valid=1010,
        sender=SENDER,
        txn_type=txn_type or Payment(receiver=RECEIVER, amount=123_456),
        genesis_id="testnet-v1.0",
        **kwargs,
    )


@pytest.mark.parametrize(
    "txn_type, name",
    [
        (Payment(receiver=RECEIVER), "pay"),
        (KeyRegistration(vote_pk=bytes(32), selection_pk=bytes(32)), "keyreg"),
        (AssetConfigurationTransaction(params=AssetParams()), "acfg"),
        (AssetTransferTransaction(1, 2, RECEIVER, OTHER), "axfer"),
        (AssetAcceptTransaction(1, SENDER, SENDER), "axfer"),
        (AssetClawbackTransaction(1, 2, SENDER, RECEIVER, OTHER), "axfer"),
        (AssetFreezeTransaction(RECEIVER, 5, True), "afrz"),
        (ApplicationCallTransaction(), "appl"),
    ],
)
def test_api_transaction_type(txn_type, name):
    assert api_transaction_type(txn_type) == name


def test_api_transaction_type_unknown():
    with pytest.raises(TypeError):
        api_transaction_type(object())


def test_payment_keys_and_values():
    api = to_api_transaction(make_txn())
    assert list(api) == ["amt", "fee", "fv", "gen", "gh", "lv", "rcv", "snd", "type"]
    assert api["amt"] == 123_456
    assert api["rcv"] == RECEIVER.public_key
    assert api["snd"] == SENDER.public_key
    assert api["type"] == "pay"


def test_keys_are_sorted_with_all_optionals():
    txn = make_txn(
        Payment(receiver=RECEIVER, amount=0, close_remainder_to=OTHER),
        group=bytes([4]) * 32,
        lease=bytes([5]) * 32,
        note=b"hello",
        rekey_to=OTHER,
    )
    keys = list(to_api_transaction(txn))
    assert keys == sorted(keys)
    assert {"close", "grp", "lx", "note", "rekey"} <= set(keys)


def test_zero_amount_is_kept():
    api = to_api_transaction(make_txn(Payment(receiver=RECEIVER, amount=0)))
    assert api["amt"] == 0
    assert "close" not in api


def test_empty_genesis_id_is_kept():
    txn = make_txn()
    txn.genesis_id = ""
    assert to_api_transaction(txn)["gen"] == ""


def test_msgpack_round_trip():
    txn = make_txn(note=b"note")
    decoded = msgpack.unpackb(to_msg_pack(txn), raw=False)
    assert decoded == to_api_transaction(txn)
    assert decoded["note"] == b"note"


def test_bytes_to_sign_prefix():
    txn = make_txn()
    assert txn.bytes_to_sign() == b"TX" + to_msg_pack(txn)


def test_asset_params_order_and_default_frozen_skipped():
    params = AssetParams(
        asset_name="Naki",
        decimals=2,
        default_frozen=True,
        total=10,
        unit_name="EIRI",
        meta_data_hash=b"",
        url="example.com",
        clawback=SENDER,
        freeze=SENDER,
        manager=SENDER,
        reserve=SENDER,
    )
    api = to_api_asset_params(params)
    assert list(api) == ["an", "dc", "t", "un", "am", "au", "c", "f", "m", "r"]
    assert "df" not in api


def test_asset_params_minimal():
    assert to_api_asset_params(AssetParams()) == {"dc": 0, "t": 0}


def test_asset_config_without_id():
    api = to_api_transaction(make_txn(AssetConfigurationTransaction(params=AssetParams(total=10))))
    assert "caid" not in api
    assert api["apar"]["t"] == 10


def test_asset_transfer_without_sender():
    api = to_api_transaction(make_txn(AssetTransferTransaction(7, 3, RECEIVER, OTHER)))
    assert "asnd" not in api
    assert api["xaid"] == 7
    assert api["aamt"] == 3
    assert api["aclose"] == OTHER.public_key


def test_asset_accept_and_freeze():
    accept = to_api_transaction(make_txn(AssetAcceptTransaction(7, SENDER, SENDER)))
    assert accept["asnd"] == SENDER.public_key and accept["arcv"] == SENDER.public_key
    freeze = to_api_transaction(make_txn(AssetFreezeTransaction(RECEIVER, 9, False)))
    assert freeze["afrz"] is False
    assert freeze["faid"] == 9


def test_key_registration_fields():
    reg = KeyRegistration(
        vote_pk=bytes([6]) * 32,
        selection_pk=bytes([7]) * 32,
        vote_first=1,
        vote_last=100,
        vote_key_dilution=10,
    )
    api = to_api_transaction(make_txn(reg))
    assert api["votekey"] == bytes([6]) * 32
    assert api["votekd"] == 10
    assert "nonpart" not in api


def test_application_call_schemas():
    call = ApplicationCallTransaction(
        app_id=5,
        accounts=[RECEIVER],
        global_state_schema=StateSchema(1, 2),
    )
    api = to_api_transaction(make_txn(call))
    assert api["apgs"] == {"nui": 1, "nbs": 2}
    assert api["apat"] == [RECEIVER.public_key]
    assert "apls" not in api
    assert api["apan"] == 0


def test_signed_single():
    txn = make_txn()
    signed = SignedTransaction(txn, txn.id(), bytes([8]) * 64)
    api = to_api_signed_transaction(signed)
    assert list(api) == ["sig", "txn"]
    assert api["sig"] == bytes([8]) * 64
    assert msgpack.unpackb(to_msg_pack(signed), raw=False) == api


def test_signed_multisig():
    msig = MultisigSignature(1, 1, (MultisigSubsig(bytes(32), bytes([1]) * 64), MultisigSubsig(bytes([2]) * 32)))
    txn = make_txn()
    api = to_api_signed_transaction(SignedTransaction(txn, txn.id(), msig))
    assert list(api) == ["msig", "txn"]
    assert api["msig"]["thr"] == 1
    assert api["msig"]["subsig"][1] == {"pk": bytes([2]) * 32}


def test_signed_logic_contract_account():
    logic = SignedLogic(CompiledTeal(b"\x01\x20"), args=(b"a",))
    assert to_api_signed_logic(logic) == {"l": b"\x01\x20", "arg": [b"a"], "sig": None, "msig": None}
    txn = make_txn()
    api = to_api_signed_transaction(SignedTransaction(txn, txn.id(), logic))
    assert list(api) == ["lsig", "txn"]


def test_signed_logic_delegated():
    logic = SignedLogic(CompiledTeal(b"\x01"), sig=bytes([4]) * 64)
    api = to_api_signed_logic(logic)
    assert api["sig"] == bytes([4]) * 64
    assert api["msig"] is None


def test_plain_value_wire_bytes():
    assert to_msg_pack({"a": 1}) == b"\x81\xa1a\x01"


def test_unencodable_raises():
    with pytest.raises(EncodeError):
        to_msg_pack(object())
    with pytest.raises(EncodeError):
        to_msg_pack({"x": 2**70})