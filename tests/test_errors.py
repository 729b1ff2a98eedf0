import pytest

from algotxn.errors import (
    AlgonautError,
    BadTokenError,
    BadUrlError,
    ClientErrorDetails,
    EmptyTransactionListError,
    EncodeError,
    HttpErrorDetails,
    InsufficientTransactionsError,
    InternalError,
    InvalidNumberOfSubsignaturesError,
    InvalidPublicKeyInMultisigError,
    InvalidSecretKeyInMultisigError,
    InvalidSenderInMultisigError,
    MaxTransactionGroupSizeError,
    MismatchingSignaturesError,
    MnemonicError,
    RequestError,
    TimeoutErrorDetails,
    TransactionError,
    UninitializedTokenError,
    UninitializedUrlError,
)


@pytest.mark.parametrize(
    "error, message",
    [
        (InvalidSenderInMultisigError(), "Transaction sender does not match multisig identity."),
        (InvalidSecretKeyInMultisigError(), "Multisig identity does not contain this secret key."),
        (InsufficientTransactionsError(), "Can't merge only one transaction."),
        (
            InvalidNumberOfSubsignaturesError(),
            "Multisig signatures to merge must have the same number of subsignatures.",
        ),
        (InvalidPublicKeyInMultisigError(), "Transaction msig public keys do not match."),
        (MismatchingSignaturesError(), "Transaction msig has mismatched signatures."),
        (EmptyTransactionListError(), "Empty transaction list."),
    ],
)
def test_transaction_error_messages(error, message):
    assert str(error) == message
    assert isinstance(error, TransactionError)


def test_max_group_size_error():
    error = MaxTransactionGroupSizeError(16)
    assert error.size == 16
    assert str(error) == "Max group size is 16."


@pytest.mark.parametrize(
    "error, message",
    [
        (BadTokenError(), "Token parsing error."),
        (UninitializedUrlError(), "Set an URL before calling build."),
        (UninitializedTokenError(), "Set a token before calling build."),
    ],
)
def test_client_error_messages(error, message):
    assert str(error) == message
    assert isinstance(error, AlgonautError)


def test_bad_url_keeps_detail():
    error = BadUrlError("no scheme")
    assert str(error) == "Url parsing error."
    assert error.detail == "no scheme"


def test_internal_error_message():
    error = InternalError("boom")
    assert str(error) == "Internal error: boom"
    assert error.message == "boom"


def test_http_details_message():
    assert str(HttpErrorDetails(404, "not found")) == "Http error: 404, not found"


def test_timeout_and_client_details():
    assert str(TimeoutErrorDetails()) == "Timeout connecting to the server."
    assert str(ClientErrorDetails("bad body")).endswith("bad body")


def test_request_error_carries_url_and_details():
    details = ClientErrorDetails("decode failure")
    error = RequestError("http://example.com", details)
    assert isinstance(error, AlgonautError)
    assert error.url == "http://example.com"
    assert error.details is details
    assert str(details) in str(error)
    assert str(error).startswith("http error: ")


def test_request_error_is_catchable():
    details = TimeoutErrorDetails()
    error = RequestError(None, details)
    with pytest.raises(AlgonautError) as info:
        raise error
    assert info.value.details is details
    assert "Timeout connecting to the server." in str(info.value)
    assert str(info.value).startswith("http error: ")


def test_encode_and_mnemonic_errors_keep_cause():
    cause = ValueError("bad")
    encode = EncodeError(cause)
    mnemonic = MnemonicError("wrong checksum")
    assert encode.cause is cause
    assert "bad" in str(encode)
    assert mnemonic.cause == "wrong checksum"
    assert "wrong checksum" in str(mnemonic)
    assert isinstance(mnemonic, TransactionError)