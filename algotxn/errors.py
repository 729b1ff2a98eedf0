"""Exceptions raised by the client layer and by transaction handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


class AlgonautError(Exception):
    """Base class for client-level errors."""


class BadUrlError(AlgonautError):
    """The URL of the REST API server could not be parsed."""

    def __init__(self, detail: str = "") -> None:
        super().__init__("Url parsing error.")
        self.detail = detail


class BadTokenError(AlgonautError):
    """The authentication token could not be parsed."""

    def __init__(self) -> None:
        super().__init__("Token parsing error.")


class UninitializedUrlError(AlgonautError):
    """No base URL was set before building a client."""

    def __init__(self) -> None:
        super().__init__("Set an URL before calling build.")


class UninitializedTokenError(AlgonautError):
    """No authentication token was set before building a client."""

    def __init__(self) -> None:
        super().__init__("Set a token before calling build.")


class InternalError(AlgonautError):
    """An unexpected internal failure."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Internal error: {message}")
        self.message = message


@dataclass(frozen=True)
class HttpErrorDetails:
    """The remote API answered with an error status."""

    status: int
    message: str

    def __str__(self) -> str:
        return f"Http error: {self.status}, {self.message}"


@dataclass(frozen=True)
class TimeoutErrorDetails:
    """The connection to the server timed out."""

    def __str__(self) -> str:
        return "Timeout connecting to the server."


@dataclass(frozen=True)
class ClientErrorDetails:
    """The client failed while building a request or decoding a response."""

    description: str

    def __str__(self) -> str:
        return f"Client error: {self.description}"


RequestErrorDetails = Union[HttpErrorDetails, TimeoutErrorDetails, ClientErrorDetails]


class RequestError(AlgonautError):
    """An HTTP call failed."""

    def __init__(self, url: Optional[str], details: RequestErrorDetails) -> None:
        super().__init__(f"http error: {url}, {details}")
        self.url = url
        self.details = details


class TransactionError(Exception):
    """Base class for errors raised while building or signing transactions."""


class InvalidSenderInMultisigError(TransactionError):
    def __init__(self) -> None:
        super().__init__("Transaction sender does not match multisig identity.")


class InvalidSecretKeyInMultisigError(TransactionError):
    def __init__(self) -> None:
        super().__init__("Multisig identity does not contain this secret key.")


class InsufficientTransactionsError(TransactionError):
    def __init__(self) -> None:
        super().__init__("Can't merge only one transaction.")


class InvalidNumberOfSubsignaturesError(TransactionError):
    def __init__(self) -> None:
        super().__init__(
            "Multisig signatures to merge must have the same number of subsignatures."
        )


class InvalidPublicKeyInMultisigError(TransactionError):
    def __init__(self) -> None:
        super().__init__("Transaction msig public keys do not match.")


class MismatchingSignaturesError(TransactionError):
    def __init__(self) -> None:
        super().__init__("Transaction msig has mismatched signatures.")


class EmptyTransactionListError(TransactionError):
    def __init__(self) -> None:
        super().__init__("Empty transaction list.")


class MaxTransactionGroupSizeError(TransactionError):
    def __init__(self, size: int) -> None:
        super().__init__(f"Max group size is {size}.")
        self.size = size


class EncodeError(TransactionError):
    """Encoding a value to msgpack failed."""

    def __init__(self, cause: object) -> None:
        super().__init__(f"encode error {cause}")
        self.cause = cause


class MnemonicError(TransactionError):
    """A mnemonic or key could not be converted."""

    def __init__(self, cause: object) -> None:
        super().__init__(f"crypto error {cause}")
        self.cause = cause