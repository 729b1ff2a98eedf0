# algotxn

A small library for building Algorand transactions offline. It covers
creating them, encoding them in the canonical msgpack form the network
expects, grouping them for atomic transfer, and signing them with ed25519
keys. It needs no node and no network connection.

## Installation

```
pip install algotxn
```

## Addresses

`algotxn.transaction.Address` holds a 32 byte public key. `str(address)`
gives the checksummed base32 form, and `Address.from_string(text)` parses
it back. It raises `ValueError` if the length, checksum or form is wrong.

## Building a payment

```python
from algotxn.account import Account
from algotxn.builder import Pay, TxnBuilder

sender = Account.generate()
receiver = Account.generate()

txn = (
    TxnBuilder()
    .sender(sender.address)
    .first_valid(1000)
    .last_valid(2000)
    .genesis_id("testnet-v1.0")
    .genesis_hash(bytes(32))
    .fee(1000)
    .payment(Pay().to(receiver.address).amount(123_456).build())
    .build()
)

print(txn.id())
```

There is a builder for every transaction kind in `algotxn.builder`: `Pay`,
`RegisterKey`, `ConfigureAsset`, `TransferAsset`, `AcceptAsset`,
`ClawbackAsset`, `FreezeAsset` and `CallApplication`. If a required field is
missing, `build()` raises `ValueError`. For `TxnBuilder` the required fields
are the sender, the genesis hash and the transaction kind.

`txn.fee_per_byte(10)` returns a copy of the transaction. The copy's fee is
the rate times the estimated size of the signed, encoded transaction, and it
is never below the minimum of 1000 microAlgos.

`txn.bytes_to_sign()`, `txn.raw_id()` and `txn.id()` give, in order:

- the `TX`-prefixed encoding that signatures cover;
- its SHA-512/256 digest;
- that digest in base32.

## Encoding

```python
from algotxn.encoding import to_msg_pack

raw = to_msg_pack(txn)
```

`to_msg_pack` accepts a `Transaction`, a `SignedTransaction` or plain data.
Transaction maps have their keys sorted, and keys with no value are left out.
If encoding fails, `EncodeError` is raised. The wire maps themselves come
from `to_api_transaction`, `to_api_signed_transaction`,
`to_api_signed_logic` and `to_api_asset_params`.

## Signing

```python
from algotxn.encoding import to_msg_pack

signed = sender.sign_transaction(txn)
raw = to_msg_pack(signed)   # bytes ready to broadcast
```

An account can also be derived from a seed with `Account.from_seed(seed)`,
where the seed is 32 bytes. Its `seed` and `address` are read-only
properties.

### Multisig

Start the signature with `init_transaction_msig`. Each other participant
then adds its signature with `append_to_transaction_msig`:

```python
from algotxn.transaction import MultisigAddress

first, second = Account.generate(), Account.generate()
multisig = MultisigAddress(
    version=1,
    threshold=2,
    public_keys=(first.address.public_key, second.address.public_key),
)
# txn must have multisig.address() as its sender
msig = first.init_transaction_msig(txn, multisig)
msig = second.append_to_transaction_msig(txn, msig)
```

Two errors can be raised here:

- `InvalidSenderInMultisigError` if the transaction sender is not the
  multisig address;
- `InvalidSecretKeyInMultisigError` if the account is not a participant.

`sign_multisig_transaction(multisig, txn)` wraps the first signature in a
`SignedTransaction`.

### Logic signatures and bids

Logic signatures work the same way, through `init_logic_msig` and
`append_to_logic_msig`. `generate_program_sig` signs a `CompiledTeal`
program. `sign_bid` signs an `algotxn.auction.Bid` and returns a
`SignedBid`.

## Atomic groups

```python
from algotxn.tx_group import TxGroup, compute_group_id

TxGroup.assign_group_id([txn_a, txn_b])
```

This call sets the same group id on every transaction.
`compute_group_id(txns)` only returns the id. A group must hold from 1 to 16
transactions. Otherwise `EmptyTransactionListError` or
`MaxTransactionGroupSizeError` is raised.

## Errors

Every exception the library defines is in `algotxn.errors`.
`TransactionError` is the base class for the signing, grouping and encoding
errors. `AlgonautError` and its subclasses, such as `RequestError` with
`HttpErrorDetails`, `TimeoutErrorDetails` or `ClientErrorDetails`, are
defined for client code built on top of this package. Nothing in the package
raises them itself.

## What this package does not do

It has no client for a node, a key-management daemon or an indexer. It
cannot:

- fetch transaction parameters;
- broadcast transactions;
- manage wallets;
- query accounts.

Those tasks are left to the caller, who sends the bytes from `to_msg_pack`
by other means. The package has no command-line tool. It does not convert
keys to or from mnemonic phrases, so seeds are handled only as raw bytes.