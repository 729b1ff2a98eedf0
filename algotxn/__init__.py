"""Build, encode, group and sign Algorand transactions offline."""

__version__ = "0.1.0"

__all__ = ["account", "auction", "builder", "encoding", "errors", "transaction", "tx_group"]