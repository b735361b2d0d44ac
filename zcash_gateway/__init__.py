"""HTTP gateway over a Zcash node's JSON-RPC interface."""

__version__ = "0.1.0"
