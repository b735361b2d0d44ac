from .client import HttpRpcChannel

__all__ = ["HttpRpcChannel"]
