from .service import NodeService

__all__ = ["NodeService"]
