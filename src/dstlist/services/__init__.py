from .dst_service import SERVICE_NAME, DSTService

__all__ = ["DSTService", "SERVICE_NAME"]
