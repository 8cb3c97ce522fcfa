"""Data models for systemd service units."""

from .service import ActiveState, EnabledState, ServiceHandle, ServiceInfo

__all__ = ["ActiveState", "EnabledState", "ServiceHandle", "ServiceInfo"]
