"""
Exceptions raised by the renderer control layer.
"""

from typing import Optional


class RendererError(Exception):
    """Base class for all renderer control errors."""


class CapabilityMissing(RendererError):
    """The device does not advertise a required service type."""

    def __init__(self, required_type: str):
        super().__init__(f"Description for service {required_type} not found")
        self.required_type = required_type


class InvalidArgument(RendererError, ValueError):
    """A caller supplied an argument the remote action cannot accept."""


class RemoteActionFault(RendererError):
    """
    A remote action failed in the transport or on the device.

    Args:
        code: UPnP error code reported by the device, or None for
            transport-level failures (timeouts, lost connections, bad responses)
        message: Fault description
        action: Name of the action that failed, when known
    """

    def __init__(self, code: Optional[int], message: str, action: Optional[str] = None):
        super().__init__(code, message)
        self.code = code
        self.message = message
        self.action = action

    def __str__(self) -> str:
        prefix = f"{self.action} failed" if self.action else "Remote action failed"
        if self.code is None:
            return f"{prefix}: {self.message}"
        return f"{prefix} with UPnP error {self.code}: {self.message}"
