"""
Domain Exceptions
"""

from typing import Optional


class FulfilloError(Exception):
    """Base class for all dashboard errors"""


class AuthenticationError(FulfilloError):
    """Raised when credentials do not match an active account.

    The message is deliberately generic: a wrong password and a suspended
    account produce the same error.
    """


class PermissionDeniedError(FulfilloError):
    """Raised when a role attempts an action it has no capability for"""

    def __init__(self, action: str, role: Optional[str] = None):
        self.action = action
        self.role = role
        super().__init__(f"Role {role} is not permitted to {action}")


class InvalidTransitionError(FulfilloError):
    """Raised by the validated status advance for an out-of-order move"""

    def __init__(self, order_id: str, current: str, requested: str):
        self.order_id = order_id
        self.current = current
        self.requested = requested
        super().__init__(
            f"Order {order_id} cannot move from {current} to {requested}"
        )


class InquiryClosedError(FulfilloError):
    """Raised when reviewing an inquiry that is no longer NEW"""

    def __init__(self, inquiry_id: str, status: str):
        self.inquiry_id = inquiry_id
        self.status = status
        super().__init__(f"Inquiry {inquiry_id} is already {status}")
