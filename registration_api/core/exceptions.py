# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Error taxonomy shared by services and controllers.

Services raise ``ServiceError`` subclasses; ``main.py`` renders them as
``{"message": ...}`` with the carried status code.
"""


class ServiceError(Exception):
    status_code: int = 500
    default_message: str = "Server error. Please try again."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationConflict(ServiceError):
    """Duplicate registration, already-marked or missing session."""
    status_code = 400
    default_message = "Request conflicts with existing data."


class InvalidInput(ServiceError):
    status_code = 422
    default_message = "Invalid request."


class NotFound(ServiceError):
    status_code = 404
    default_message = "Not found."


class ServerError(ServiceError):
    status_code = 500


class MailDeliveryError(Exception):
    """The SMTP relay refused or failed to deliver a message."""


class PaymentGatewayError(Exception):
    """The payment provider failed to create a checkout session."""
