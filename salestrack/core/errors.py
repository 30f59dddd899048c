class ServiceError(Exception):
    status_code = 400

    def __init__(self, detail):
        super().__init__(detail)
        self.detail = detail


class NotFound(ServiceError):
    status_code = 404


class InvalidOwner(ServiceError):
    status_code = 400


class Forbidden(ServiceError):
    status_code = 403


class IdMismatch(ServiceError):
    status_code = 400


class StaleWrite(ServiceError):
    status_code = 409


class AccountError(ServiceError):
    pass


class RegistrationError(AccountError):
    status_code = 400


class InvalidCredentials(AccountError):
    status_code = 401


__all__ = [
    "AccountError",
    "Forbidden",
    "IdMismatch",
    "InvalidCredentials",
    "InvalidOwner",
    "NotFound",
    "RegistrationError",
    "ServiceError",
    "StaleWrite",
]
