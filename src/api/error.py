from fastapi import status

from src.libs.result import Error, ErrorKind

STATUS_BY_KIND = {
    ErrorKind.not_found: status.HTTP_404_NOT_FOUND,
    ErrorKind.forbidden: status.HTTP_403_FORBIDDEN,
    ErrorKind.unauthorized: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.bad_request: status.HTTP_400_BAD_REQUEST,
    ErrorKind.conflict: status.HTTP_409_CONFLICT,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error):
    """Raise the HTTP exception matching the error kind"""
    status_code = STATUS_BY_KIND.get(error.kind)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
