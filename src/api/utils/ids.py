from uuid import UUID

from fastapi import status

from src.api.error import ClientError
from src.libs.result import Error


def parse_id(raw: str, not_found: Error) -> UUID:
    """Path ids that are not UUIDs name nothing, so they are reported as not found"""
    try:
        return UUID(raw)
    except ValueError:
        raise ClientError(not_found, status_code=status.HTTP_404_NOT_FOUND)
