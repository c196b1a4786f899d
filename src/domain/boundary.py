from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from src.domain.entities import UserSnapshot


class AccessInputError(ValueError):
    """
    Raised when a user record cannot be interpreted.

    Unknown roles or statuses are rejected here instead of defaulting,
    since a guessed value could over- or under-grant capabilities.
    """


def parse_user_snapshot(record: UserSnapshot | Mapping[str, Any]) -> UserSnapshot:
    """
    Normalize a raw store record (camelCase or snake_case keys) into a snapshot.
    Raises AccessInputError if the record is malformed.
    """
    if isinstance(record, UserSnapshot):
        return record

    try:
        return UserSnapshot.model_validate(dict(record))
    except ValidationError as e:
        ident = record.get("id", "<unknown>")
        raise AccessInputError(f"Invalid user record {ident}:\n{e}") from e
