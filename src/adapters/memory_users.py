from collections.abc import Iterable, Mapping
from typing import Any


class InMemoryUserSource:
    """
    User source backed by a dict of raw records keyed by id.

    Records are copied on the way in and out so callers cannot mutate
    stored state through a returned mapping.
    """

    def __init__(self, records: Iterable[Mapping[str, Any]] = ()) -> None:
        self._records: dict[str, dict[str, Any]] = {}
        for record in records:
            self.add(record)

    def add(self, record: Mapping[str, Any]) -> None:
        user_id = record.get("id")
        if not user_id:
            raise ValueError("User record must have an id")
        self._records[str(user_id)] = dict(record)

    def get_by_id(self, user_id: str) -> Mapping[str, Any] | None:
        record = self._records.get(str(user_id))
        return dict(record) if record is not None else None

    def list_all(self) -> list[Mapping[str, Any]]:
        return [dict(r) for r in self._records.values()]
