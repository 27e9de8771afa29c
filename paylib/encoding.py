from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Iterator
from urllib.parse import urlencode

from pydantic import BaseModel, Field

# Largest page the API will return
MAX_LIST_LIMIT: int = 100


def format_value(value: Any) -> str:
    """
    Converts a parameter value into its form-encoded string.

    Booleans become the literals "true"/"false", integers their decimal
    representation and enum members their value. Anything else is passed
    through str().
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return format_value(value.value)
    return str(value)


def format_percent(value: float | Decimal) -> str:
    """Formats a percentage with exactly two decimal digits (e.g. 12.5 -> "12.50")."""
    return f"{value:.2f}"


class Form:
    """
    Ordered multi-value key/value body sent with a request.

    Keys keep their insertion order and each key may carry several values,
    so repeated keys such as ``expand[]`` encode as ``expand[]=a&expand[]=b``.
    """

    def __init__(self, values: dict[str, list[str]] | None = None) -> None:
        self._values: dict[str, list[str]] = {}
        if values:
            for key, items in values.items():
                self._values[key] = list(items)

    def add(self, key: str, value: Any) -> None:
        self._values.setdefault(key, []).append(format_value(value))

    def set(self, key: str, value: Any) -> None:
        self._values[key] = [format_value(value)]

    def delete(self, key: str) -> None:
        self._values.pop(key, None)

    def get(self, key: str) -> str | None:
        items = self._values.get(key)
        return items[0] if items else None

    def get_all(self, key: str) -> list[str]:
        return list(self._values.get(key, []))

    def add_nested(
        self,
        prefix: str,
        data: dict[str, Any],
        *,
        max_depth: int = 3,
        _current_depth: int = 0,
    ) -> None:
        """
        Flatten a nested dict into the API's bracket notation.

        Example:
            data = {"metadata": {"user_id": "123"}}
            prefix = "subscription"
            Result: form["subscription[metadata][user_id]"] == ["123"]

        Lists of dicts are indexed (``key[0][field]``) and lists of plain
        values likewise (``key[0]``). None values are skipped, since they mean
        "not set". Past ``max_depth`` the remaining value is stringified.
        """
        for key, value in data.items():
            if value is None:
                continue
            full_key = f"{prefix}[{key}]"
            if _current_depth >= max_depth:
                self.add(full_key, value)
            elif isinstance(value, dict):
                self.add_nested(
                    full_key,
                    value,
                    max_depth=max_depth,
                    _current_depth=_current_depth + 1,
                )
            elif isinstance(value, list):
                for idx, item in enumerate(value):
                    if isinstance(item, dict):
                        self.add_nested(
                            f"{full_key}[{idx}]",
                            item,
                            max_depth=max_depth,
                            _current_depth=_current_depth + 1,
                        )
                    elif item is not None:
                        self.add(f"{full_key}[{idx}]", item)
            else:
                self.add(full_key, value)

    def items(self) -> list[tuple[str, str]]:
        return [(key, value) for key, values in self._values.items() for value in values]

    def keys(self) -> list[str]:
        return list(self._values)

    def to_dict(self) -> dict[str, list[str]]:
        return {key: list(values) for key, values in self._values.items()}

    def copy(self) -> "Form":
        return Form(self._values)

    def encode(self) -> str:
        return urlencode(self.items())

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return bool(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Form):
            return self._values == other._values
        if isinstance(other, dict):
            return self._values == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Form({self._values!r})"


class Params(BaseModel):
    """Fields every request accepts: metadata and response expansion."""

    metadata: dict[str, str] | None = None
    expand: list[str] | None = None

    def append_to(self, form: Form) -> None:
        if self.metadata:
            form.add_nested("metadata", self.metadata)
        for field in self.expand or []:
            form.add("expand[]", field)


class Filter(BaseModel):
    key: str
    op: str = ""
    value: str


class Filters(BaseModel):
    """Ordered set of list filters such as ``created[gte]=1400000000``."""

    entries: list[Filter] = []

    def add_filter(self, key: str, op: str, value: Any) -> "Filters":
        self.entries.append(Filter(key=key, op=op, value=format_value(value)))
        return self

    def append_to(self, form: Form) -> None:
        for entry in self.entries:
            if entry.op:
                form.add(f"{entry.key}[{entry.op}]", entry.value)
            else:
                form.add(entry.key, entry.value)


class ListParams(Params):
    """
    Paging controls shared by every list operation.

    ``after`` and ``before`` are object ids used as cursors. Only one direction
    is applied per request; when both are given ``after`` wins.
    """

    after: str | None = None
    before: str | None = None
    limit: Annotated[int | None, Field(gt=0)] = None
    filters: Filters | None = None

    @property
    def is_backward(self) -> bool:
        return self.before is not None and self.after is None

    def append_to(self, form: Form) -> None:
        super().append_to(form)
        if self.after is not None:
            form.add("starting_after", self.after)
        elif self.before is not None:
            form.add("ending_before", self.before)
        if self.limit is not None:
            form.add("limit", min(self.limit, MAX_LIST_LIMIT))
        if self.filters is not None:
            self.filters.append_to(form)


def encode_params(params: Params | None) -> Form | None:
    """Encodes params that only carry the shared fields; None means no body."""
    if params is None:
        return None
    form = Form()
    params.append_to(form)
    return form


__all__ = [
    "MAX_LIST_LIMIT",
    "format_value",
    "format_percent",
    "Form",
    "Params",
    "Filter",
    "Filters",
    "ListParams",
    "encode_params",
]
