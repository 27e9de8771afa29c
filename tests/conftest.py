"""
Pytest configuration and shared fixtures.

Provides a mocked backend for the resource clients, a paged fetch function
for the list iterator, and isolation of the process-wide default config.
"""

from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest

from paylib.backend import HttpBackend
from paylib.config import reset_default_config
from paylib.encoding import Form
from paylib.exceptions import NetworkException
from paylib.types import ListMeta

TEST_KEY = "sk_test_123"


@dataclass(frozen=True)
class Item:
    id: str


def make_items(count: int) -> list[Item]:
    """Create ``count`` items with ids item_1 .. item_N."""
    return [Item(id=f"item_{n}") for n in range(1, count + 1)]


class Pager:
    """
    Fake page-fetch function over a fixed list of items.

    Honors ``limit``, ``starting_after`` and ``ending_before`` the way the API
    does, records every request form, and can fail on a given page number.
    """

    def __init__(
        self,
        items: list[Item],
        page_size: int = 10,
        fail_on_page: int | None = None,
    ):
        self.items = items
        self.page_size = page_size
        self.fail_on_page = fail_on_page
        self.forms: list[Form] = []

    def _index(self, item_id: str) -> int:
        return next(i for i, item in enumerate(self.items) if item.id == item_id)

    def __call__(self, form: Form) -> tuple[list[Item], ListMeta]:
        self.forms.append(form)
        if self.fail_on_page == len(self.forms):
            raise NetworkException(details={"page": len(self.forms)})

        size = int(form.get("limit") or self.page_size)
        after = form.get("starting_after")
        before = form.get("ending_before")
        if before is not None:
            end = self._index(before)
            start = max(0, end - size)
            return self.items[start:end], ListMeta(has_more=start > 0)

        start = 0 if after is None else self._index(after) + 1
        page = self.items[start : start + size]
        return page, ListMeta(
            has_more=start + size < len(self.items),
            total_count=len(self.items),
            url="/v1/items",
        )


@pytest.fixture(autouse=True)
def isolate_default_config():
    """Make sure no test leaks its configure() call into the next one."""
    reset_default_config()
    yield
    reset_default_config()


@pytest.fixture
def backend():
    """A mocked Backend whose ``call`` can be configured per test."""
    return MagicMock(spec=HttpBackend)


def form_sent(backend_mock: MagicMock, call_index: int = -1) -> Form | None:
    """Return the form passed to the backend on a given call."""
    return backend_mock.call.call_args_list[call_index].args[3]


@pytest.fixture
def items():
    """Factory building ``count`` items with ids item_1 .. item_N."""
    return make_items


@pytest.fixture
def pager():
    """Factory building a Pager over the given items."""
    return Pager


@pytest.fixture
def sent_form():
    """Helper returning the form a mocked backend received."""
    return form_sent
