from collections import deque
from operator import attrgetter
from typing import Callable, Generic, Iterator, TypeVar

from paylib.config import client_logger
from paylib.encoding import Form, ListParams, encode_params
from paylib.types import ListMeta

T = TypeVar("T")

PageFetcher = Callable[[Form], tuple[list[T], ListMeta]]


class Iter(Generic[T]):
    """
    Lazy, forward-only iterator over every object of a list endpoint.

    ``form`` is the encoded request body; when None it is built from ``params``.
    ``fetch`` retrieves one page for an encoded request body and returns its
    items together with the page's ListMeta. Pages are requested on demand:
    nothing is fetched until the first item is asked for, and the next page is
    only requested once the current one has been fully consumed and the API
    reported ``has_more``. The id of the last item handed out becomes the
    cursor (``starting_after``, or ``ending_before`` when paging backward).

    Usage::

        for plan in client.list(ListParams(limit=10)):
            ...

    A failed fetch is raised from ``next()`` and makes the iterator terminal:
    every later ``next()`` raises the same error again. An iterator cannot be
    rewound; call ``list()`` again for a fresh one. Not safe for concurrent use.
    """

    def __init__(
        self,
        params: ListParams | None,
        form: Form | None,
        fetch: PageFetcher[T],
        id_of: Callable[[T], str] = attrgetter("id"),
    ) -> None:
        self._params: ListParams = params if params is not None else ListParams()
        self._form: Form = (
            form.copy() if form is not None else encode_params(self._params)
        )
        self._fetch = fetch
        self._id_of = id_of

        self._values: deque[T] = deque()
        self._meta: ListMeta | None = None
        self._err: Exception | None = None
        self._last: T | None = None
        self._fetched: bool = False
        # Set once a page comes back empty; no cursor can move past it
        self._drained: bool = False

    @property
    def backward(self) -> bool:
        return self._params.is_backward

    @property
    def meta(self) -> ListMeta | None:
        """Metadata of the most recently fetched page, None before the first fetch."""
        return self._meta

    @property
    def err(self) -> Exception | None:
        return self._err

    @property
    def stopped(self) -> bool:
        """True once no more items can be obtained: exhausted, or failed."""
        if self._err is not None:
            return True
        if self._values or not self._fetched:
            return False
        return not self._can_advance()

    def _can_advance(self) -> bool:
        return (
            self._meta is not None
            and self._meta.has_more
            and not self._drained
            and self._last is not None
        )

    def _get_page(self) -> None:
        if self._fetched:
            cursor = self._id_of(self._last)  # type: ignore[arg-type]
            self._form.set("ending_before" if self.backward else "starting_after", cursor)

        try:
            values, meta = self._fetch(self._form.copy())
        except Exception as exc:
            self._err = exc
            self._values.clear()
            client_logger.warning(
                f"List iteration stopped after page fetch failed: {exc.__class__.__name__}: {exc}"
            )
            raise

        self._fetched = True
        self._meta = meta
        if not values:
            self._drained = True
        if self.backward:
            values = list(reversed(values))
        self._values.extend(values)
        client_logger.debug(
            f"Fetched page of {len(values)} items (has_more={meta.has_more})"
        )

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self._err is not None:
            raise self._err

        if not self._values:
            if not self._fetched or self._can_advance():
                self._get_page()
            if not self._values:
                raise StopIteration

        item = self._values.popleft()
        self._last = item
        return item

    def next(self) -> T:
        """Same as the builtin next(); raises StopIteration once exhausted."""
        return self.__next__()


__all__ = ["Iter", "PageFetcher"]
