from paylib.encoding import Form, ListParams, encode_params
from paylib.iterator import Iter
from paylib.resources.base import Client
from paylib.types import Event, EventListResponse, ListMeta


class EventListParams(ListParams):
    """
    Filters for listing events.

    ``type`` is an event type such as ``customer.subscription.updated``;
    range filters on ``created`` go through ``filters``
    (e.g. ``Filters().add_filter("created", "gte", 1400000000)``).
    """

    created: int | None = None
    type: str | None = None

    def append_to(self, form: Form) -> None:
        super().append_to(form)
        if self.created is not None:
            form.add("created", self.created)
        if self.type is not None:
            form.add("type", self.type)


class EventClient(Client):
    """Client for the /events endpoints."""

    def get(self, event_id: str) -> Event:
        return self.backend.call("GET", f"/events/{event_id}", self.key, None, Event)

    def list(self, params: EventListParams | None = None) -> Iter[Event]:
        """Iterate over every event (GET /events), most recent first."""

        def fetch(form: Form) -> tuple[list[Event], ListMeta]:
            page = self.backend.call("GET", "/events", self.key, form, EventListResponse)
            return page.data, page.meta

        return Iter(params, encode_params(params), fetch)


__all__ = ["EventListParams", "EventClient"]
