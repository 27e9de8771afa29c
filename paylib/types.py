from datetime import datetime, timezone
from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from paylib.enums import (
    DisputeReason,
    DisputeStatus,
    PlanInterval,
    SubscriptionStatus,
)


def coerce_timestamp_to_datetime(ts: Any) -> Any:
    """Converts a Unix timestamp (in seconds) to a UTC datetime object."""
    if isinstance(ts, int) and not isinstance(ts, bool):
        return datetime.fromtimestamp(ts, tz=timezone.utc)
    return ts


Timestamp = Annotated[datetime, BeforeValidator(coerce_timestamp_to_datetime)]


class APIObject(BaseModel):
    """Base for every value returned by the API; instances are read-only snapshots."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class ListMeta(APIObject):
    """Metadata describing one page of a list response."""

    total_count: Annotated[
        int | None,
        Field(description="Total number of objects, when requested with include[]=total_count."),
    ] = None
    has_more: Annotated[
        bool, Field(description="Whether more objects exist past this page.")
    ] = False
    url: Annotated[str | None, Field(description="The URL of the list endpoint.")] = None


class ListResponse(ListMeta):
    @property
    def meta(self) -> ListMeta:
        return ListMeta(
            total_count=self.total_count, has_more=self.has_more, url=self.url
        )


class DeleteResponse(APIObject):
    id: str
    deleted: bool


class Plan(APIObject):
    id: str
    object: Literal["plan"] = "plan"
    livemode: bool = False
    amount: int
    currency: str
    interval: PlanInterval
    interval_count: int = 1
    name: str
    created: Timestamp | None = None
    trial_period_days: int | None = None
    statement_description: str | None = None
    metadata: dict[str, str] = {}


class PlanListResponse(ListResponse):
    data: list[Plan]


class Discount(APIObject):
    coupon: dict[str, Any]
    customer: str | None = None
    start: Timestamp | None = None
    end: Timestamp | None = None


class Subscription(APIObject):
    """Subscription of a customer to a plan."""

    id: Annotated[str, Field(description="Unique identifier for the object.")]
    object: Literal["subscription"] = "subscription"
    plan: Annotated[Plan, Field(description="The plan the customer is subscribed to.")]
    customer: Annotated[
        str, Field(description="ID of the customer who owns the subscription.")
    ]
    status: SubscriptionStatus
    quantity: int = 1
    start: Timestamp | None = None
    cancel_at_period_end: Annotated[
        bool,
        Field(
            description="Whether the subscription will cancel at the end of the current billing period."
        ),
    ] = False
    canceled_at: Timestamp | None = None
    ended_at: Timestamp | None = None
    current_period_start: Timestamp | None = None
    current_period_end: Timestamp | None = None
    trial_start: Timestamp | None = None
    trial_end: Timestamp | None = None
    application_fee_percent: Annotated[
        float | None,
        Field(
            description="Percentage of each invoice total transferred to the application owner."
        ),
    ] = None
    discount: Discount | None = None
    metadata: dict[str, str] = {}


class SubscriptionListResponse(ListResponse):
    data: list[Subscription]


class Dispute(APIObject):
    id: str | None = None
    object: Literal["dispute"] = "dispute"
    livemode: bool = False
    amount: int
    currency: str
    charge: str
    created: Timestamp | None = None
    reason: DisputeReason
    status: DisputeStatus
    balance_transactions: list[dict[str, Any]] = []
    evidence: str | None = None
    evidence_due_by: Timestamp | None = None
    metadata: dict[str, str] = {}


class EventData(APIObject):
    object: Annotated[
        dict[str, Any], Field(description="The object the event is about.")
    ]
    previous_attributes: Annotated[
        dict[str, Any] | None,
        Field(description="Values of the attributes changed by an update event."),
    ] = None


def _lookup(values: dict[str, Any] | None, keys: tuple[str, ...]) -> str:
    node: Any = values
    for key in keys:
        if not isinstance(node, dict):
            return ""
        node = node.get(key)
    if node is None:
        return ""
    return node if isinstance(node, str) else str(node)


class Event(APIObject):
    """Notification that something happened on the account."""

    id: str
    object: Literal["event"] = "event"
    livemode: bool = False
    created: Timestamp | None = None
    data: EventData
    pending_webhooks: int = 0
    type: str
    request: str | None = None

    def get_obj_value(self, *keys: str) -> str:
        """
        Returns the value found by walking ``data.object`` through ``keys``.

        Missing keys, and values nested under a non-dict, give "". Non-string
        leaves are returned as their string form.
        """
        return _lookup(self.data.object, keys)

    def get_prev_value(self, *keys: str) -> str:
        """Same as get_obj_value() but over ``data.previous_attributes``."""
        return _lookup(self.data.previous_attributes, keys)


class EventListResponse(ListResponse):
    data: list[Event]


__all__ = [
    "coerce_timestamp_to_datetime",
    "APIObject",
    "ListMeta",
    "ListResponse",
    "DeleteResponse",
    "Plan",
    "PlanListResponse",
    "Discount",
    "Subscription",
    "SubscriptionListResponse",
    "Dispute",
    "EventData",
    "Event",
    "EventListResponse",
]
