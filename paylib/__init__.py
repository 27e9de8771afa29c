"""Client library for the payments REST API: plans, subscriptions, disputes and events."""

from paylib.backend import Backend, HttpBackend
from paylib.card import CardParams
from paylib.config import ClientConfig, configure, get_default_config
from paylib.encoding import Filters, Form, ListParams, Params
from paylib.enums import DisputeReason, DisputeStatus, PlanInterval, SubscriptionStatus
from paylib.iterator import Iter
from paylib.resources import (
    DisputeClient,
    DisputeParams,
    EventClient,
    EventListParams,
    PlanClient,
    PlanListParams,
    PlanParams,
    PlanUpdateParams,
    SubscriptionClient,
    SubscriptionListParams,
    SubscriptionParams,
)
from paylib.types import (
    DeleteResponse,
    Dispute,
    Event,
    EventData,
    ListMeta,
    Plan,
    Subscription,
)

__version__ = "0.1.0"

__all__ = [
    "Backend",
    "HttpBackend",
    "CardParams",
    "ClientConfig",
    "configure",
    "get_default_config",
    "Filters",
    "Form",
    "ListParams",
    "Params",
    "DisputeReason",
    "DisputeStatus",
    "PlanInterval",
    "SubscriptionStatus",
    "Iter",
    "DisputeClient",
    "DisputeParams",
    "EventClient",
    "EventListParams",
    "PlanClient",
    "PlanListParams",
    "PlanParams",
    "PlanUpdateParams",
    "SubscriptionClient",
    "SubscriptionListParams",
    "SubscriptionParams",
    "DeleteResponse",
    "Dispute",
    "Event",
    "EventData",
    "ListMeta",
    "Plan",
    "Subscription",
]
