from paylib.resources.base import Client
from paylib.resources.dispute import DisputeClient, DisputeParams
from paylib.resources.event import EventClient, EventListParams
from paylib.resources.plan import (
    PlanClient,
    PlanListParams,
    PlanParams,
    PlanUpdateParams,
)
from paylib.resources.sub import (
    SubscriptionClient,
    SubscriptionListParams,
    SubscriptionParams,
)

__all__ = [
    "Client",
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
]
