from typing import Literal

from paylib.card import CardParams
from paylib.encoding import Form, ListParams, Params, encode_params, format_percent
from paylib.iterator import Iter
from paylib.resources.base import Client
from paylib.types import ListMeta, Subscription, SubscriptionListResponse


class SubscriptionParams(Params):
    """
    Parameters for the subscription operations.

    ``customer`` only selects the request path and is never part of the body.
    A plain ``token`` takes precedence over ``card``.
    """

    customer: str
    plan: str | None = None
    token: str | None = None
    card: CardParams | None = None
    coupon: str | None = None
    trial_end: int | Literal["now"] | None = None
    quantity: int | None = None
    application_fee_percent: float | None = None
    no_prorate: bool = False
    at_period_end: bool = False


class SubscriptionListParams(ListParams):
    customer: str


def _subscription_path(customer: str, subscription_id: str | None = None) -> str:
    path = f"/customers/{customer}/subscriptions"
    if subscription_id is not None:
        path = f"{path}/{subscription_id}"
    return path


def _append_billing(form: Form, params: SubscriptionParams) -> None:
    if params.coupon is not None:
        form.add("coupon", params.coupon)
    if params.trial_end is not None:
        form.add("trial_end", params.trial_end)
    if params.quantity is not None:
        form.add("quantity", params.quantity)
    if params.application_fee_percent is not None:
        form.add(
            "application_fee_percent", format_percent(params.application_fee_percent)
        )


class SubscriptionClient(Client):
    """Client for the /customers/{customer}/subscriptions endpoints."""

    def create(self, params: SubscriptionParams) -> Subscription:
        """
        Subscribe a customer to a plan.

        Sends POST /customers/{customer}/subscriptions. The body carries the
        plan, then the card (a token, or the card details), coupon, trial_end,
        quantity and application_fee_percent when set. The fee percentage is
        sent with exactly two decimals.

        Parameters
        ----------
        params : SubscriptionParams
            ``customer`` and ``plan`` are required by the API.

        Returns
        -------
        Subscription
            The created subscription.
        """
        form = Form()
        if params.plan is not None:
            form.add("plan", params.plan)

        if params.token:
            form.add("card", params.token)
        elif params.card is not None:
            params.card.append_details(form, creating=True)

        _append_billing(form, params)
        params.append_to(form)

        return self.backend.call(
            "POST", _subscription_path(params.customer), self.key, form, Subscription
        )

    def get(self, subscription_id: str, params: SubscriptionParams) -> Subscription:
        """Retrieve one of a customer's subscriptions."""
        form = Form()
        params.append_to(form)

        return self.backend.call(
            "GET",
            _subscription_path(params.customer, subscription_id),
            self.key,
            form,
            Subscription,
        )

    def update(self, subscription_id: str, params: SubscriptionParams) -> Subscription:
        """
        Change a subscription's plan, card, coupon, trial or quantity.

        Only fields that are set are sent. ``no_prorate`` sends
        ``prorate=false``. A token on the params wins over a token on the card,
        which in turn wins over the card details.
        """
        form = Form()
        if params.plan is not None:
            form.add("plan", params.plan)

        if params.no_prorate:
            form.add("prorate", False)

        if params.token:
            form.add("card", params.token)
        elif params.card is not None:
            params.card.append_details(form, creating=True)

        _append_billing(form, params)
        params.append_to(form)

        return self.backend.call(
            "POST",
            _subscription_path(params.customer, subscription_id),
            self.key,
            form,
            Subscription,
        )

    def cancel(self, subscription_id: str, params: SubscriptionParams) -> None:
        """Cancel a subscription, at the end of the period when ``at_period_end`` is set."""
        form = Form()
        if params.at_period_end:
            form.add("at_period_end", True)
        params.append_to(form)

        self.backend.call(
            "DELETE",
            _subscription_path(params.customer, subscription_id),
            self.key,
            form,
            None,
        )

    def list(self, params: SubscriptionListParams) -> Iter[Subscription]:
        """Iterate over every subscription of ``params.customer``."""
        path = _subscription_path(params.customer)

        def fetch(form: Form) -> tuple[list[Subscription], ListMeta]:
            page = self.backend.call("GET", path, self.key, form, SubscriptionListResponse)
            return page.data, page.meta

        return Iter(params, encode_params(params), fetch)


__all__ = ["SubscriptionParams", "SubscriptionListParams", "SubscriptionClient"]
