from paylib.encoding import Form, ListParams, Params, encode_params
from paylib.enums import PlanInterval
from paylib.iterator import Iter
from paylib.resources.base import Client
from paylib.types import DeleteResponse, ListMeta, Plan, PlanListResponse


class PlanParams(Params):
    """Parameters for creating a plan."""

    id: str
    name: str
    amount: int
    currency: str
    interval: PlanInterval
    interval_count: int | None = None
    trial_period_days: int | None = None
    statement_description: str | None = None


class PlanUpdateParams(Params):
    name: str | None = None
    statement_description: str | None = None


class PlanListParams(ListParams):
    pass


class PlanClient(Client):
    """Client for the /plans endpoints."""

    def create(self, params: PlanParams) -> Plan:
        """
        Create a plan by sending a POST request to /plans.

        Parameters
        ----------
        params : PlanParams
            The identifier, name, amount (in the smallest currency unit),
            currency and interval are always sent; interval_count,
            trial_period_days and statement_description only when set.

        Returns
        -------
        Plan
            The created plan.

        Raises
        ------
        PaylibException
            Whatever the backend raises (network, API or decode errors).
        """
        form = Form()
        form.add("id", params.id)
        form.add("name", params.name)
        form.add("amount", params.amount)
        form.add("currency", params.currency)
        form.add("interval", params.interval)
        if params.interval_count is not None:
            form.add("interval_count", params.interval_count)
        if params.trial_period_days is not None:
            form.add("trial_period_days", params.trial_period_days)
        if params.statement_description is not None:
            form.add("statement_description", params.statement_description)
        params.append_to(form)

        return self.backend.call("POST", "/plans", self.key, form, Plan)

    def get(self, plan_id: str, params: Params | None = None) -> Plan:
        """Retrieve a plan by ID (GET /plans/{plan_id})."""
        return self.backend.call(
            "GET", f"/plans/{plan_id}", self.key, encode_params(params), Plan
        )

    def update(self, plan_id: str, params: PlanUpdateParams | None = None) -> Plan:
        """
        Update a plan's name or statement description (POST /plans/{plan_id}).

        Only fields that are set are sent; with no params the request carries
        no body and the plan is returned unchanged.
        """
        form: Form | None = None
        if params is not None:
            form = Form()
            if params.name is not None:
                form.add("name", params.name)
            if params.statement_description is not None:
                form.add("statement_description", params.statement_description)
            params.append_to(form)

        return self.backend.call("POST", f"/plans/{plan_id}", self.key, form, Plan)

    def delete(self, plan_id: str) -> DeleteResponse:
        return self.backend.call(
            "DELETE", f"/plans/{plan_id}", self.key, None, DeleteResponse
        )

    def list(self, params: PlanListParams | None = None) -> Iter[Plan]:
        """Iterate over every plan (GET /plans), one page at a time."""

        def fetch(form: Form) -> tuple[list[Plan], ListMeta]:
            page = self.backend.call("GET", "/plans", self.key, form, PlanListResponse)
            return page.data, page.meta

        return Iter(params, encode_params(params), fetch)


__all__ = ["PlanParams", "PlanUpdateParams", "PlanListParams", "PlanClient"]
