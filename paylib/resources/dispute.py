from paylib.encoding import Form, Params
from paylib.resources.base import Client
from paylib.types import Dispute


class DisputeParams(Params):
    evidence: str | None = None


class DisputeClient(Client):
    """Client for the dispute attached to a charge."""

    def update(self, charge_id: str, params: DisputeParams | None = None) -> Dispute:
        """
        Submit evidence for the dispute on a charge.

        Sends POST /charges/{charge_id}/dispute with ``evidence`` when set.
        """
        form: Form | None = None
        if params is not None:
            form = Form()
            if params.evidence is not None:
                form.add("evidence", params.evidence)
            params.append_to(form)

        return self.backend.call(
            "POST", f"/charges/{charge_id}/dispute", self.key, form, Dispute
        )

    def close(self, charge_id: str) -> Dispute:
        """Accept the dispute on a charge (POST /charges/{charge_id}/dispute/close)."""
        return self.backend.call(
            "POST", f"/charges/{charge_id}/dispute/close", self.key, None, Dispute
        )


__all__ = ["DisputeParams", "DisputeClient"]
