"""
Tests for the response models.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from paylib.enums import PlanInterval
from paylib.types import (
    Event,
    ListMeta,
    Plan,
    PlanListResponse,
    Subscription,
    coerce_timestamp_to_datetime,
)


class TestTimestamps:
    """Tests for Unix timestamp coercion."""

    def test_int_becomes_utc_datetime(self):
        """Test seconds since the epoch become an aware UTC datetime."""
        assert coerce_timestamp_to_datetime(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_other_values_pass_through(self):
        """Test non-integers are left for pydantic to validate."""
        value = "2024-01-01T00:00:00Z"
        assert coerce_timestamp_to_datetime(value) is value
        assert coerce_timestamp_to_datetime(True) is True

    def test_model_fields_are_coerced(self):
        """Test timestamp fields on models are datetimes."""
        plan = Plan.model_validate(
            {
                "id": "gold",
                "amount": 2000,
                "currency": "usd",
                "interval": "month",
                "name": "Gold",
                "created": 1400000000,
            }
        )

        assert plan.created == datetime.fromtimestamp(1400000000, tz=timezone.utc)
        assert plan.interval is PlanInterval.MONTH


class TestModels:
    """Tests for model behavior shared by every API object."""

    def test_models_are_frozen(self):
        """Test returned objects cannot be modified."""
        meta = ListMeta(has_more=True)

        with pytest.raises(ValidationError):
            meta.has_more = False

    def test_unknown_fields_ignored(self):
        """Test new API fields do not break decoding."""
        meta = ListMeta.model_validate({"has_more": False, "brand_new": 1})

        assert not hasattr(meta, "brand_new")

    def test_list_response_meta(self):
        """Test a list response exposes its page metadata separately."""
        page = PlanListResponse(data=[], has_more=True, total_count=9, url="/v1/plans")

        assert page.meta == ListMeta(has_more=True, total_count=9, url="/v1/plans")

    def test_subscription_nested_plan_and_defaults(self):
        """Test a subscription decodes its plan and fills defaults."""
        sub = Subscription.model_validate(
            {
                "id": "sub_1",
                "customer": "cus_1",
                "status": "trialing",
                "plan": {
                    "id": "gold",
                    "amount": 2000,
                    "currency": "usd",
                    "interval": "week",
                    "name": "Gold",
                },
                "trial_end": 1500000000,
            }
        )

        assert sub.plan.interval is PlanInterval.WEEK
        assert sub.quantity == 1
        assert sub.cancel_at_period_end is False
        assert sub.trial_end.year == 2017
        assert sub.discount is None

    def test_unknown_enum_value_rejected(self):
        """Test an unknown status fails validation."""
        with pytest.raises(ValidationError):
            Subscription.model_validate(
                {
                    "id": "sub_1",
                    "customer": "cus_1",
                    "status": "paused_forever",
                    "plan": {
                        "id": "gold",
                        "amount": 1,
                        "currency": "usd",
                        "interval": "month",
                        "name": "Gold",
                    },
                }
            )


class TestEventLookups:
    """Tests for Event.get_obj_value and Event.get_prev_value."""

    @pytest.fixture
    def event(self):
        return Event.model_validate(
            {
                "id": "evt_1",
                "type": "customer.subscription.updated",
                "data": {
                    "object": {
                        "id": "sub_1",
                        "quantity": 2,
                        "cancel_at_period_end": False,
                        "plan": {"id": "gold", "metadata": {"tier": "3"}},
                        "discount": None,
                    },
                    "previous_attributes": {"plan": {"id": "silver"}},
                },
            }
        )

    def test_top_level_value(self, event):
        """Test a top-level string is returned as is."""
        assert event.get_obj_value("id") == "sub_1"

    def test_nested_value(self, event):
        """Test nested keys walk into sub-objects."""
        assert event.get_obj_value("plan", "metadata", "tier") == "3"

    def test_non_string_leaves(self, event):
        """Test numbers and booleans are returned as strings."""
        assert event.get_obj_value("quantity") == "2"
        assert event.get_obj_value("cancel_at_period_end") == "False"

    @pytest.mark.parametrize(
        "keys",
        [("missing",), ("plan", "missing"), ("id", "deeper"), ("discount", "coupon")],
    )
    def test_missing_values_are_empty(self, event, keys):
        """Test missing keys and paths through scalars give an empty string."""
        assert event.get_obj_value(*keys) == ""

    def test_previous_attributes(self, event):
        """Test lookups over the previous attributes."""
        assert event.get_prev_value("plan", "id") == "silver"
        assert event.get_prev_value("quantity") == ""

    def test_no_previous_attributes(self):
        """Test events without previous attributes give empty strings."""
        event = Event.model_validate(
            {"id": "evt_2", "type": "plan.created", "data": {"object": {"id": "gold"}}}
        )

        assert event.get_prev_value("id") == ""
