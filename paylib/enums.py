from enum import Enum


class PlanInterval(str, Enum):
    """Billing frequency of a plan."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class SubscriptionStatus(str, Enum):
    """Lifecycle state of a subscription."""

    TRIALING = "trialing"
    ACTIVE = "active"
    PAST_DUE = "past_due"
    CANCELED = "canceled"
    UNPAID = "unpaid"


# ============================================================================
# Dispute Enums
# ============================================================================


class DisputeReason(str, Enum):
    """Reason given by the cardholder's bank for a dispute."""

    DUPLICATE = "duplicate"
    FRAUDULENT = "fraudulent"
    SUBSCRIPTION_CANCELED = "subscription_canceled"
    PRODUCT_UNACCEPTABLE = "product_unacceptable"
    PRODUCT_NOT_RECEIVED = "product_not_received"
    UNRECOGNIZED = "unrecognized"
    CREDIT_NOT_PROCESSED = "credit_not_processed"
    GENERAL = "general"


class DisputeStatus(str, Enum):
    """Current state of a dispute."""

    WON = "won"
    LOST = "lost"
    NEEDS_RESPONSE = "needs_response"
    UNDER_REVIEW = "under_review"
    WARNING_NEEDS_RESPONSE = "warning_needs_response"
    WARNING_UNDER_REVIEW = "warning_under_review"
    CHARGE_REFUNDED = "charge_refunded"
