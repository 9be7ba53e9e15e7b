"""
Billing Enumerations Module

Values PayPal uses in billing plan and billing agreement records.
"""

from enum import Enum as PyEnum


class PlanType(str, PyEnum):
    fixed = "FIXED"
    infinite = "INFINITE"


class PlanState(str, PyEnum):
    created = "CREATED"
    active = "ACTIVE"
    inactive = "INACTIVE"
    deleted = "DELETED"


class PaymentDefinitionType(str, PyEnum):
    trial = "TRIAL"
    regular = "REGULAR"


class Frequency(str, PyEnum):
    day = "DAY"
    week = "WEEK"
    month = "MONTH"
    year = "YEAR"


class ChargeModelType(str, PyEnum):
    shipping = "SHIPPING"
    tax = "TAX"


class FailAmountAction(str, PyEnum):
    cont = "CONTINUE"
    cancel = "CANCEL"


class AgreementState(str, PyEnum):
    """Agreement states as PayPal reports them (mixed case on the wire)."""

    pending = "Pending"
    active = "Active"
    suspended = "Suspended"
    cancelled = "Cancelled"
    expired = "Expired"


class PlanStatusFilter(str, PyEnum):
    """Values the plan listing accepts for ``status``."""

    created = "CREATED"
    active = "ACTIVE"
    inactive = "INACTIVE"
    all = "ALL"
