"""
Billing Schemas Module

Pydantic models mirroring PayPal's billing plan and billing agreement JSON.
Unset optional fields are dropped when a record is serialized; unknown
fields in responses are ignored.
"""

from datetime import UTC, datetime
from typing import Any, Optional

from pydantic import BaseModel, field_serializer

from billing.models import (
    AgreementState,
    ChargeModelType,
    FailAmountAction,
    Frequency,
    PaymentDefinitionType,
    PlanState,
    PlanType,
)
from paypal.errors import RequestConstructionError

# PayPal rejects fractional seconds and offsets in agreement start dates
START_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class Link(BaseModel):
    """HATEOAS link returned with most PayPal resources."""

    href: str
    rel: str
    method: Optional[str] = None
    enctype: Optional[str] = None


class AmountPayout(BaseModel):
    currency: str
    value: str


class ChargeModel(BaseModel):
    id: Optional[str] = None
    type: ChargeModelType | str
    amount: AmountPayout


class PaymentDefinition(BaseModel):
    """Schema for one payment definition of a billing plan."""

    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[PaymentDefinitionType | str] = None
    frequency: Optional[Frequency | str] = None
    frequency_interval: Optional[str] = None
    amount: Optional[AmountPayout] = None
    cycles: Optional[str] = None
    charge_models: Optional[list[ChargeModel]] = None


class MerchantPreferences(BaseModel):
    id: Optional[str] = None
    setup_fee: Optional[AmountPayout] = None
    return_url: Optional[str] = None
    cancel_url: Optional[str] = None
    auto_bill_amount: Optional[str] = None
    initial_fail_amount_action: Optional[FailAmountAction | str] = None
    max_fail_attempts: Optional[str] = None
    accepted_payment_type: Optional[str] = None


class BillingPlan(BaseModel):
    """Schema for a billing plan, used both to create and to read plans."""

    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    type: Optional[PlanType | str] = None
    state: Optional[PlanState | str] = None
    payment_definitions: Optional[list[PaymentDefinition]] = None
    merchant_preferences: Optional[MerchantPreferences] = None
    create_time: Optional[datetime] = None
    update_time: Optional[datetime] = None
    links: Optional[list[Link]] = None


class CreateBillingResponse(BaseModel):
    """Response of POST /v1/payments/billing-plans."""

    id: Optional[str] = None
    state: Optional[PlanState | str] = None
    payment_definitions: Optional[list[PaymentDefinition]] = None
    merchant_preferences: Optional[MerchantPreferences] = None
    create_time: Optional[datetime] = None
    update_time: Optional[datetime] = None
    links: Optional[list[Link]] = None


class PlanList(BaseModel):
    plans: list[BillingPlan] = []
    total_items: Optional[str] = None
    total_pages: Optional[str] = None
    links: Optional[list[Link]] = None


class PatchOperation(BaseModel):
    """One JSON-Patch operation."""

    op: str
    path: str
    value: Any = None


class PayerInfo(BaseModel):
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    payer_id: Optional[str] = None
    phone: Optional[str] = None
    country_code: Optional[str] = None


class Payer(BaseModel):
    payment_method: str = "paypal"
    status: Optional[str] = None
    payer_info: Optional[PayerInfo] = None


class ShippingAddress(BaseModel):
    recipient_name: Optional[str] = None
    type: Optional[str] = None
    line1: str
    line2: Optional[str] = None
    city: str
    country_code: str
    postal_code: Optional[str] = None
    state: Optional[str] = None
    phone: Optional[str] = None


class _AgreementFields(BaseModel):
    name: str
    description: str
    start_date: datetime
    payer: Payer
    shipping_address: Optional[ShippingAddress] = None
    override_merchant_preferences: Optional[MerchantPreferences] = None

    @field_serializer("start_date")
    def _format_start_date(self, value: datetime) -> str:
        if value.tzinfo is not None:
            value = value.astimezone(UTC)
        return value.strftime(START_DATE_FORMAT)


class BillingAgreement(_AgreementFields):
    """A payer's agreement to a billing plan, as the caller describes it."""

    plan: BillingPlan


class PlanReference(BaseModel):
    id: str


class BillingAgreementRequest(_AgreementFields):
    """Wire projection of ``BillingAgreement``: the plan is sent by ID only."""

    plan: PlanReference

    @classmethod
    def from_agreement(cls, agreement: BillingAgreement) -> "BillingAgreementRequest":
        if not agreement.plan.id:
            raise RequestConstructionError("Billing agreement plan has no id")
        source = agreement.model_copy(deep=True)
        fields = {name: getattr(source, name) for name in _AgreementFields.model_fields}
        return cls(**fields, plan=PlanReference(id=source.plan.id))


class AgreementDetails(BaseModel):
    outstanding_balance: Optional[AmountPayout] = None
    cycles_remaining: Optional[str] = None
    cycles_completed: Optional[str] = None
    next_billing_date: Optional[datetime] = None
    last_payment_date: Optional[datetime] = None
    last_payment_amount: Optional[AmountPayout] = None
    final_payment_date: Optional[datetime] = None
    failed_payment_count: Optional[str] = None


class BillingAgreementResponse(BaseModel):
    """Agreement as returned by create, execute and get calls."""

    id: Optional[str] = None
    state: Optional[AgreementState | str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[datetime] = None
    plan: Optional[BillingPlan] = None
    payer: Optional[Payer] = None
    shipping_address: Optional[ShippingAddress] = None
    agreement_details: Optional[AgreementDetails] = None
    links: Optional[list[Link]] = None

    def approval_url(self) -> Optional[str]:
        """Where the payer approves a freshly created agreement."""
        for link in self.links or []:
            if link.rel == "approval_url":
                return link.href
        return None


class AgreementStateDescriptor(BaseModel):
    note: str
    amount: Optional[AmountPayout] = None


class AgreementTransaction(BaseModel):
    transaction_id: Optional[str] = None
    status: Optional[str] = None
    transaction_type: Optional[str] = None
    amount: Optional[AmountPayout] = None
    fee_amount: Optional[AmountPayout] = None
    net_amount: Optional[AmountPayout] = None
    payer_email: Optional[str] = None
    payer_name: Optional[str] = None
    time_stamp: Optional[datetime] = None
    time_zone: Optional[str] = None


class AgreementTransactions(BaseModel):
    agreement_transaction_list: list[AgreementTransaction] = []
