from billing.agreements import BillingAgreementService
from billing.plans import BillingPlanService
from billing.schemas import (
    AgreementDetails,
    AgreementStateDescriptor,
    AgreementTransaction,
    AgreementTransactions,
    AmountPayout,
    BillingAgreement,
    BillingAgreementRequest,
    BillingAgreementResponse,
    BillingPlan,
    ChargeModel,
    CreateBillingResponse,
    Link,
    MerchantPreferences,
    PatchOperation,
    Payer,
    PayerInfo,
    PaymentDefinition,
    PlanList,
    PlanReference,
    ShippingAddress,
)

__all__ = [
    "BillingAgreementService",
    "BillingPlanService",
    "AgreementDetails",
    "AgreementStateDescriptor",
    "AgreementTransaction",
    "AgreementTransactions",
    "AmountPayout",
    "BillingAgreement",
    "BillingAgreementRequest",
    "BillingAgreementResponse",
    "BillingPlan",
    "ChargeModel",
    "CreateBillingResponse",
    "Link",
    "MerchantPreferences",
    "PatchOperation",
    "Payer",
    "PayerInfo",
    "PaymentDefinition",
    "PlanList",
    "PlanReference",
    "ShippingAddress",
]
