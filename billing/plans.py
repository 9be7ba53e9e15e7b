"""
Billing Plan Service

Wraps the /v1/payments/billing-plans endpoints:
- Creating a plan
- Activating a plan (new plans start in CREATED state)
- Reading a single plan
- Listing plans
"""

from typing import Optional

import structlog

from billing.models import PlanState, PlanStatusFilter
from billing.schemas import (
    BillingPlan,
    CreateBillingResponse,
    PatchOperation,
    PlanList,
)
from core.logging import PayPalEvents
from paypal.auth import ENDPOINT_AUTH
from paypal.client import PayPalClient, path_segment

log = structlog.get_logger(__name__)

PLANS_PATH = "/v1/payments/billing-plans"

# The activation body never varies; the plan ID only goes in the URL
ACTIVATE_PATCH = [
    PatchOperation(op="replace", path="/", value={"state": PlanState.active.value})
]


class BillingPlanService:
    def __init__(self, client: PayPalClient):
        self.client = client

    def create_plan(self, plan: BillingPlan) -> CreateBillingResponse:
        """
        Create a billing plan.

        Endpoint: POST /v1/payments/billing-plans
        """
        request = self.client.new_request("POST", PLANS_PATH, plan)
        response = self.client.send_with_auth(
            request, CreateBillingResponse, ENDPOINT_AUTH["create_plan"]
        )
        log.info(PayPalEvents.PLAN_CREATED, plan_id=response.id, state=response.state)
        return response

    def activate_plan(self, plan_id: str) -> None:
        """
        Activate a billing plan. By default a new plan is not active.

        Endpoint: PATCH /v1/payments/billing-plans/{plan_id}
        """
        request = self.client.new_request(
            "PATCH", f"{PLANS_PATH}/{path_segment(plan_id)}", ACTIVATE_PATCH
        )
        self.client.send_with_auth(request, None, ENDPOINT_AUTH["activate_plan"])
        log.info(PayPalEvents.PLAN_ACTIVATED, plan_id=plan_id)

    def get_plan(self, plan_id: str) -> BillingPlan:
        """Endpoint: GET /v1/payments/billing-plans/{plan_id}"""
        request = self.client.new_request("GET", f"{PLANS_PATH}/{path_segment(plan_id)}")
        return self.client.send_with_auth(request, BillingPlan, ENDPOINT_AUTH["get_plan"])

    def list_plans(
        self,
        status: Optional[PlanStatusFilter | PlanState | str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        total_required: Optional[bool] = None,
    ) -> PlanList:
        """
        List billing plans.

        Endpoint: GET /v1/payments/billing-plans

        Args:
            status: Only plans in this state, or ALL (PayPal defaults to CREATED)
            page: Zero-based page index
            page_size: Plans per page
            total_required: Ask PayPal to include total_items/total_pages
        """
        params = {}
        if status is not None:
            params["status"] = str(getattr(status, "value", status)).upper()
        if page is not None:
            params["page"] = str(page)
        if page_size is not None:
            params["page_size"] = str(page_size)
        if total_required is not None:
            params["total_required"] = "yes" if total_required else "no"

        request = self.client.new_request("GET", PLANS_PATH, params=params)
        return self.client.send_with_auth(request, PlanList, ENDPOINT_AUTH["list_plans"])
