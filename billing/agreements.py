"""
Billing Agreement Service

Wraps the /v1/payments/billing-agreements endpoints: create, execute after
payer approval, read, suspend / re-activate / cancel, and transaction history.
"""

from datetime import date

import structlog

from billing.schemas import (
    AgreementStateDescriptor,
    AgreementTransactions,
    BillingAgreement,
    BillingAgreementRequest,
    BillingAgreementResponse,
)
from core.logging import PayPalEvents
from paypal.auth import ENDPOINT_AUTH
from paypal.client import PayPalClient, path_segment
from paypal.errors import AgreementExecutionError

log = structlog.get_logger(__name__)

AGREEMENTS_PATH = "/v1/payments/billing-agreements"


class BillingAgreementService:
    def __init__(self, client: PayPalClient):
        self.client = client

    def _path(self, agreement_id: str, action: str = "") -> str:
        path = f"{AGREEMENTS_PATH}/{path_segment(agreement_id)}"
        return f"{path}/{action}" if action else path

    def create_agreement(self, agreement: BillingAgreement) -> BillingAgreementResponse:
        """
        Create an agreement for the referenced plan.

        PayPal accepts only the plan ID, so the request carries a projection
        with every other plan field left out. ``agreement`` is not modified.

        Endpoint: POST /v1/payments/billing-agreements
        """
        body = BillingAgreementRequest.from_agreement(agreement)
        request = self.client.new_request("POST", AGREEMENTS_PATH, body)
        response = self.client.send_with_auth(
            request, BillingAgreementResponse, ENDPOINT_AUTH["create_agreement"]
        )
        log.info(
            PayPalEvents.AGREEMENT_CREATED,
            plan_id=agreement.plan.id,
            approval_url=response.approval_url(),
        )
        return response

    def execute_agreement(self, token: str) -> BillingAgreementResponse:
        """
        Execute (complete) an agreement the payer has approved.

        Endpoint: POST /v1/payments/billing-agreements/{token}/agreement-execute

        Raises:
            AgreementExecutionError: PayPal answered 2xx without an agreement ID
        """
        request = self.client.new_request("POST", self._path(token, "agreement-execute"))
        response = self.client.send_with_auth(
            request, BillingAgreementResponse, ENDPOINT_AUTH["execute_agreement"]
        )
        if not response.id:
            raise AgreementExecutionError(token, response)

        log.info(
            PayPalEvents.AGREEMENT_EXECUTED, agreement_id=response.id, state=response.state
        )
        return response

    def get_agreement(self, agreement_id: str) -> BillingAgreementResponse:
        """Endpoint: GET /v1/payments/billing-agreements/{agreement_id}"""
        request = self.client.new_request("GET", self._path(agreement_id))
        return self.client.send_with_auth(
            request, BillingAgreementResponse, ENDPOINT_AUTH["get_agreement"]
        )

    def _change_state(self, agreement_id: str, action: str, operation: str, note: str):
        body = AgreementStateDescriptor(note=note)
        request = self.client.new_request("POST", self._path(agreement_id, action), body)
        self.client.send_with_auth(request, None, ENDPOINT_AUTH[operation])
        log.info(
            PayPalEvents.AGREEMENT_STATE_CHANGED, agreement_id=agreement_id, action=action
        )

    def suspend_agreement(self, agreement_id: str, note: str) -> None:
        """Endpoint: POST /v1/payments/billing-agreements/{agreement_id}/suspend"""
        self._change_state(agreement_id, "suspend", "suspend_agreement", note)

    def reactivate_agreement(self, agreement_id: str, note: str) -> None:
        """Endpoint: POST /v1/payments/billing-agreements/{agreement_id}/re-activate"""
        self._change_state(agreement_id, "re-activate", "reactivate_agreement", note)

    def cancel_agreement(self, agreement_id: str, note: str) -> None:
        """Endpoint: POST /v1/payments/billing-agreements/{agreement_id}/cancel"""
        self._change_state(agreement_id, "cancel", "cancel_agreement", note)

    def list_transactions(
        self, agreement_id: str, start_date: date, end_date: date
    ) -> AgreementTransactions:
        """
        Transactions of an agreement between two dates (inclusive).

        Endpoint: GET /v1/payments/billing-agreements/{agreement_id}/transactions
        """
        params = {
            "start_date": start_date.strftime("%Y-%m-%d"),
            "end_date": end_date.strftime("%Y-%m-%d"),
        }
        request = self.client.new_request(
            "GET", self._path(agreement_id, "transactions"), params=params
        )
        return self.client.send_with_auth(
            request, AgreementTransactions, ENDPOINT_AUTH["list_agreement_transactions"]
        )
