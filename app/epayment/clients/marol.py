"""
Marol CRM contact creation.

A C3 contact records that a customer tried to buy a course. Expired
transactions produce one contact per course in the order so that sales
can follow up.
"""

from __future__ import annotations

from django.conf import settings

from epayment.clients.base import BaseApiClient
from epayment.constants import ErrorMessage
from epayment.exceptions import IntegrationError
from epayment.state_machines import PaymentStatus
from epayment.types import CourseItem, UserSnapshot


class MarolService(BaseApiClient):
    """Client for the Marol contact import API."""

    api_name = ErrorMessage.API_MAROL.value

    def __init__(self, base_url: str | None = None, api_key: str | None = None, **kwargs):
        api_key = api_key if api_key is not None else settings.MAROL_API_KEY
        super().__init__(
            base_url if base_url is not None else settings.MAROL_API_URL,
            headers={"X-Api-Key": api_key} if api_key else None,
            **kwargs,
        )

    def import_contact_c3(
        self,
        user: UserSnapshot,
        course_item: CourseItem,
        method: str,
    ) -> str:
        """
        Create a timed-out C3 contact for one course.

        Args:
            user: Magento customer
            course_item: Course the customer tried to buy
            method: Payment method of the transaction

        Returns:
            The Marol contact id

        Raises:
            IntegrationError: If Marol does not return a contact id
        """
        data = self._request(
            "POST",
            "/contacts",
            json={
                "full_name": user.full_name,
                "phone": user.phone,
                "email": user.email,
                "course_sku": course_item.sku,
                "course_name": course_item.name,
                "price": course_item.price,
                "payment_method": method,
                "status": PaymentStatus.TIMEOUT.value,
            },
        )
        contact_id = (data or {}).get("id")
        if not contact_id:
            raise IntegrationError(
                "Marol did not return a contact id",
                error_code="MAROL_CONTACT_ID_MISSING",
                details={"user_id": user.user_id, "course_sku": course_item.sku},
            )
        return str(contact_id)
