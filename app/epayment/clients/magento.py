"""
Magento marketplace lookups.

Usage:
    from epayment.clients import MagentoService

    order = MagentoService().find_order_by_id("100023")
    if order is None:
        # unknown order
        ...
"""

from __future__ import annotations

from urllib.parse import quote

from django.conf import settings

from epayment.clients.base import BaseApiClient
from epayment.constants import ErrorMessage
from epayment.types import OrderSnapshot, UserSnapshot


class MagentoService(BaseApiClient):
    """
    Read-only client for Magento orders and customers.

    A 404 means the record does not exist and is returned as None.
    Any other failure raises (see BaseApiClient._request).
    """

    api_name = ErrorMessage.API_MAGENTO.value

    def __init__(self, base_url: str | None = None, token: str | None = None, **kwargs):
        token = token if token is not None else settings.MAGENTO_API_TOKEN
        super().__init__(
            base_url if base_url is not None else settings.MAGENTO_API_URL,
            headers={"Authorization": f"Bearer {token}"} if token else None,
            **kwargs,
        )

    def find_order_by_id(self, order_id: str) -> OrderSnapshot | None:
        data = self._request(
            "GET",
            f"/orders/{quote(str(order_id), safe='')}",
            allow_not_found=True,
        )
        if not data:
            return None
        return OrderSnapshot.from_dict({"order_id": order_id, **data})

    def find_user_by_id(self, user_id: str) -> UserSnapshot | None:
        data = self._request(
            "GET",
            f"/customers/{quote(str(user_id), safe='')}",
            allow_not_found=True,
        )
        if not data:
            return None
        return UserSnapshot.from_dict({"user_id": user_id, **data})
