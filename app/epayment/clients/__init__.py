"""
Clients for the systems the e-payment workflow talks to.

- HttpService: raw HTTP calls (course cancellation endpoint)
- MagentoService: order and customer lookups
- MarolService: C3 contact creation
- SyncContactService: Bifrost and Marol status updates
"""

from epayment.clients.http import HttpService
from epayment.clients.magento import MagentoService
from epayment.clients.marol import MarolService
from epayment.clients.sync_contact import SyncContactService

__all__ = [
    "HttpService",
    "MagentoService",
    "MarolService",
    "SyncContactService",
]
