"""
E-payment app for course purchases.

This app handles:
- Payment transaction records (EcomTransaction) and their activation codes
- Timing out transactions that never completed
- Propagating timeouts to the course service, Bifrost and Marol CRM

Related systems:
    - Magento: marketplace orders and users
    - Course service: activation code / enrollment cancellation
    - Bifrost: contact synchronization
    - Marol: CRM contacts (C3)

Usage:
    from epayment.workers import update_expired_transactions

    # Normally triggered by celery-beat every 15 minutes
    update_expired_transactions.delay()
"""
