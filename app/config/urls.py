"""
URL configuration for the e-payment service.

URL Structure:
    /admin/ - Django admin (transactions, codes, integration errors)

For more information, see:
https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.contrib import admin
from django.urls import path

urlpatterns = [
    path("admin/", admin.site.urls),
]

# =============================================================================
# Admin Site Customization
# =============================================================================
admin.site.site_header = "E-Payment Admin"
admin.site.site_title = "E-Payment Admin"
admin.site.index_title = "Transactions and integration errors"
