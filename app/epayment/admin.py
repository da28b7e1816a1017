"""
E-payment admin configuration.

Read-mostly views for operators following up on expired transactions.
Status changes go through the service layer, not admin.
"""

from django.contrib import admin

from epayment.models import EcomCode, EcomTransaction, IntegrationErrorLog

__all__ = [
    "EcomCodeInline",
    "EcomTransactionAdmin",
    "EcomCodeAdmin",
    "IntegrationErrorLogAdmin",
]


class EcomCodeInline(admin.TabularInline):
    model = EcomCode
    extra = 0
    fields = ["activate_code", "status", "updated_at"]
    readonly_fields = ["activate_code", "status", "updated_at"]
    can_delete = False


@admin.register(EcomTransaction)
class EcomTransactionAdmin(admin.ModelAdmin):
    """Admin configuration for EcomTransaction."""

    list_display = [
        "charge_id",
        "order_id",
        "user_id",
        "status",
        "contact_method",
        "timeout_at",
        "updated_at",
    ]
    list_filter = ["status", "contact_method", "created_at"]
    search_fields = ["id", "charge_id", "order_id", "user_id"]
    readonly_fields = ["id", "status", "timeout_at", "created_at", "updated_at"]
    date_hierarchy = "created_at"
    ordering = ["-created_at"]
    inlines = [EcomCodeInline]

    fieldsets = (
        (
            None,
            {
                "fields": ("id", "charge_id", "status", "timeout_at"),
            },
        ),
        (
            "Marketplace",
            {
                "fields": ("order_id", "user_id", "contact_method"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
            },
        ),
    )

    def has_delete_permission(self, request, obj=None) -> bool:
        """Disable delete for transactions (audit trail)."""
        return False


@admin.register(EcomCode)
class EcomCodeAdmin(admin.ModelAdmin):
    list_display = ["activate_code", "transaction", "status", "updated_at"]
    list_filter = ["status"]
    search_fields = ["activate_code", "transaction__charge_id"]
    readonly_fields = ["id", "created_at", "updated_at"]
    raw_id_fields = ["transaction"]


@admin.register(IntegrationErrorLog)
class IntegrationErrorLogAdmin(admin.ModelAdmin):
    """
    Admin configuration for IntegrationErrorLog.

    Records are append-only.
    """

    list_display = ["created_at", "error_type", "message_code", "exception_class", "message"]
    list_filter = ["error_type", "message_code", "created_at"]
    search_fields = ["message", "exception_class"]
    readonly_fields = [
        "id",
        "error_type",
        "message_code",
        "exception_class",
        "message",
        "context",
        "created_at",
        "updated_at",
    ]
    date_hierarchy = "created_at"
    ordering = ["-created_at"]

    def has_add_permission(self, request) -> bool:
        return False

    def has_delete_permission(self, request, obj=None) -> bool:
        return False
