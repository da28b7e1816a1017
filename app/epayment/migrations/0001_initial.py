import uuid

import django.db.models.deletion
import django_fsm
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="EcomTransaction",
            fields=[
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Timestamp when this record was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="Timestamp when this record was last modified",
                    ),
                ),
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for this record",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "charge_id",
                    models.CharField(
                        db_index=True,
                        help_text="Payment gateway charge ID",
                        max_length=255,
                    ),
                ),
                (
                    "order_id",
                    models.CharField(
                        db_index=True, help_text="Magento order ID", max_length=64
                    ),
                ),
                (
                    "user_id",
                    models.CharField(help_text="Magento customer ID", max_length=64),
                ),
                (
                    "status",
                    django_fsm.FSMField(
                        choices=[
                            ("created", "Created"),
                            ("pending", "Pending"),
                            ("success", "Success"),
                            ("failed", "Failed"),
                            ("timeout", "Timed Out"),
                        ],
                        db_index=True,
                        default="created",
                        help_text="Current payment status (managed by FSM)",
                        max_length=50,
                    ),
                ),
                (
                    "timeout_at",
                    models.DateTimeField(
                        blank=True,
                        help_text="When the transaction was timed out",
                        null=True,
                    ),
                ),
                (
                    "contact_method",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="Payment method chosen by the customer (e.g., 'credit_card')",
                        max_length=50,
                    ),
                ),
            ],
            options={
                "verbose_name": "E-commerce Transaction",
                "verbose_name_plural": "E-commerce Transactions",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["status", "updated_at"],
                        name="epayment_ec_status_5b8e2f_idx",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="IntegrationErrorLog",
            fields=[
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Timestamp when this record was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="Timestamp when this record was last modified",
                    ),
                ),
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for this record",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "error_type",
                    models.CharField(
                        choices=[("exception", "Exception")],
                        db_index=True,
                        max_length=20,
                    ),
                ),
                (
                    "message_code",
                    models.CharField(
                        choices=[
                            ("API_ACTIVATE_CODE", "Activation code API"),
                            ("API_CANCEL_COURSE", "Course cancellation API"),
                            ("API_MAGENTO", "Magento API"),
                            ("API_BIFROST", "Bifrost API"),
                            ("API_MAROL", "Marol API"),
                        ],
                        db_index=True,
                        max_length=50,
                    ),
                ),
                (
                    "exception_class",
                    models.CharField(blank=True, default="", max_length=255),
                ),
                ("message", models.TextField(blank=True, default="")),
                ("context", models.JSONField(blank=True, default=dict)),
            ],
            options={
                "verbose_name": "Integration Error",
                "verbose_name_plural": "Integration Errors",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["message_code", "created_at"],
                        name="epayment_in_message_9c41d7_idx",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="EcomCode",
            fields=[
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Timestamp when this record was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="Timestamp when this record was last modified",
                    ),
                ),
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for this record",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "activate_code",
                    models.CharField(
                        help_text="Activation code known to the course service",
                        max_length=64,
                        unique=True,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("created", "Created"),
                            ("pending", "Pending"),
                            ("success", "Success"),
                            ("failed", "Failed"),
                            ("timeout", "Timed Out"),
                        ],
                        db_index=True,
                        default="created",
                        help_text="Current code status",
                        max_length=20,
                    ),
                ),
                (
                    "transaction",
                    models.ForeignKey(
                        help_text="Transaction this code was issued for",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="codes",
                        to="epayment.ecomtransaction",
                    ),
                ),
            ],
            options={
                "verbose_name": "Activation Code",
                "verbose_name_plural": "Activation Codes",
                "ordering": ["created_at"],
            },
        ),
    ]
