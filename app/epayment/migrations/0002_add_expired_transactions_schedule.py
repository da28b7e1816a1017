"""
Add celery-beat schedule for expiring stale transactions.

This migration creates the periodic task schedule for the
update_expired_transactions task, which runs every 15 minutes to
time out transactions stuck in created/pending.
"""

from django.db import migrations


def create_periodic_task(apps, schema_editor):
    """Create the periodic task for expiring transactions."""
    IntervalSchedule = apps.get_model("django_celery_beat", "IntervalSchedule")
    PeriodicTask = apps.get_model("django_celery_beat", "PeriodicTask")

    # Create interval schedule: every 15 minutes
    schedule, _ = IntervalSchedule.objects.get_or_create(
        every=15,
        period="minutes",
    )

    PeriodicTask.objects.get_or_create(
        name="Update Expired E-commerce Transactions",
        defaults={
            "task": "epayment.workers.expiry_worker.update_expired_transactions",
            "interval": schedule,
            "enabled": True,
            "description": (
                "Times out transactions left in created/pending for more than "
                "45 minutes, cancels their activation codes and notifies "
                "Bifrost and Marol."
            ),
        },
    )


def remove_periodic_task(apps, schema_editor):
    """Remove the periodic task on migration rollback."""
    PeriodicTask = apps.get_model("django_celery_beat", "PeriodicTask")

    PeriodicTask.objects.filter(
        name="Update Expired E-commerce Transactions",
    ).delete()


class Migration(migrations.Migration):
    dependencies = [
        ("epayment", "0001_initial"),
        ("django_celery_beat", "0019_alter_periodictasks_options"),
    ]

    operations = [
        migrations.RunPython(create_periodic_task, remove_periodic_task),
    ]
