"""
Celery configuration for the e-payment service.

Celery runs the scheduled e-payment jobs:
- Periodic tasks driven by celery-beat (DatabaseScheduler)
- On-demand tasks queued by operators

This configuration uses Redis as both the message broker and result backend.
Tasks are auto-discovered from all installed Django apps.

Usage:
    # Worker
    celery -A config worker -l info

    # Beat (schedules live in the database, see epayment migrations)
    celery -A config beat -l info

For more information, see:
https://docs.celeryq.dev/en/stable/django/first-steps-with-django.html
"""

import os

from celery import Celery

# Set the default Django settings module for the Celery worker
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

app = Celery("config")

# All Celery settings are prefixed with CELERY_ in settings.py
app.config_from_object("django.conf:settings", namespace="CELERY")

# Celery looks for a tasks.py module in each installed app
app.autodiscover_tasks()
