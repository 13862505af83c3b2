"""Celery configuration for the community site."""

import os

from celery import Celery
from celery.schedules import crontab

# Set the default Django settings module for the 'celery' program.
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.local")

app = Celery("community")

# Using a string here means the worker doesn't have to serialize
# the configuration object to child processes.
# - namespace='CELERY' means all celery-related configuration keys
#   should have a `CELERY_` prefix.
app.config_from_object("django.conf:settings", namespace="CELERY")

# Load task modules from all registered Django apps.
app.autodiscover_tasks()

# Buffered view counters are written back to the objects' viewnum columns.
app.conf.beat_schedule = {
    "flush-view-counters": {
        "task": "community.interactions.tasks.flush_views_task",
        "schedule": crontab(minute="*/5"),
    },
}
