"""Celery application configuration."""

from celery import Celery

from inventory.config import get_settings

settings = get_settings()

app = Celery(
    "inventory",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=["inventory.tasks.shopping_list"],
)

# Celery configuration
app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_track_started=True,
    task_time_limit=120,
    task_soft_time_limit=90,
)

if settings.regenerate_interval_minutes:
    app.conf.beat_schedule = {
        "regenerate-shopping-list": {
            "task": "inventory.tasks.shopping_list.regenerate_shopping_list",
            "schedule": settings.regenerate_interval_minutes * 60.0,
        },
    }
