# app/celery_worker.py
from celery import Celery

from app.utils.settings import CELERY_BROKER_URL, CELERY_RESULT_BACKEND, CLEANUP_INTERVAL_SECONDS

celery_app = Celery(
    "cart",
    broker=CELERY_BROKER_URL,
    backend=CELERY_RESULT_BACKEND,
)

# tasks must be imported explicitly to be registered
celery_app.conf.imports = ("app.tasks.expire",)

celery_app.conf.beat_schedule = {
    "delete-old-carts": {
        "task": "app.tasks.expire.delete_old_carts_task",
        "schedule": CLEANUP_INTERVAL_SECONDS,
    },
}

celery_app.conf.timezone = "UTC"
