"""Celery tasks for shopping list maintenance."""

import logging

from sqlalchemy.orm import Session

from inventory.celery_app import app as celery_app
from inventory.database import SessionLocal
from inventory.errors import StorageUnavailable
from inventory.services.shopping_list_service import ShoppingListRegenerator
from inventory.stores.sql import SqlCatalogStore, SqlShoppingListStore, SqlStockStore

logger = logging.getLogger(__name__)


@celery_app.task(bind=True, max_retries=2)
def regenerate_shopping_list(self) -> dict:
    """Regenerate the shopping list in the background.

    Runs on demand or periodically via celery-beat when
    REGENERATE_INTERVAL_MINUTES is set.

    Returns:
        dict with the number of entries written, or the error
    """
    db: Session = SessionLocal()
    try:
        regenerator = ShoppingListRegenerator(
            SqlCatalogStore(db),
            SqlStockStore(db),
            SqlShoppingListStore(db),
        )
        entries = regenerator.regenerate()
        return {"success": True, "entries": len(entries)}

    except StorageUnavailable as e:
        logger.error(f"Error in regenerate_shopping_list: {e}", exc_info=True)

        if self.request.retries < self.max_retries:
            raise self.retry(exc=e, countdown=30)

        return {"error": str(e)}

    finally:
        db.close()
