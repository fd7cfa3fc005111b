# main.py
"""Main application entry point: loads the ibook and reports on its stock."""

import logging

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import ApplicationError, StorageError
from src.common.logger_config import setup_logging
from src.inventory_domain.application.inventory_service import InventoryApplicationService
from src.inventory_domain.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)

logger = logging.getLogger(__name__)


def setup_inventory_dependencies() -> InventoryApplicationService:
    """Initializes and wires up inventory domain dependencies."""
    inventory_repository = JsonInventoryRepository(settings.DATA_FILE_PATH)
    return InventoryApplicationService(inventory_repo=inventory_repository)


def report_stock(inventory_service: InventoryApplicationService) -> None:
    """Logs a summary of the stock followed by expired and soon-expiring items."""
    statistics = inventory_service.get_stock_statistics()
    logger.info(
        f"Products: {statistics['total_products']}, items: {statistics['total_items']}, "
        f"total quantity: {statistics['total_quantity']}"
    )

    expired_items = inventory_service.get_expired_items()
    if expired_items:
        logger.warning(f"{len(expired_items)} expired item(s):")
        for item in expired_items:
            logger.warning(
                f"  {item.product.name} ({item.product.category}) expired on {item.expiry_date}, quantity {item.quantity}"
            )
    else:
        logger.info("No expired items.")

    expiring_items = inventory_service.get_items_expiring_soon()
    for item in expiring_items:
        logger.info(
            f"  {item.product.name} expires on {item.expiry_date} "
            f"(in {item.expiry_date.days_until()} day(s)), quantity {item.quantity}"
        )


def run() -> None:
    inventory_service = setup_inventory_dependencies()
    try:
        inventory_service.load()
    except StorageError as e:
        logger.error(f"❌ Could not load the ibook data: {e}")
        raise

    try:
        report_stock(inventory_service)
    except ApplicationError as e:
        logger.error(f"An error occurred while reporting stock: {e}")
        raise


if __name__ == "__main__":
    setup_logging()
    logger.info("iBook inventory started.")
    run()
    logger.info("iBook inventory report finished.")
