# src/inventory_domain/infrastructure/persistence/json_inventory_repository.py
"""JSON file implementation of the Inventory repository."""

import json
import logging
import os
import tempfile

from src.common.config.settings import settings
from src.common.dtos.inventory_dtos import ProductDTO
from src.common.exceptions.custom_exceptions import ApplicationError, StorageError
from src.inventory_domain.domain.entities.catalog import Catalog
from src.inventory_domain.domain.repositories.inventory_repository import IInventoryRepository

logger = logging.getLogger(__name__)


class JsonInventoryRepository(IInventoryRepository):
    """Stores the catalog as a single JSON document of the form ``{"products": [...]}``."""

    def __init__(self, file_path: str | None = None) -> None:
        """Initializes the repository."""
        self.file_path = file_path or settings.DATA_FILE_PATH

    def _read_document(self) -> dict | None:
        """Reads the raw JSON document, or returns None when the file does not exist yet."""
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError:
            return None
        except json.JSONDecodeError as e:
            raise StorageError(f"Data file {self.file_path} is not valid JSON", original_exception=e)
        except OSError as e:
            raise StorageError(f"Could not read data file {self.file_path}", original_exception=e)

    def load_catalog(self) -> Catalog:
        """Loads the catalog; a missing data file yields an empty catalog."""
        document = self._read_document()
        if document is None:
            logger.info(f"No data file at {self.file_path}, starting with an empty ibook.")
            return Catalog()

        if not isinstance(document, dict) or not isinstance(document.get("products", []), list):
            raise StorageError(f"Data file {self.file_path} has an unexpected structure")

        try:
            products = [ProductDTO.from_dict(entry).to_product() for entry in document.get("products", [])]
            catalog = Catalog(products)
        except StorageError:
            raise
        except ApplicationError as e:
            # Field validation or duplicate identities mean the stored data is corrupt
            raise StorageError(f"Data file {self.file_path} contains invalid data", original_exception=e)

        logger.info(f"Loaded {len(catalog)} product(s) from {self.file_path}.")
        return catalog

    def save_catalog(self, catalog: Catalog) -> None:
        """Writes the catalog to a temporary file and moves it over the data file."""
        document = {"products": [ProductDTO.from_product(product).to_dict() for product in catalog]}

        directory = os.path.dirname(os.path.abspath(self.file_path))
        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=directory, suffix=".tmp", delete=False
            ) as tmp_file:
                tmp_path = tmp_file.name
                json.dump(document, tmp_file, indent=4, ensure_ascii=False)
            os.replace(tmp_path, self.file_path)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StorageError(f"Could not write data file {self.file_path}", original_exception=e)

        logger.info(f"Saved {len(catalog)} product(s) to {self.file_path}.")
