# storefront/services/catalog_client.py
from typing import Any, Dict, List

import requests
from requests import RequestException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel
from storefront.domain.schemas import ProductIn
from storefront.repos.product_repo import ProductRepo
from storefront.utils.retry import http_retry
from storefront.utils.settings import CATALOG_URL, CATALOG_TIMEOUT, CATALOG_FETCH_ATTEMPTS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CatalogClient:
    """GET the remote product list. Raises on transport errors and non-2xx."""

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        attempts: int | None = None,
    ):
        self.url = url or CATALOG_URL
        self.timeout = CATALOG_TIMEOUT if timeout is None else timeout
        self.attempts = CATALOG_FETCH_ATTEMPTS if attempts is None else attempts

    def fetch_products(self) -> List[Dict[str, Any]]:
        @http_retry(self.attempts)
        def _get() -> requests.Response:
            logger.info(f"CatalogClient GET {self.url}")
            resp = requests.get(self.url, timeout=self.timeout)
            resp.raise_for_status()
            return resp

        data = _get().json()
        if not isinstance(data, list):
            raise ValueError(f"Catalog returned {type(data).__name__}, expected a list")
        return data


class CatalogLoader:
    """
    One-shot import of the remote catalog into the product table.

    Each product is committed as it is inserted, so an error midway keeps the
    products loaded before it. Failures are logged and swallowed: the service
    starts with whatever catalog it managed to load, possibly empty.
    """

    def __init__(self, db: Session, client: CatalogClient | None = None):
        self.db = db
        self.repo = ProductRepo(db)
        self.client = client or CatalogClient()

    def load(self) -> int:
        inserted = 0
        try:
            for raw in self.client.fetch_products():
                product = ProductIn.model_validate(raw)
                self.repo.create_product(
                    ProductModel(
                        title=product.title,
                        price=product.price,
                        description=product.description,
                        category=product.category,
                        image=product.image,
                        rating=product.rating.model_dump(),
                    )
                )
                inserted += 1
        except (RequestException, ValueError) as e:
            logger.error(f"Error fetching products from catalog: {e}")
            return inserted
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error storing catalog products: {e}")
            return inserted

        logger.info(f"Loaded {inserted} products from {self.client.url}")
        return inserted
