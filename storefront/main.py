# storefront/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn

from storefront.api import api_router
from storefront.api.errors import register_exception_handlers
from storefront.data.database import Store
from storefront.services.catalog_client import CatalogClient, CatalogLoader
from storefront.utils.settings import LOAD_CATALOG_ON_STARTUP, HOST, PORT
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def create_app(
    store: Store | None = None,
    load_catalog: bool | None = None,
    catalog_client: CatalogClient | None = None,
) -> FastAPI:
    store = store or Store()
    if load_catalog is None:
        load_catalog = LOAD_CATALOG_ON_STARTUP

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if load_catalog:
            db = store.session()
            try:
                CatalogLoader(db, catalog_client).load()
            finally:
                db.close()
        else:
            logger.info("Catalog loading disabled, starting with the current product table")
        yield
        store.dispose()

    app = FastAPI(
        title="Storefront API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.store = store

    register_exception_handlers(app)
    app.include_router(api_router)

    logger.info(f"Storefront API configured with store {store.url}")
    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
