# storefront/utils/settings.py
import os
from decimal import Decimal
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite://")

CATALOG_URL = os.getenv("CATALOG_URL", "https://fakestoreapi.com/products")
CATALOG_TIMEOUT = float(os.getenv("CATALOG_TIMEOUT", 10))
CATALOG_FETCH_ATTEMPTS = int(os.getenv("CATALOG_FETCH_ATTEMPTS", 1))
LOAD_CATALOG_ON_STARTUP = _flag("LOAD_CATALOG_ON_STARTUP", "true")

SHIPPING_FEE = Decimal(os.getenv("SHIPPING_FEE", "99.99"))
FREE_SHIPPING_THRESHOLD = Decimal(os.getenv("FREE_SHIPPING_THRESHOLD", "1000"))
TAX_RATE = Decimal(os.getenv("TAX_RATE", "0.21"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))
