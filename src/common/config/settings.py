"""Application settings and environment variables."""

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


class Settings:
    CATALOG_API_BASE_URL: str = os.getenv("CATALOG_API_BASE_URL", "https://dummyjson.com")
    CATALOG_PAGE_SIZE: int = int(os.getenv("CATALOG_PAGE_SIZE", "12"))  # never request 0 items
    CATALOG_API_TIMEOUT: int = int(os.getenv("CATALOG_API_TIMEOUT", "30"))

    # "file" keeps cart/favorites in a JSON document on the device, "mysql" in a key/value table
    STORAGE_BACKEND: str = os.getenv("STORAGE_BACKEND", "file")
    STORAGE_FILE_PATH: str = os.getenv("STORAGE_FILE_PATH", "storefront_storage.json")

    DB_HOST: str = os.getenv("DB_HOST", "localhost")
    DB_DATABASE: str = os.getenv("DB_NAME", "storefront_db")
    DB_USER: str = os.getenv("DB_USER", "user")
    DB_PASSWORD: Optional[str] = os.getenv("DB_PASSWORD", "password")

    CART_STORAGE_KEY: str = os.getenv("CART_STORAGE_KEY", "cart_items_v1")
    FAVORITES_STORAGE_KEY: str = os.getenv("FAVORITES_STORAGE_KEY", "FAVORITES")

    CHECKOUT_TAX_RATE: float = float(os.getenv("CHECKOUT_TAX_RATE", "0.18"))  # 18% GST
    CHECKOUT_SHIPPING_FEE: float = float(os.getenv("CHECKOUT_SHIPPING_FEE", "50"))
    CHECKOUT_CURRENCY: str = os.getenv("CHECKOUT_CURRENCY", "INR")

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # INFO, DEBUG, WARNING, ERROR, CRITICAL


settings = Settings()
