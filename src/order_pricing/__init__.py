import logging

from .config import Config, configure_logging, get_config, refresh_config
from .errors import ConfigError, MalformedItemError, OrderPricingError
from .order import Order
from .types import Item, PriceBreakdown, PricedItem

__version__ = "0.1.0"

__all__ = [
    "Config",
    "ConfigError",
    "Item",
    "MalformedItemError",
    "Order",
    "OrderPricingError",
    "PriceBreakdown",
    "PricedItem",
    "__version__",
    "configure_logging",
    "get_config",
    "refresh_config",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
