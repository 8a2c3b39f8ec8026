from .shop import Shop
from .admin import Admin
from .product import Product
from .event import Event

__all__ = ['Shop', 'Admin', 'Product', 'Event']
