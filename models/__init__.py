from models.store import CatalogStore

store = CatalogStore()

from .product import Product
from .settings import SiteSettings
from .user import AdminUser
