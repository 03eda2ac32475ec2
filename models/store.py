"""Flat-file store for products and site settings.

Each operation reads or rewrites a whole JSON document. There is no locking:
two concurrent writers race and the last write wins.
"""

import json
import logging
import os

from flask import current_app

from models.product import Product
from models.settings import SiteSettings

logger = logging.getLogger('catalog.store')


class CatalogStore:
    """Flask extension giving read-modify-write access to the JSON files."""

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        for key in ('PRODUCTS_FILE', 'SETTINGS_FILE'):
            os.makedirs(os.path.dirname(app.config[key]), exist_ok=True)
        app.extensions['catalog_store'] = self

    @property
    def products_file(self):
        return current_app.config['PRODUCTS_FILE']

    @property
    def settings_file(self):
        return current_app.config['SETTINGS_FILE']

    # ---- raw documents ----

    def _read_json(self, path):
        with open(path, encoding='utf-8') as f:
            return json.load(f)

    def _write_json(self, path, data):
        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
        except OSError:
            logger.exception('Error writing %s', path)
            raise

    def read_products(self):
        try:
            data = self._read_json(self.products_file)
        except (OSError, ValueError) as e:
            logger.error('Error reading products: %s', e)
            return []
        if not isinstance(data, list):
            logger.error('Error reading products: %s does not hold a list', self.products_file)
            return []
        products = []
        for item in data:
            try:
                products.append(Product.from_dict(item))
            except (KeyError, TypeError, ValueError, AttributeError):
                logger.warning('Ignoring malformed product entry: %r', item)
        return products

    def write_products(self, products):
        self._write_json(self.products_file, [p.to_dict() for p in products])

    def read_settings(self):
        try:
            data = self._read_json(self.settings_file)
            return SiteSettings.from_dict(data)
        except (OSError, ValueError, AttributeError) as e:
            logger.error('Error reading settings: %s', e)
            return SiteSettings()

    def write_settings(self, settings):
        self._write_json(self.settings_file, settings.to_dict())

    # ---- product helpers ----

    @staticmethod
    def next_id(products):
        return max((p.id for p in products), default=0) + 1

    def get_product(self, product_id):
        for product in self.read_products():
            if product.id == product_id:
                return product
        return None

    def add_product(self, payload):
        products = self.read_products()
        product = Product.from_payload(self.next_id(products), payload)
        products.append(product)
        self.write_products(products)
        logger.info('Added product %s (code=%s)', product.id, product.code)
        return product

    def add_products(self, payloads):
        """Append many products in one write, numbering them consecutively."""
        products = self.read_products()
        next_id = self.next_id(products)
        added = []
        for payload in payloads:
            product = Product.from_payload(next_id, payload)
            next_id += 1
            added.append(product)
        products.extend(added)
        self.write_products(products)
        return added

    def update_product(self, product_id, payload):
        products = self.read_products()
        for product in products:
            if product.id == product_id:
                product.update(payload)
                self.write_products(products)
                logger.info('Updated product %s', product_id)
                return product
        return None

    def delete_product(self, product_id):
        products = self.read_products()
        remaining = [p for p in products if p.id != product_id]
        if len(remaining) == len(products):
            return False
        self.write_products(remaining)
        logger.info('Deleted product %s', product_id)
        return True
