"""Bulk import of products from spreadsheet uploads.

A spreadsheet row becomes a product payload by matching its column headers
against known aliases (``Name_EN``, ``name``, ``brand`` ...). Rows without a
product code are skipped. When a Drive folder is given, products that come
without an image URL get one looked up by code.
"""

import logging
import os
import re
from dataclasses import dataclass, field
from typing import Callable, Optional

import pandas as pd

from models.product import coerce_price
from services.drive import find_image_by_code

logger = logging.getLogger('catalog.importer')

ALLOWED_IMPORT_EXTENSIONS = {'.xlsx', '.xls', '.csv'}

# اسم الحقل -> أسماء الأعمدة المقبولة (بعد التوحيد)
COLUMN_ALIASES = {
    'code': ('code',),
    'name_en': ('name_en', 'name'),
    'name_ar': ('name_ar',),
    'brand_en': ('brand_en', 'brand'),
    'brand_ar': ('brand_ar',),
    'price': ('price',),
    'description_en': ('description_en', 'description'),
    'description_ar': ('description_ar',),
    'imageUrl': ('imageurl', 'image_url', 'image'),
}


class ImportFileError(ValueError):
    """The uploaded spreadsheet cannot be imported (bad type or no rows)."""


@dataclass
class ImportResult:
    imported: int = 0
    skipped: int = 0
    products: list = field(default_factory=list)

    @property
    def message(self):
        return 'Import completed: {} products imported, {} skipped'.format(self.imported, self.skipped)


def normalize_header(name):
    return re.sub(r'[\s\-]+', '_', str(name).strip().lower())


def read_spreadsheet(path):
    """Read the first sheet of a .csv/.xlsx/.xls file into a list of row dicts."""
    ext = os.path.splitext(path)[1].lower()
    if ext not in ALLOWED_IMPORT_EXTENSIONS:
        raise ImportFileError('Only Excel files (.xlsx, .xls, .csv) are allowed!')
    try:
        if ext == '.csv':
            df = pd.read_csv(path, dtype=object, keep_default_na=False, na_values=[''])
        else:
            df = pd.read_excel(path, sheet_name=0, dtype=object)
    except pd.errors.EmptyDataError:
        raise ImportFileError('Excel file is empty')
    df = df.astype(object).where(pd.notna(df), None)
    return df.to_dict(orient='records')


def _cell_text(value):
    if value is None:
        return ''
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def map_row(row):
    """Map one spreadsheet row to a product payload, or ``None`` when it has no code."""
    normalized = {}
    for key, value in row.items():
        # الأعمدة الأولى لها الأولوية عند التكرار
        normalized.setdefault(normalize_header(key), value)

    def pick(field_name):
        for alias in COLUMN_ALIASES[field_name]:
            value = normalized.get(alias)
            if _cell_text(value):
                return value
        return None

    code = _cell_text(pick('code'))
    if not code:
        return None

    payload = {name: _cell_text(pick(name)) for name in COLUMN_ALIASES if name != 'price'}
    payload['code'] = code
    payload['price'] = coerce_price(pick('price'))
    return payload


def import_rows(rows, folder_id=None, finder: Optional[Callable] = None):
    """Turn spreadsheet rows into product payloads.

    ``finder(folder_id, code)`` resolves a missing image; its failures leave
    ``imageUrl`` empty and the row is still imported.
    """
    finder = finder or find_image_by_code
    result = ImportResult()
    for index, row in enumerate(rows, start=1):
        try:
            payload = map_row(row)
            if payload is None:
                result.skipped += 1
                continue

            if folder_id and not payload['imageUrl']:
                try:
                    payload['imageUrl'] = finder(folder_id, payload['code']) or ''
                except Exception as e:
                    logger.warning('Image lookup failed for %s: %s', payload['code'], e)
                    payload['imageUrl'] = ''

            result.products.append(payload)
            result.imported += 1
        except Exception:
            logger.exception('Error processing row %d', index)
            result.skipped += 1
    return result


def import_file(path, store, folder_id=None, finder=None):
    """Read ``path``, map its rows and append the products to ``store``."""
    rows = read_spreadsheet(path)
    if not rows:
        raise ImportFileError('Excel file is empty')
    result = import_rows(rows, folder_id=folder_id, finder=finder)
    if result.products:
        result.products = store.add_products(result.products)
    logger.info(result.message)
    return result
