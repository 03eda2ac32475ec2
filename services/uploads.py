import logging
import os
import random
import re
import time

from flask import current_app

from models import store
from services.importer import ALLOWED_IMPORT_EXTENSIONS

logger = logging.getLogger('catalog.uploads')

UPLOADS_URL_PREFIX = '/uploads/'


class UploadError(ValueError):
    """The uploaded file is missing or of the wrong type."""


def file_extension(filename):
    ext = os.path.splitext(filename or '')[1].lower()
    return ext if re.fullmatch(r'\.[a-z0-9]+', ext) else ''


def unique_filename(prefix, original):
    ext = file_extension(original)
    return '{}-{}-{}{}'.format(prefix, int(time.time() * 1000), random.randint(0, 10 ** 9), ext)


def is_image(file_storage):
    return bool(file_storage.mimetype) and file_storage.mimetype.startswith('image/')


def upload_path(filename):
    folder = current_app.config['UPLOAD_FOLDER']
    os.makedirs(folder, exist_ok=True)
    return os.path.join(folder, filename)


def _stored_logo_path(logo):
    """Local path for a logo URL previously produced by ``save_logo``."""
    if not logo or not logo.startswith(UPLOADS_URL_PREFIX):
        return None
    return os.path.join(current_app.config['UPLOAD_FOLDER'], os.path.basename(logo))


def save_logo(file_storage):
    """Store a new logo, remove the previous file and return the new URL."""
    if file_storage is None or not file_storage.filename:
        raise UploadError('No file uploaded')
    if not is_image(file_storage):
        raise UploadError('Only image files are allowed!')

    filename = unique_filename('logo', file_storage.filename)
    file_storage.save(upload_path(filename))

    settings = store.read_settings()
    old_path = _stored_logo_path(settings.logo)

    settings.logo = UPLOADS_URL_PREFIX + filename
    try:
        store.write_settings(settings)
    except OSError:
        _remove_quietly(upload_path(filename))
        raise
    logger.info('Logo updated: %s', settings.logo)

    # الشعار القديم يحذف فقط بعد حفظ الإعدادات الجديدة
    if old_path:
        _remove_quietly(old_path)
    return settings.logo


def _remove_quietly(path):
    try:
        os.remove(path)
    except OSError as e:
        logger.warning('Could not remove %s: %s', path, e)


def save_import_file(file_storage):
    if file_storage is None or not file_storage.filename:
        raise UploadError('No file uploaded')
    if file_extension(file_storage.filename) not in ALLOWED_IMPORT_EXTENSIONS:
        raise UploadError('Only Excel files (.xlsx, .xls, .csv) are allowed!')
    filename = unique_filename('excel', file_storage.filename)
    path = upload_path(filename)
    file_storage.save(path)
    return path
