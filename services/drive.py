"""Google Drive lookup of product images by product code.

Setup:

1. Create a service account in the Google Cloud console and enable the
   Google Drive API for its project.
2. Download the JSON key. Either put its contents in the
   ``GOOGLE_SERVICE_ACCOUNT`` environment variable (production) or save it as
   the file named by ``GOOGLE_SERVICE_ACCOUNT_FILE`` (local development).
3. Share the Drive folder holding the product images with the service
   account e-mail, read-only.
4. The folder id is the last segment of the folder URL
   (``https://drive.google.com/drive/folders/<FOLDER_ID>``).

Images are expected to be named after the product code, e.g. ``1001.jpg`` or
``1001-front.png``.
"""

import json
import logging
import os

from flask import current_app, has_app_context
from google.oauth2 import service_account
from googleapiclient.discovery import build

logger = logging.getLogger('catalog.drive')

SCOPES = ['https://www.googleapis.com/auth/drive.readonly']
IMAGE_EXTENSIONS = ('.jpg', '.jpeg', '.png', '.gif', '.webp')
VIEW_URL = 'https://drive.google.com/uc?export=view&id={}'


def _load_credentials_info():
    config = current_app.config if has_app_context() else {}
    raw = config.get('GOOGLE_SERVICE_ACCOUNT')
    if raw:
        logger.debug('Using Google Drive credentials from GOOGLE_SERVICE_ACCOUNT')
        try:
            return json.loads(raw)
        except ValueError as e:
            logger.error('Failed to parse GOOGLE_SERVICE_ACCOUNT: %s', e)
            return None

    path = config.get('GOOGLE_SERVICE_ACCOUNT_FILE')
    if path and os.path.exists(path):
        logger.debug('Using Google Drive credentials from %s', path)
        with open(path, encoding='utf-8') as f:
            return json.load(f)

    logger.warning('Google Drive credentials not found; set GOOGLE_SERVICE_ACCOUNT '
                   'or GOOGLE_SERVICE_ACCOUNT_FILE')
    return None


def get_drive_client():
    """Return an authenticated Drive v3 client, or ``None`` when unavailable."""
    try:
        info = _load_credentials_info()
        if info is None:
            return None
        credentials = service_account.Credentials.from_service_account_info(info, scopes=SCOPES)
        return build('drive', 'v3', credentials=credentials, cache_discovery=False)
    except Exception as e:
        logger.error('Error initializing Google Drive client: %s', e)
        return None


def _quote(value):
    return str(value).replace('\\', '\\\\').replace("'", "\\'")


def build_query(folder_id, code):
    image_terms = ["mimeType contains 'image/'"]
    image_terms += ["name contains '{}'".format(ext) for ext in IMAGE_EXTENSIONS]
    return "'{}' in parents and name contains '{}' and ({}) and trashed=false".format(
        _quote(folder_id), _quote(code), ' or '.join(image_terms))


def pick_file(files, code):
    """Exact name match (ignoring extension) first, then prefix match, then the first result."""
    if not files:
        return None
    for f in files:
        if os.path.splitext(f['name'])[0] == code:
            return f
    for f in files:
        if f['name'].startswith(code):
            return f
    return files[0]


def find_image_by_code(folder_id, code):
    """Return a public view URL for the image of ``code``, or ``None``.

    Never raises: any failure is logged and reported as "no image".
    """
    code = str(code)
    try:
        drive = get_drive_client()
        if drive is None:
            logger.warning('Google Drive not configured; no image for product %s', code)
            return None

        response = drive.files().list(
            q=build_query(folder_id, code),
            fields='files(id, name, mimeType)',
            pageSize=10,
        ).execute()

        selected = pick_file(response.get('files', []), code)
        if selected is None:
            logger.info('No image found for product code %s', code)
            return None

        logger.info('Found image for %s: %s', code, selected['name'])
        return VIEW_URL.format(selected['id'])
    except Exception as e:
        logger.error('Error finding image for product %s: %s', code, e)
        return None


def test_connection(folder_id):
    try:
        drive = get_drive_client()
        if drive is None:
            return False
        response = drive.files().list(
            q="'{}' in parents".format(_quote(folder_id)),
            pageSize=1,
            fields='files(id, name)',
        ).execute()
        logger.info('Google Drive connection successful (%s)',
                    'files found' if response.get('files') else 'folder empty')
        return True
    except Exception as e:
        logger.error('Google Drive connection test failed: %s', e)
        return False
