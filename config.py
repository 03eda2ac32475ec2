import os
from datetime import timedelta

basedir = os.path.abspath(os.path.dirname(__file__))


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'product-catalog-secret-key-change-in-production'

    # ملفات البيانات
    DATA_DIR = os.environ.get('DATA_DIR') or os.path.join(basedir, 'data')
    PRODUCTS_FILE = os.path.join(DATA_DIR, 'products.json')
    SETTINGS_FILE = os.path.join(DATA_DIR, 'settings.json')
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER') or os.path.join(basedir, 'static', 'uploads')

    # بيانات دخول المدير
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME') or 'admin'
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or 'admin123'

    PERMANENT_SESSION_LIFETIME = timedelta(hours=24)
    SESSION_COOKIE_HTTPONLY = True

    # Google Drive
    GOOGLE_DRIVE_FOLDER_ID = os.environ.get('GOOGLE_DRIVE_FOLDER_ID')
    GOOGLE_SERVICE_ACCOUNT = os.environ.get('GOOGLE_SERVICE_ACCOUNT')
    GOOGLE_SERVICE_ACCOUNT_FILE = os.environ.get('GOOGLE_SERVICE_ACCOUNT_FILE') or os.path.join(basedir, 'service-account.json')

    BABEL_DEFAULT_LOCALE = 'en'
    LANGUAGES = ['en', 'ar']

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestingConfig(Config):
    TESTING = True
    WTF_CSRF_ENABLED = False
    SECRET_KEY = 'testing'
