from flask import Flask, request, session
from flask_login import LoginManager
from flask_babel import Babel, format_decimal
from flask_wtf.csrf import CSRFProtect
import click
import logging
import os
from config import Config
from logging_config import setup_logging
from models import store
from models.user import AdminUser
from translations import current_language, translate

# Initialize extensions
login_manager = LoginManager()
babel = Babel()
csrf = CSRFProtect()


def create_app(config_object=Config, **overrides):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.config.update(overrides)

    setup_logging(app.config['LOG_LEVEL'])
    store.init_app(app)
    os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)
    login_manager.init_app(app)
    csrf.init_app(app)

    # اللغة: ?lang= ثم الجلسة ثم الافتراضية
    def get_locale():
        lang = request.args.get('lang')
        if lang in app.config['LANGUAGES']:
            session['lang'] = lang
            return lang
        lang = session.get('lang')
        if lang in app.config['LANGUAGES']:
            return lang
        return app.config['BABEL_DEFAULT_LOCALE']
    babel.init_app(app, locale_selector=get_locale)

    # Flask-Login user loader
    @login_manager.user_loader
    def load_user(user_id):
        return AdminUser.load(user_id)

    from routes.auth import auth_bp, unauthorized
    login_manager.unauthorized_handler(unauthorized)
    app.register_blueprint(auth_bp)
    from routes.api import api_bp
    # الواجهة البرمجية تعتمد على جلسة JSON بدون رمز CSRF
    csrf.exempt(api_bp)
    app.register_blueprint(api_bp)
    from routes.admin import admin_bp
    app.register_blueprint(admin_bp)
    from routes.catalog import catalog_bp
    app.register_blueprint(catalog_bp)

    @app.context_processor
    def inject_i18n():
        lang = current_language()
        return {
            't': translate,
            'lang': lang,
            'text_dir': 'rtl' if lang == 'ar' else 'ltr',
        }

    @app.template_filter('price')
    def format_price(value):
        return format_decimal(value, format='#,##0.00')

    @app.cli.command('drive-test')
    @click.argument('folder_id')
    def drive_test(folder_id):
        """Check that the Google Drive folder can be listed."""
        from services import drive
        if drive.test_connection(folder_id):
            click.echo('Google Drive connection successful')
        else:
            raise click.ClickException('Google Drive connection failed')

    return app


if __name__ == "__main__":
    app = create_app()
    port = int(os.environ.get('PORT', 3000))
    logger = logging.getLogger('catalog.app')
    logger.info('Product catalog: http://localhost:%s/', port)
    logger.info('Admin panel: http://localhost:%s/admin/', port)
    app.run(debug=True, port=port)
