import logging
import os

from flask import Blueprint, current_app, jsonify, request, send_file
from flask_login import current_user, login_required, logout_user
from werkzeug.exceptions import HTTPException

from models import store
from models.user import AdminUser
from routes.auth import start_session
from services import drive
from services.export import export_products
from services.importer import ImportFileError, import_file
from services.uploads import UploadError, save_import_file, save_logo

api_bp = Blueprint('api', __name__, url_prefix='/api')

logger = logging.getLogger('catalog.api')


def error_response(message, status):
    return jsonify({'success': False, 'error': message}), status


@api_bp.app_errorhandler(HTTPException)
def handle_http_error(e):
    # صفحات HTML تحتفظ بالاستجابة الافتراضية
    if not request.path.startswith('/api/') or e.code is None or e.code < 400:
        return e
    return error_response(e.description if e.code != 404 else 'Not found', e.code)


# ---- المصادقة ----

@api_bp.route('/login', methods=['POST'])
def login():
    data = request.get_json(silent=True) or request.form
    username = data.get('username', '')
    password = data.get('password', '')
    user = AdminUser.check_credentials(username, password)
    if user is None:
        logger.warning('Failed login attempt for %r', username)
        return error_response('Invalid credentials', 401)
    start_session(user)
    return jsonify({'success': True, 'message': 'Login successful', 'username': user.username})


@api_bp.route('/logout', methods=['POST'])
def logout():
    logout_user()
    return jsonify({'success': True, 'message': 'Logout successful'})


@api_bp.route('/check-auth', methods=['GET'])
def check_auth():
    if current_user.is_authenticated:
        return jsonify({'authenticated': True, 'username': current_user.username})
    return jsonify({'authenticated': False})


# ---- المنتجات ----

@api_bp.route('/products', methods=['GET'])
def list_products():
    return jsonify([p.to_dict() for p in store.read_products()])


@api_bp.route('/products/<int:product_id>', methods=['GET'])
def get_product(product_id):
    product = store.get_product(product_id)
    if product is None:
        return error_response('Product not found', 404)
    return jsonify(product.to_dict())


@api_bp.route('/products', methods=['POST'])
@login_required
def add_product():
    payload = request.get_json(silent=True) or request.form.to_dict()
    try:
        product = store.add_product(payload)
    except OSError:
        return error_response('Failed to add product', 500)
    return jsonify({'success': True, 'message': 'Product added successfully', 'product': product.to_dict()})


@api_bp.route('/products/<int:product_id>', methods=['PUT'])
@login_required
def update_product(product_id):
    payload = request.get_json(silent=True) or request.form.to_dict()
    try:
        product = store.update_product(product_id, payload)
    except OSError:
        return error_response('Failed to update product', 500)
    if product is None:
        return error_response('Product not found', 404)
    return jsonify({'success': True, 'message': 'Product updated successfully', 'product': product.to_dict()})


@api_bp.route('/products/<int:product_id>', methods=['DELETE'])
@login_required
def delete_product(product_id):
    try:
        deleted = store.delete_product(product_id)
    except OSError:
        return error_response('Failed to delete product', 500)
    if not deleted:
        return error_response('Product not found', 404)
    return jsonify({'success': True, 'message': 'Product deleted successfully'})


@api_bp.route('/products/export', methods=['GET'])
@login_required
def export():
    output = export_products(store.read_products())
    return send_file(
        output,
        mimetype='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
        as_attachment=True,
        download_name='products.xlsx',
    )


# ---- الاستيراد ----

@api_bp.route('/import-excel', methods=['POST'])
@login_required
def import_excel():
    try:
        path = save_import_file(request.files.get('file'))
    except UploadError as e:
        return error_response(str(e), 400)

    folder_id = request.form.get('folderId') or current_app.config.get('GOOGLE_DRIVE_FOLDER_ID')
    try:
        result = import_file(path, store, folder_id=folder_id)
    except ImportFileError as e:
        return error_response(str(e), 400)
    except Exception as e:
        logger.exception('Error importing Excel')
        return error_response('Failed to import Excel file: {}'.format(e), 500)
    finally:
        try:
            os.remove(path)
        except OSError as e:
            logger.warning('Could not remove %s: %s', path, e)

    return jsonify({
        'success': True,
        'message': result.message,
        'imported': result.imported,
        'skipped': result.skipped,
    })


@api_bp.route('/drive/test', methods=['GET'])
@login_required
def drive_test():
    folder_id = request.args.get('folderId') or current_app.config.get('GOOGLE_DRIVE_FOLDER_ID')
    if not folder_id:
        return error_response('folderId is required', 400)
    return jsonify({'success': True, 'connected': drive.test_connection(folder_id)})


# ---- الإعدادات والشعار ----

@api_bp.route('/settings', methods=['GET'])
def get_settings():
    return jsonify(store.read_settings().to_dict())


@api_bp.route('/logo', methods=['POST'])
@login_required
def upload_logo():
    try:
        logo = save_logo(request.files.get('logo'))
    except UploadError as e:
        return error_response(str(e), 400)
    except OSError:
        logger.exception('Error uploading logo')
        return error_response('Failed to upload logo', 500)
    return jsonify({'success': True, 'message': 'Logo uploaded successfully', 'logo': logo})
