from flask import Blueprint, render_template, request, redirect, url_for, session, current_app, send_from_directory, abort
from models import store
from services.catalog import SORT_OPTIONS, brands, filter_products, sort_products
from translations import current_language, translate

catalog_bp = Blueprint('catalog', __name__)


@catalog_bp.route('/')
def index():
    lang = current_language()
    products = store.read_products()
    brand = request.args.get('brand', '')
    query = request.args.get('q', '')
    sort_by = request.args.get('sort', '')
    if sort_by not in SORT_OPTIONS:
        sort_by = ''

    shown = sort_products(filter_products(products, lang, brand=brand, query=query), lang, sort_by)
    return render_template('catalog/index.html',
                           title=translate('catalog_title'),
                           products=shown,
                           brands=brands(products, lang),
                           selected_brand=brand,
                           query=query,
                           sort_by=sort_by,
                           settings=store.read_settings())


@catalog_bp.route('/lang/<code>')
def set_language(code):
    if code not in current_app.config['LANGUAGES']:
        abort(404)
    session['lang'] = code
    target = request.referrer
    if not target or not target.startswith(request.host_url):
        target = url_for('catalog.index')
    return redirect(target)


@catalog_bp.route('/uploads/<path:filename>')
def uploaded_file(filename):
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)
