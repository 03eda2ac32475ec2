import logging
import os

from flask import Blueprint, render_template, redirect, url_for, flash, current_app
from flask_login import login_required, current_user
from forms.product_forms import ProductForm, ImportForm, LogoForm
from models import store
from services.importer import ImportFileError, import_file
from services.uploads import UploadError, save_import_file, save_logo
from translations import translate

admin_bp = Blueprint('admin', __name__, url_prefix='/admin')

logger = logging.getLogger('catalog.admin')


@admin_bp.route('/')
@login_required
def dashboard():
    import_form = ImportForm(folder_id=current_app.config.get('GOOGLE_DRIVE_FOLDER_ID'))
    return render_template('admin/dashboard.html',
                           title=translate('admin_title'),
                           products=store.read_products(),
                           settings=store.read_settings(),
                           import_form=import_form,
                           logo_form=LogoForm(),
                           username=current_user.username)


@admin_bp.route('/products/add', methods=['GET', 'POST'])
@login_required
def add_product():
    form = ProductForm()
    if form.validate_on_submit():
        try:
            store.add_product(form.to_payload())
        except OSError:
            flash(translate('save_failed'), 'danger')
        else:
            flash(translate('product_added'), 'success')
            return redirect(url_for('admin.dashboard'))
    return render_template('admin/product_form.html', title=translate('add_product'), form=form)


@admin_bp.route('/products/<int:product_id>/edit', methods=['GET', 'POST'])
@login_required
def edit_product(product_id):
    product = store.get_product(product_id)
    if product is None:
        flash(translate('product_not_found'), 'danger')
        return redirect(url_for('admin.dashboard'))
    form = ProductForm(obj=product)
    if form.validate_on_submit():
        try:
            store.update_product(product_id, form.to_payload())
        except OSError:
            flash(translate('save_failed'), 'danger')
        else:
            flash(translate('product_updated'), 'success')
            return redirect(url_for('admin.dashboard'))
    return render_template('admin/product_form.html', title=translate('edit_product'), form=form, edit=True)


@admin_bp.route('/products/<int:product_id>/delete', methods=['POST'])
@login_required
def delete_product(product_id):
    if store.delete_product(product_id):
        flash(translate('product_deleted'), 'success')
    else:
        flash(translate('product_not_found'), 'danger')
    return redirect(url_for('admin.dashboard'))


@admin_bp.route('/import', methods=['POST'])
@login_required
def import_products():
    form = ImportForm()
    if not form.validate_on_submit():
        flash(translate('import_failed'), 'danger')
        return redirect(url_for('admin.dashboard'))

    try:
        path = save_import_file(form.file.data)
    except UploadError as e:
        flash(str(e), 'danger')
        return redirect(url_for('admin.dashboard'))

    folder_id = form.folder_id.data or current_app.config.get('GOOGLE_DRIVE_FOLDER_ID')
    try:
        result = import_file(path, store, folder_id=folder_id)
        flash(translate('import_done', result.imported, result.skipped), 'success')
    except ImportFileError as e:
        flash(str(e), 'danger')
    except Exception as e:
        logger.exception('Error importing Excel')
        flash('{}: {}'.format(translate('import_failed'), e), 'danger')
    finally:
        try:
            os.remove(path)
        except OSError as e:
            logger.warning('Could not remove %s: %s', path, e)
    return redirect(url_for('admin.dashboard'))


@admin_bp.route('/logo', methods=['POST'])
@login_required
def upload_logo():
    form = LogoForm()
    if form.validate_on_submit():
        try:
            save_logo(form.logo.data)
            flash(translate('logo_uploaded'), 'success')
        except UploadError as e:
            flash(str(e), 'danger')
        except OSError:
            logger.exception('Error uploading logo')
            flash(translate('upload_failed'), 'danger')
    else:
        flash(translate('upload_failed'), 'danger')
    return redirect(url_for('admin.dashboard'))
