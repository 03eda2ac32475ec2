from flask import Blueprint, render_template, redirect, url_for, flash, request, jsonify, session
from flask_login import login_user, logout_user, login_required
from forms.auth_forms import LoginForm
from models.user import AdminUser
from translations import translate

auth_bp = Blueprint('auth', __name__, url_prefix='/auth')


def start_session(user):
    session.permanent = True
    login_user(user)


def unauthorized():
    """Login-required failure: JSON 401 for the API, redirect for pages."""
    if request.blueprint == 'api' or request.path.startswith('/api/'):
        return jsonify({'success': False, 'error': 'Authentication required'}), 401
    flash(translate('login_required'), 'warning')
    return redirect(url_for('auth.login', next=request.full_path))


def _safe_next(target):
    # روابط داخلية فقط
    if target and target.startswith('/') and not target.startswith('//'):
        return target
    return url_for('admin.dashboard')


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    form = LoginForm()
    if form.validate_on_submit():
        user = AdminUser.check_credentials(form.username.data, form.password.data)
        if user:
            start_session(user)
            flash(translate('login_success'), 'success')
            return redirect(_safe_next(request.args.get('next')))
        else:
            flash(translate('login_failed'), 'danger')
    return render_template('auth/login.html', title=translate('login'), form=form)


@auth_bp.route('/logout')
@login_required
def logout():
    logout_user()
    flash(translate('logout_success'), 'success')
    return redirect(url_for('auth.login'))
