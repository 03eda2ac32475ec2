from flask import current_app
from flask_login import UserMixin


# المستخدم الوحيد (المدير) - بيانات الدخول من الإعدادات بدون تشفير
class AdminUser(UserMixin):
    def __init__(self, username):
        self.id = username
        self.username = username

    @staticmethod
    def check_credentials(username, password):
        config = current_app.config
        if username == config['ADMIN_USERNAME'] and password == config['ADMIN_PASSWORD']:
            return AdminUser(username)
        return None

    @staticmethod
    def load(user_id):
        if user_id == current_app.config['ADMIN_USERNAME']:
            return AdminUser(user_id)
        return None
