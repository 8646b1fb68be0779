"""
Admin Decorator

Administrator access is decided by the profile stored in the session at
login time.
"""

from functools import wraps
from flask import abort, current_app, session
from flask_login import current_user

from renovaapp.extensions import login_manager


def is_admin():
    """True when a logged-in, still active user holds the administrator profile."""
    if not current_user.is_authenticated or not session.get('user_id'):
        return False
    return session.get('user_profile') == current_app.config['ADMIN_PROFILE']


def admin_required(f):
    """Decorator to ensure the request is from a logged-in administrator.

    Anonymous requests are sent to the login page; logged-in users with
    another profile get 403.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not current_user.is_authenticated or not session.get('user_id'):
            return login_manager.unauthorized()
        if not is_admin():
            abort(403)
        return f(*args, **kwargs)
    return wrapper
