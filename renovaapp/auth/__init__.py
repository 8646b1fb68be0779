"""
Auth Blueprint

Login and logout against tb_usuario, backed by the signed session cookie.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from renovaapp.auth import routes  # noqa: E402, F401
