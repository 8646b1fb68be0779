"""
Admin Blueprint

Profile management, restricted to the administrator profile.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from renovaapp.admin import routes  # noqa: E402, F401
