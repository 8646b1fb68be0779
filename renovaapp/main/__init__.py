"""
Main Blueprint

Home page listing the modules granted to the logged-in user's profile.
"""

from flask import Blueprint

main_bp = Blueprint('main', __name__)

from renovaapp.main import routes  # noqa: E402, F401
