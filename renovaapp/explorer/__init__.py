"""
Explorer Blueprint

Database browser: table list, column schema, a row sample and full-table
export as CSV or JSON.
"""

from flask import Blueprint

explorer_bp = Blueprint('explorer', __name__)

from renovaapp.explorer import routes  # noqa: E402, F401
