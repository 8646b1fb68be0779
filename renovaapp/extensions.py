"""
Flask Extensions

The database handle and the login manager are created here and bound to
the application inside ``create_app``.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager for user authentication
login_manager = LoginManager()
