"""
RENOVAAPP - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, session
from sqlalchemy.exc import SQLAlchemyError

from renovaapp.config import get_config
from renovaapp.extensions import db, login_manager

logger = logging.getLogger(__name__)


def create_app(config_class=None):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: chosen by APP_ENV)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class or get_config())

    if not app.config.get('SECRET_KEY'):
        raise RuntimeError('SECRET_KEY must be set in production.')

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'
    login_manager.login_message = None

    # Register blueprints
    from renovaapp.auth import auth_bp
    from renovaapp.main import main_bp
    from renovaapp.admin import admin_bp
    from renovaapp.explorer import explorer_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(main_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(explorer_bp)

    @app.context_processor
    def inject_identity():
        """Inject the session identity into templates."""
        from renovaapp.admin.decorators import is_admin
        return dict(session_user_name=session.get('user_name'),
                    session_is_admin=is_admin())

    @login_manager.user_loader
    def load_user(user_id):
        from renovaapp.models import Usuario
        user = db.session.get(Usuario, int(user_id))
        if user is None or not user.is_active:
            return None
        return user

    # Create database tables
    with app.app_context():
        os.makedirs(app.config['INSTANCE_DIR'], exist_ok=True)
        db.create_all()
        _ensure_default_data(app)

    return app


def _ensure_default_data(app):
    """Ensure the default profiles exist."""
    from renovaapp.models import Perfil

    try:
        existing = {p.ds_perfil for p in Perfil.query.all()}
        for name in app.config['DEFAULT_PROFILES']:
            if name not in existing:
                db.session.add(Perfil(ds_perfil=name))
                logger.info('Created default profile %s', name)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Could not create default profiles: %s', e)
