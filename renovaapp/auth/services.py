"""
Auth Services

Credential checks and session bookkeeping for the login flow.
"""

from flask import session
from werkzeug.security import check_password_hash, generate_password_hash

from renovaapp.models import Usuario

SESSION_KEYS = ('user_id', 'user_name', 'user_profile')


def find_active_user(matricula):
    """Return the active, non-deleted user with this matricula, or None."""
    return Usuario.query.filter_by(matricula=matricula, st_usuario=1, st_delete=0).first()


def authenticate(matricula, senha):
    """Return the user when the matricula/senha pair matches, else None.

    Raises SQLAlchemyError when the store cannot be queried.
    """
    user = find_active_user(matricula)
    if user is None or not check_password_hash(user.senha, senha):
        return None
    return user


def hash_password(senha):
    return generate_password_hash(senha, method='pbkdf2:sha256')


def store_identity(user):
    """Write the user's identity into the session."""
    session['user_id'] = user.idtb_usuario
    session['user_name'] = user.nome_usuario
    session['user_profile'] = user.profile_name
