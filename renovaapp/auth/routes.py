"""
Auth Routes

User authentication routes using Flask-Login and the session cookie.
"""

import logging

from flask import render_template, request, redirect, url_for, session, jsonify
from flask_login import login_user, logout_user, current_user
from sqlalchemy.exc import SQLAlchemyError

from renovaapp.auth import auth_bp
from renovaapp.auth.services import authenticate, store_identity

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS = 'Matrícula e senha são obrigatórios.'
INVALID_CREDENTIALS = 'Matrícula ou senha inválida.'
SERVER_ERROR = 'Ocorreu um erro no servidor. Tente novamente.'


def _wants_json():
    best = request.accept_mimetypes.best_match(['application/json', 'text/html'])
    return best == 'application/json' and \
        request.accept_mimetypes[best] > request.accept_mimetypes['text/html']


def _login_error(message, status):
    if _wants_json():
        return jsonify(error=message), status
    return render_template('auth/login.html', error=message), status


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """User login route"""
    if request.method == 'GET':
        if current_user.is_authenticated and session.get('user_id'):
            return redirect(url_for('main.index'))
        return render_template('auth/login.html')

    matricula = request.form.get('matricula', '').strip()
    senha = request.form.get('senha', '')

    if not matricula or not senha:
        return _login_error(MISSING_CREDENTIALS, 400)

    try:
        user = authenticate(matricula, senha)
    except SQLAlchemyError as e:
        logger.exception('Database error during login: %s', e)
        return _login_error(SERVER_ERROR, 500)

    if user is None:
        logger.warning('Failed login for matricula %s', matricula)
        return _login_error(INVALID_CREDENTIALS, 401)

    login_user(user)
    store_identity(user)
    logger.info('User %s logged in', user.matricula)
    return redirect(url_for('main.index'))


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """Destroy the session and go back to the login page"""
    logout_user()
    session.clear()
    return redirect(url_for('auth.login'))
