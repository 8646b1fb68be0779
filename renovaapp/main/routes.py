"""
Main Routes
"""

import logging

from flask import render_template, session
from flask_login import login_required
from sqlalchemy.exc import SQLAlchemyError

from renovaapp.admin.decorators import is_admin
from renovaapp.main import main_bp
from renovaapp.models import Modulo, Permissao, Usuario

logger = logging.getLogger(__name__)


def get_user_modules(user_id):
    """Modules of type 'app' the user's profile is granted."""
    return Modulo.query \
        .join(Permissao, Permissao.id_modulo == Modulo.id_modulo) \
        .join(Usuario, Usuario.tb_perfil_idtb_perfil == Permissao.id_perfil) \
        .filter(Usuario.idtb_usuario == user_id, Modulo.tipo_modulo == 'app') \
        .order_by(Modulo.id_modulo) \
        .all()


@main_bp.route('/')
@login_required
def index():
    """Home page with the user's modules"""
    error = None
    try:
        modules = get_user_modules(session.get('user_id'))
    except SQLAlchemyError as e:
        logger.exception('Could not load modules: %s', e)
        modules = []
        error = 'Falha ao carregar os módulos.'

    return render_template('main/index.html',
                           user_name=session.get('user_name') or 'Usuário',
                           is_admin=is_admin(),
                           app_modules=modules,
                           error=error)
