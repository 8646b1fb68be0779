"""
Admin Routes

Create and delete access profiles. Each action is a single statement, so
a failure leaves tb_perfil as it was.
"""

import logging

from flask import render_template, request, redirect, url_for, flash, Response
from sqlalchemy.exc import SQLAlchemyError

from renovaapp.admin import admin_bp
from renovaapp.admin.decorators import is_admin
from renovaapp.extensions import db
from renovaapp.models import Perfil

logger = logging.getLogger(__name__)


@admin_bp.route('/admin', methods=['GET'])
def profiles():
    """List profiles"""
    if not is_admin():
        return redirect(url_for('main.index'))

    error = None
    try:
        items = Perfil.query.order_by(Perfil.ds_perfil).all()
    except SQLAlchemyError as e:
        logger.exception('Failed to load admin data: %s', e)
        items = []
        error = 'Falha ao carregar dados.'

    return render_template('admin/profiles.html', profiles=items, error=error)


@admin_bp.route('/admin', methods=['POST'])
def profiles_action():
    """Handle the create/delete profile forms"""
    if not is_admin():
        return Response('Unauthorized', status=403, mimetype='text/plain')

    action = request.form.get('_action')
    try:
        if action == 'create':
            _create_profile(request.form.get('ds_perfil', ''))
        elif action == 'delete':
            _delete_profile(request.form.get('idtb_perfil', ''))
        else:
            flash('Ação desconhecida.', 'danger')
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Admin action %s failed: %s', action, e)
        flash('Não foi possível concluir a operação.', 'danger')

    return redirect(url_for('admin.profiles'))


def _create_profile(name):
    name = name.strip()
    if not name:
        return
    db.session.add(Perfil(ds_perfil=name))
    db.session.commit()
    flash(f'Perfil "{name}" criado.', 'success')


def _delete_profile(raw_id):
    try:
        profile_id = int(raw_id)
    except ValueError:
        flash('Perfil inválido.', 'danger')
        return
    deleted = Perfil.query.filter_by(idtb_perfil=profile_id).delete()
    db.session.commit()
    if deleted:
        flash('Perfil excluído.', 'success')
