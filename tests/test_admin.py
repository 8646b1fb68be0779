from urllib.parse import urlparse

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Query, Session

from renovaapp.extensions import db
from renovaapp.models import Perfil, Usuario


def _profile_names(app):
    with app.app_context():
        return [p.ds_perfil for p in Perfil.query.order_by(Perfil.ds_perfil).all()]


def test_anonymous_is_redirected_home(client):
    r = client.get('/admin')
    assert r.status_code == 302
    assert urlparse(r.headers['Location']).path == '/'


def test_regular_user_is_redirected_home(user_client):
    r = user_client.get('/admin')
    assert r.status_code == 302
    assert urlparse(r.headers['Location']).path == '/'


def test_regular_user_cannot_post(app, user_client):
    before = _profile_names(app)
    r = user_client.post('/admin', data={'_action': 'create', 'ds_perfil': 'Hacker'})
    assert r.status_code == 403
    assert r.get_data(as_text=True) == 'Unauthorized'
    assert _profile_names(app) == before


def test_admin_lists_profiles_sorted(admin_client):
    r = admin_client.get('/admin')
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert body.count('class="profile-row"') == 3
    assert body.index('Administrador') < body.index('Operador') < body.index('Usuário')


def test_admin_creates_profile(app, admin_client):
    r = admin_client.post('/admin', data={'_action': 'create', 'ds_perfil': '  Auditor '})
    assert r.status_code == 302
    assert 'Auditor' in _profile_names(app)


def test_blank_profile_name_is_ignored(app, admin_client):
    before = _profile_names(app)
    admin_client.post('/admin', data={'_action': 'create', 'ds_perfil': '   '})
    assert _profile_names(app) == before


def test_admin_deletes_profile(app, admin_client):
    with app.app_context():
        profile_id = Perfil.query.filter_by(ds_perfil='Usuário').first().idtb_perfil

    admin_client.post('/admin', data={'_action': 'delete', 'idtb_perfil': str(profile_id)})
    assert 'Usuário' not in _profile_names(app)


def test_failed_create_leaves_store_unchanged(app, admin_client, monkeypatch):
    before = _profile_names(app)

    def failing_commit(self):
        raise OperationalError('INSERT', {}, Exception('disk I/O error'))

    monkeypatch.setattr(Session, 'commit', failing_commit)
    r = admin_client.post('/admin', data={'_action': 'create', 'ds_perfil': 'Auditor'},
                          follow_redirects=True)
    monkeypatch.undo()

    assert r.status_code == 200
    assert 'Não foi possível concluir a operação.' in r.get_data(as_text=True)
    assert _profile_names(app) == before


def test_failed_delete_leaves_store_unchanged(app, admin_client, monkeypatch):
    with app.app_context():
        profile_id = Perfil.query.filter_by(ds_perfil='Usuário').first().idtb_perfil
    before = _profile_names(app)

    def failing_commit(self):
        raise OperationalError('DELETE', {}, Exception('database is locked'))

    monkeypatch.setattr(Session, 'commit', failing_commit)
    r = admin_client.post('/admin', data={'_action': 'delete', 'idtb_perfil': str(profile_id)},
                          follow_redirects=True)
    monkeypatch.undo()

    assert r.status_code == 200
    assert 'Não foi possível concluir a operação.' in r.get_data(as_text=True)
    assert _profile_names(app) == before


def test_store_failure_on_list_shows_empty_page(admin_client, monkeypatch):
    def failing_all(self):
        raise OperationalError('SELECT', {}, Exception('disk I/O error'))

    monkeypatch.setattr(Query, 'all', failing_all)
    r = admin_client.get('/admin')
    monkeypatch.undo()

    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert 'Falha ao carregar dados.' in body
    assert 'class="profile-row"' not in body


def test_deactivated_admin_loses_admin_access(app, admin_client):
    with app.app_context():
        user = Usuario.query.filter_by(matricula='1001').first()
        user.st_usuario = 0
        db.session.commit()
    before = _profile_names(app)

    r = admin_client.post('/admin', data={'_action': 'create', 'ds_perfil': 'Fantasma'})
    assert r.status_code == 403
    assert _profile_names(app) == before

    r = admin_client.get('/admin')
    assert r.status_code == 302
    assert urlparse(r.headers['Location']).path == '/'


def test_soft_deleted_admin_cannot_delete_profiles(app, admin_client):
    with app.app_context():
        user = Usuario.query.filter_by(matricula='1001').first()
        user.st_delete = 1
        profile_id = Perfil.query.filter_by(ds_perfil='Usuário').first().idtb_perfil
        db.session.commit()

    r = admin_client.post('/admin', data={'_action': 'delete', 'idtb_perfil': str(profile_id)})
    assert r.status_code == 403
    assert 'Usuário' in _profile_names(app)
