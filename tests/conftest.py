import pytest
from sqlalchemy import text

from renovaapp import create_app
from renovaapp.auth.services import hash_password
from renovaapp.config import TestConfig
from renovaapp.extensions import db
from renovaapp.models import Perfil, Usuario, Modulo, Permissao


@pytest.fixture()
def app():
    return create_app(TestConfig)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def users(app):
    """Seed one admin, one regular user, an inactive and a deleted user."""
    with app.app_context():
        admin = Perfil.query.filter_by(ds_perfil='Administrador').first()
        operador = Perfil(ds_perfil='Operador')
        db.session.add(operador)
        db.session.flush()

        db.session.add_all([
            Usuario(matricula='1001', nome_usuario='Ana Souza', senha=hash_password('segredo'),
                    tb_perfil_idtb_perfil=admin.idtb_perfil),
            Usuario(matricula='2002', nome_usuario='Bruno Lima', senha=hash_password('senha123'),
                    tb_perfil_idtb_perfil=operador.idtb_perfil),
            Usuario(matricula='3003', nome_usuario='Carla Dias', senha=hash_password('inativa'),
                    tb_perfil_idtb_perfil=operador.idtb_perfil, st_usuario=0),
            Usuario(matricula='4004', nome_usuario='Davi Rocha', senha=hash_password('removido'),
                    tb_perfil_idtb_perfil=operador.idtb_perfil, st_delete=1),
        ])

        relatorios = Modulo(ds_modulo='Relatórios', nome_modulo='relatorios', tipo_modulo='app')
        cadastro = Modulo(ds_modulo='Cadastro', nome_modulo='cadastro', tipo_modulo='app')
        interno = Modulo(ds_modulo='Configuração', nome_modulo='config', tipo_modulo='sistema')
        db.session.add_all([relatorios, cadastro, interno])
        db.session.flush()

        db.session.add_all([
            Permissao(id_perfil=admin.idtb_perfil, id_modulo=relatorios.id_modulo),
            Permissao(id_perfil=admin.idtb_perfil, id_modulo=cadastro.id_modulo),
            Permissao(id_perfil=admin.idtb_perfil, id_modulo=interno.id_modulo),
            Permissao(id_perfil=operador.idtb_perfil, id_modulo=relatorios.id_modulo),
        ])
        db.session.commit()


@pytest.fixture()
def contacts(app):
    """A small table with the shape used in the explorer examples."""
    with app.app_context():
        db.session.execute(text('CREATE TABLE tb_contato (id INTEGER NOT NULL PRIMARY KEY, nome TEXT)'))
        db.session.execute(text("INSERT INTO tb_contato (id, nome) VALUES (1, 'Ana')"))
        db.session.commit()


def login(client, matricula, senha, **kwargs):
    return client.post('/login', data={'matricula': matricula, 'senha': senha}, **kwargs)


@pytest.fixture()
def admin_client(client, users):
    login(client, '1001', 'segredo')
    return client


@pytest.fixture()
def user_client(client, users):
    login(client, '2002', 'senha123')
    return client
