"""
User and Profile Models
"""

from flask_login import UserMixin
from renovaapp.extensions import db


class Perfil(db.Model):
    """Access profile (role) a user belongs to"""
    __tablename__ = 'tb_perfil'

    idtb_perfil = db.Column(db.Integer, primary_key=True)
    ds_perfil = db.Column(db.String(100), nullable=False)

    usuarios = db.relationship('Usuario', backref='perfil', lazy=True)

    def __repr__(self):
        return f'<Perfil {self.ds_perfil}>'


class Usuario(UserMixin, db.Model):
    """Application user, identified by matricula"""
    __tablename__ = 'tb_usuario'

    idtb_usuario = db.Column(db.Integer, primary_key=True)
    matricula = db.Column(db.String(40), unique=True, nullable=False, index=True)
    nome_usuario = db.Column(db.String(120), nullable=False)
    # Salted hash produced by werkzeug.security
    senha = db.Column(db.String(255), nullable=False)
    tb_perfil_idtb_perfil = db.Column(db.Integer, db.ForeignKey('tb_perfil.idtb_perfil'))
    st_usuario = db.Column(db.Integer, default=1, nullable=False)
    st_delete = db.Column(db.Integer, default=0, nullable=False)

    @property
    def is_active(self):
        return self.st_usuario == 1 and self.st_delete == 0

    @property
    def profile_name(self):
        return self.perfil.ds_perfil if self.perfil else None

    def get_id(self):
        return str(self.idtb_usuario)

    def __repr__(self):
        return f'<Usuario {self.matricula}>'
