"""
Module and Permission Models
"""

from renovaapp.extensions import db


class Modulo(db.Model):
    """A module (tile) shown on the home page"""
    __tablename__ = 'tb_modulo'

    id_modulo = db.Column(db.Integer, primary_key=True)
    ds_modulo = db.Column(db.String(120), nullable=False)
    nome_modulo = db.Column(db.String(80))
    # 'app' modules are listed on the home page
    tipo_modulo = db.Column(db.String(20), default='app')

    def __repr__(self):
        return f'<Modulo {self.ds_modulo}>'


class Permissao(db.Model):
    """Grants a profile access to a module"""
    __tablename__ = 'tb_permissao'

    id_permissao = db.Column(db.Integer, primary_key=True)
    id_perfil = db.Column(db.Integer, db.ForeignKey('tb_perfil.idtb_perfil'), nullable=False)
    id_modulo = db.Column(db.Integer, db.ForeignKey('tb_modulo.id_modulo'), nullable=False)

    def __repr__(self):
        return f'<Permissao Perfil:{self.id_perfil} Modulo:{self.id_modulo}>'
