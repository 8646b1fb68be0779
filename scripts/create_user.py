"""Create or update a user with a hashed password.

Usage: python scripts/create_user.py MATRICULA NOME SENHA [PERFIL]
"""
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from renovaapp import create_app
from renovaapp.auth.services import hash_password
from renovaapp.extensions import db
from renovaapp.models import Perfil, Usuario


def main(argv):
    if len(argv) not in (3, 4):
        print(__doc__)
        return 1
    matricula, nome, senha = argv[:3]
    profile_name = argv[3] if len(argv) == 4 else 'Administrador'

    app = create_app()
    with app.app_context():
        perfil = Perfil.query.filter_by(ds_perfil=profile_name).first()
        if not perfil:
            perfil = Perfil(ds_perfil=profile_name)
            db.session.add(perfil)
            db.session.flush()

        user = Usuario.query.filter_by(matricula=matricula).first()
        if not user:
            user = Usuario(matricula=matricula)
            db.session.add(user)
            print("New user created")
        else:
            print("Existing user updated")

        user.nome_usuario = nome
        user.senha = hash_password(senha)
        user.tb_perfil_idtb_perfil = perfil.idtb_perfil
        user.st_usuario = 1
        user.st_delete = 0
        db.session.commit()
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
