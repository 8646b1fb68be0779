"""
Models Package

Exports all models for easy importing.
"""

from renovaapp.models.user import Perfil, Usuario
from renovaapp.models.module import Modulo, Permissao

__all__ = ['Perfil', 'Usuario', 'Modulo', 'Permissao']
