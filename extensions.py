"""
Módulo: `extensions.py`.
Finalidade: Inicialização e exportação das instâncias das extensões Flask.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# As extensões são criadas aqui e inicializadas na fábrica da aplicação
db = SQLAlchemy()
login_manager = LoginManager()
