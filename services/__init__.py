"""
Módulo: `services/__init__.py`.
Finalidade: Regras de negócio acima dos stores (fluxo de autenticação).
"""
