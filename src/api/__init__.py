"""API: camada de borda HTTP.

Responsabilidades:
- Definir endpoints HTTP (health, scan, perfil)
- Validação inicial de request
- Delegação para serviços montados no bootstrap
- Respostas HTTP apropriadas

NÃO PODE conter: regras de sanitização/validação, FSM ou IO de storage.
"""
