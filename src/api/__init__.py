"""API — camada de borda HTTP.

Responsabilidades:
- Expor endpoints (logout, validação de contratos, health)
- Converter contratos internos (envelope, violações) em respostas JSON
- Middleware de correlation_id

NÃO PODE conter: regras de validação nem a rotina de invalidação de sessão
(ficam em app/).
"""
