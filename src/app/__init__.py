"""App — núcleo: validação, contratos de resposta e sessão.

Subpastas:
- bootstrap/: inicialização (logging, validação de settings)
- validation/: regras de campo, schemas de DTO e validador
- contracts/: envelope de resposta e paginação
- sessions/: invalidação de sessão (logout)
- protocols/: contratos/interfaces
- infra/: implementações concretas (stores de marcadores)
- observability/: correlation_id para logs

Padrão: app executa; api adapta; config configura; utils apoia.
"""
