"""App — orquestração da inscrição: use case, wiring e entrypoints.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: caso de uso de inscrição (sem IO direto)
- protocols/: contratos/interfaces e modelos
- entrypoints/: adapter serverless function(event, context)
- observability/: correlation_id para logs estruturados
- constants/: campos e categorias do Beehiiv

Padrão: app executa; api adapta; utils apoia.
"""
