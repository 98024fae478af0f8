"""API — camada de borda: formulário da landing page e Beehiiv.

Responsabilidades:
- Receber o formulário de inscrição (routes)
- Decodificar e normalizar o body em SubmissionRecord
- Validar presença do email
- Construir o payload de custom fields do Beehiiv
- Enviar a inscrição via HTTP

Subpastas:
- connectors/: cliente HTTP do Beehiiv
- normalizers/: body bruto → SubmissionRecord
- payload_builders/: SubmissionRecord → SubscriptionPayload
- validators/: validação do SubmissionRecord
- routes/: /api/subscribe, /health e /ready

NÃO PODE conter: orquestração do use case.
"""
