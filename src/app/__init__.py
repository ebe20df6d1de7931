"""App: domínio, serviços e infraestrutura do perfil de contato.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: ContactRecord, sanitizer, validadores, schema guard
- services/: loader, perfil, merge, compartilhamento
- infra/: implementações concretas de IO (gateway de visão, stores)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs

Padrão: app executa; api adapta; ai extrai; fsm governa; utils apoia.
"""
