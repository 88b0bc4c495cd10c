"""App: núcleo do painel: agregação, visão por período e mutações.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos (Atendimento, Period, DashboardTotals, Notification)
- services/: período, filtro, agregação, view, coordinator e presenter
- infra/: stores, notificações e navegação concretas
- protocols/: contratos/interfaces
- observability/: correlation_id dos logs

Padrão: app executa; api adapta; fsm governa; utils apoia.
"""
