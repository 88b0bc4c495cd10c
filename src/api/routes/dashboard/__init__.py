"""Endpoints do painel de atendimentos."""
