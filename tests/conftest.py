"""Configuração do pytest para o painel de atendimentos."""

import sys
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from app.domain.atendimento import Atendimento  # noqa: E402
from config.settings.dashboard import DashboardSettings  # noqa: E402

SAO_PAULO = ZoneInfo("America/Sao_Paulo")

# Quarta-feira; a semana começou no domingo 2026-10-18
FIXED_NOW = datetime(2026, 10, 21, 14, 30, tzinfo=SAO_PAULO)


@pytest.fixture
def tz() -> ZoneInfo:
    return SAO_PAULO


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def settings() -> DashboardSettings:
    return DashboardSettings(timezone="America/Sao_Paulo")


@pytest.fixture
def make_atendimento():
    """Factory de Atendimento com valores padrão válidos."""

    def _make(
        atendimento_id: str,
        *,
        date: str = "2026-10-20T10:00:00",
        service: str = "terapia-floral",
        amount: str = "100",
        **extra: object,
    ) -> Atendimento:
        record = {
            "id": atendimento_id,
            "nome": f"Cliente {atendimento_id}",
            "dataAtendimento": date,
            "tipoServico": service,
            "valor": amount,
        }
        record.update(extra)
        return Atendimento.from_record(record)

    return _make
