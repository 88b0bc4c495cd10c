"""Modelo de domínio de um atendimento registrado pelo profissional.

Os registros são persistidos com as chaves originais do editor externo
(camelCase em português). Os aliases mantêm esse formato no store enquanto
o código usa nomes Python; chaves desconhecidas são preservadas para que
uma regravação completa nunca descarte dados do editor.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PaymentStatus(StrEnum):
    """Situação de pagamento de um atendimento."""

    PAID = "pago"
    PENDING = "pendente"
    INSTALLMENT = "parcelado"

    def __str__(self) -> str:
        return self.value


_STATUS_VALUES = frozenset(status.value for status in PaymentStatus)


class Atendimento(BaseModel):
    """Um atendimento faturável (cliente, data, serviço, valor, status)."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(..., min_length=1, description="Identificador opaco atribuído pelo store.")
    client_name: str = Field(..., alias="nome", description="Nome do cliente.")
    appointment_date: str = Field(
        ...,
        alias="dataAtendimento",
        description="Data/hora do atendimento em texto (ISO-8601 esperado).",
    )
    service_type: str = Field(..., alias="tipoServico", description="Tipo de serviço.")
    amount: str = Field(
        default="",
        alias="valor",
        description="Valor decimal em texto; pode vir vazio ou malformado.",
    )
    payment_status: PaymentStatus | None = Field(default=None, alias="statusPagamento")
    attention_flag: bool = Field(default=False, alias="atencaoFlag")
    attention_note: str | None = Field(default=None, alias="atencaoNota")

    # Campos do editor externo, apenas repassados
    birth_date: str | None = Field(default=None, alias="dataNascimento")
    sign: str | None = Field(default=None, alias="signo")
    destination: str | None = Field(default=None, alias="destino")
    year: str | None = Field(default=None, alias="ano")
    details: str | None = Field(default=None, alias="detalhes")
    treatment: str | None = Field(default=None, alias="tratamento")
    referral: str | None = Field(default=None, alias="indicacao")

    @field_validator("amount", mode="before")
    @classmethod
    def _amount_as_text(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, bool):
            return ""
        if isinstance(value, int | float):
            return str(value)
        return value

    @field_validator("payment_status", mode="before")
    @classmethod
    def _unknown_status_as_none(cls, value: Any) -> Any:
        if value in (None, ""):
            return None
        if isinstance(value, str) and value.strip().lower() in _STATUS_VALUES:
            return value.strip().lower()
        return None

    @field_validator("attention_flag", mode="before")
    @classmethod
    def _missing_flag_as_false(cls, value: Any) -> Any:
        return False if value is None else value

    def is_service(self, service_type: str) -> bool:
        """True se o atendimento é do tipo de serviço informado."""
        return self.service_type == service_type

    def to_record(self) -> dict[str, Any]:
        """Serializa no formato do store (aliases, sem campos nulos)."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Atendimento:
        """Constrói a partir de um registro bruto do store."""
        return cls.model_validate(record)


__all__ = ["Atendimento", "PaymentStatus"]
