"""
Record Schemas - Pydantic models for prontuário payloads and responses.

Required fields are optional here on purpose: their absence is reported by
the service as a 400 with the list of required fields.
"""
import json
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, field_validator


class RecordPayload(BaseModel):
    """
    Record Payload Schema - Used for create and full update

    Fields:
    - nome, cpf, data_consulta, diagnostico: required by the service
    - sintomas, anamnese: optional narrative
    - exames_solicitados: list of exam names, anything else is stored as []
    """
    nome: Optional[str] = None
    cpf: Optional[str] = None
    data_consulta: Optional[str] = None
    diagnostico: Optional[str] = None
    sintomas: Optional[str] = None
    anamnese: Optional[str] = None
    exames_solicitados: Any = None


class RecordResponse(BaseModel):
    """
    Record Response Schema - Stored prontuário with the exam list decoded
    """
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    cpf: str
    data_consulta: str
    diagnostico: str
    sintomas: Optional[str] = None
    anamnese: Optional[str] = None
    exames_solicitados: List[str] = []

    @field_validator("exames_solicitados", mode="before")
    @classmethod
    def decode_requested_exams(cls, value):
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except ValueError:
                return []
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            return []
        return value


class RecordCreated(BaseModel):
    message: str
    id: int


class MessageResponse(BaseModel):
    message: str
