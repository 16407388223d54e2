"""
Exam Schemas - Pydantic models for exam payloads and responses.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, model_validator


class TextExamPayload(BaseModel):
    """
    Text Exam Payload Schema - Used by POST /exames/texto

    ``data_resultado`` and ``data_anexo`` carry the same date; the first
    non-empty one wins.
    """
    prontuario_id: Optional[int] = None
    tipo: Optional[str] = None
    observacoes: Optional[str] = None
    resultado_texto: Optional[str] = None
    data_resultado: Optional[str] = None
    data_anexo: Optional[str] = None


class ExamResponse(BaseModel):
    """
    Exam Response Schema - Stored exam, result date also exposed as data_anexo
    """
    model_config = ConfigDict(from_attributes=True)

    id: int
    prontuario_id: int
    tipo: Optional[str] = None
    observacoes: Optional[str] = None
    arquivo_path: Optional[str] = None
    resultado_texto: Optional[str] = None
    data_resultado: Optional[str] = None
    data_anexo: Optional[str] = None
    created_at: Optional[datetime] = None

    @model_validator(mode="after")
    def mirror_result_date(self):
        self.data_anexo = self.data_resultado
        return self


class ExamCreated(BaseModel):
    message: str
    id: int
    arquivo_path: Optional[str] = None
