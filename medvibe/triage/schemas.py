"""
Triage Schemas - Request body of POST /ai-diagnostico.
"""
from typing import Optional
from pydantic import BaseModel


class TriageRequest(BaseModel):
    """
    Triage Request Schema

    Fields:
    - sintomas: Patient symptoms
    - anamnese: Patient anamnesis
    - prontuario_id: Record whose exams are summarized into the prompt
    - exames_resumo: Precomputed exam summary, takes precedence over prontuario_id
    """
    sintomas: Optional[str] = None
    anamnese: Optional[str] = None
    prontuario_id: Optional[int] = None
    exames_resumo: Optional[str] = None
