"""
Triage Router - AI-assisted triage suggestions.
"""
import logging
from typing import Optional

import httpx
from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..database import get_db
from ..exams.summary import summarize_exams
from ..exceptions import MissingFieldsException, UpstreamException
from .client import InferenceClient
from .dependencies import get_inference_client
from .interpreter import interpret_response
from .prompts import build_triage_prompt
from .schemas import TriageRequest

# Set up logging
logger = logging.getLogger(__name__)

router = APIRouter(tags=["Triagem"])


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


@router.post("/ai-diagnostico")
async def triage_route(
    payload: Optional[TriageRequest] = Body(None),
    db: Session = Depends(get_db),
    client: InferenceClient = Depends(get_inference_client)
):
    """
    Ask the model for triage hypotheses.

    Requires sintomas or anamnese. Exams come from exames_resumo when given,
    otherwise from the exams of prontuario_id. Oracle failures are answered
    with 502 and the diagnostic detail.
    """
    payload = payload or TriageRequest()
    if _blank(payload.sintomas) and _blank(payload.anamnese):
        raise MissingFieldsException("Informe os sintomas ou a anamnese para análise.")

    exames_resumo = payload.exames_resumo
    if _blank(exames_resumo) and payload.prontuario_id is not None:
        exames_resumo = summarize_exams(db, payload.prontuario_id)

    prompt = build_triage_prompt(payload.sintomas, payload.anamnese, exames_resumo)

    try:
        raw = await client.generate(prompt)
    except UpstreamException as e:
        detail = f"HTTP {e.status_code}: {e.body}"
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"❌ Inference service unreachable or invalid answer: {str(e)}")
        detail = str(e) or e.__class__.__name__
    else:
        return {
            "sugestao": interpret_response(raw),
            "model": client.model,
            "host": client.host,
        }

    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={
            "error": "Falha ao consultar o modelo de IA.",
            "detail": detail,
            "model": client.model,
            "host": client.host,
        }
    )
