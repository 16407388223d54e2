"""
Exam Router - Endpoints for exam upload, textual results and listing.
"""
from typing import List, Optional
from fastapi import APIRouter, Body, Depends, File, Form, Query, UploadFile, status
from sqlalchemy.orm import Session

from ..config import settings
from ..database import get_db
from ..exceptions import MissingFieldsException
from .schemas import ExamCreated, ExamResponse, TextExamPayload
from .service import create_file_exam, create_text_exam, list_exams

router = APIRouter(prefix="/exames", tags=["Exames"])


@router.post("/upload", status_code=status.HTTP_201_CREATED, response_model=ExamCreated)
async def upload_exam_route(
    prontuario_id: Optional[int] = Form(None),
    arquivo: Optional[UploadFile] = File(None),
    tipo: Optional[str] = Form(None),
    observacoes: Optional[str] = Form(None),
    data_resultado: Optional[str] = Form(None),
    data_anexo: Optional[str] = Form(None),
    db: Session = Depends(get_db)
):
    """
    Attach an exam file to a prontuário.

    The file is stored in the upload directory under a generated name and
    the exam row keeps only its relative path.
    """
    exam = create_file_exam(
        db,
        prontuario_id=prontuario_id,
        arquivo=arquivo,
        upload_dir=settings.upload_dir,
        tipo=tipo,
        observacoes=observacoes,
        data_resultado=data_resultado,
        data_anexo=data_anexo,
    )
    return {"message": "Exame anexado!", "id": exam.id, "arquivo_path": exam.arquivo_path}


@router.post("/texto", status_code=status.HTTP_201_CREATED, response_model=ExamCreated)
async def text_exam_route(
    payload: Optional[TextExamPayload] = Body(None),
    db: Session = Depends(get_db)
):
    """Record a textual exam result for a prontuário."""
    exam = create_text_exam(db, payload)
    return {"message": "Exame salvo!", "id": exam.id}


@router.get("", response_model=List[ExamResponse])
async def list_exams_route(
    prontuario_id: Optional[int] = Query(None),
    db: Session = Depends(get_db)
):
    """List the exams of a prontuário, most recent first."""
    if prontuario_id is None:
        raise MissingFieldsException("Informe o prontuario_id.")
    return list_exams(db, prontuario_id)
