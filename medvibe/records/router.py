"""
Record Router - CRUD endpoints for prontuários.
"""
from typing import List, Optional
from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from ..config import settings
from ..database import get_db
from .schemas import MessageResponse, RecordCreated, RecordPayload, RecordResponse
from .service import create_record, delete_record, list_records, update_record

router = APIRouter(tags=["Prontuários"])


@router.post("/prontuario", status_code=status.HTTP_201_CREATED, response_model=RecordCreated)
async def create_record_route(
    payload: Optional[RecordPayload] = Body(None),
    db: Session = Depends(get_db)
):
    """
    Create a prontuário.

    Requires nome, cpf, data_consulta and diagnostico; anything but a list
    in exames_solicitados is stored as an empty list.
    """
    record = create_record(db, payload)
    return {"message": "Prontuário salvo!", "id": record.id}


@router.get("/prontuarios", response_model=List[RecordResponse])
async def list_records_route(db: Session = Depends(get_db)):
    """List every prontuário, newest first."""
    return list_records(db)


@router.put("/prontuario/{record_id}", response_model=MessageResponse)
async def update_record_route(
    record_id: int,
    payload: Optional[RecordPayload] = Body(None),
    db: Session = Depends(get_db)
):
    update_record(db, record_id, payload)
    return {"message": "Prontuário atualizado!"}


@router.delete("/prontuario/{record_id}", response_model=MessageResponse)
async def delete_record_route(record_id: int, db: Session = Depends(get_db)):
    """Delete a prontuário and, through the cascade, its exams and their files."""
    delete_record(db, record_id, upload_dir=settings.upload_dir)
    return {"message": "Prontuário excluído!"}
