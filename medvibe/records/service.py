"""
Record Service - Business logic for prontuário CRUD.

Each operation issues a single statement and commits it; storage errors are
rolled back and surfaced as StorageException with the driver message.
"""
import json
import logging
from typing import Any, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.uploads import remove_upload
from ..exams.models import Exam
from ..exceptions import MissingFieldsException, RecordNotFoundException, StorageException
from .models import Record
from .schemas import RecordPayload

# Set up logging
logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("nome", "cpf", "data_consulta", "diagnostico")


def normalize_requested_exams(value: Any) -> List[str]:
    """
    Normalize the requested-exams input.

    A list of strings is kept exactly as supplied; anything else (non-list
    values, lists holding non-string items) becomes an empty list.

    Args:
        value: Raw value from the request body

    Returns:
        List[str]: The exam names as sent, or an empty list
    """
    if not isinstance(value, list):
        return []
    if not all(isinstance(item, str) for item in value):
        return []
    return list(value)


def _validate(payload: Optional[RecordPayload]) -> RecordPayload:
    if payload is None:
        raise MissingFieldsException()
    for field in REQUIRED_FIELDS:
        value = getattr(payload, field)
        if value is None or not value.strip():
            raise MissingFieldsException()
    return payload


def _apply(record: Record, payload: RecordPayload) -> None:
    record.nome = payload.nome
    record.cpf = payload.cpf
    record.data_consulta = payload.data_consulta
    record.diagnostico = payload.diagnostico
    record.sintomas = payload.sintomas or ""
    record.anamnese = payload.anamnese or ""
    record.exames_solicitados = json.dumps(
        normalize_requested_exams(payload.exames_solicitados), ensure_ascii=False
    )


def get_record(db: Session, record_id: int) -> Record:
    """
    Get a prontuário by id.

    Raises:
        RecordNotFoundException: If no record has this id
    """
    record = db.query(Record).filter(Record.id == record_id).first()
    if not record:
        raise RecordNotFoundException()
    return record


def create_record(db: Session, payload: Optional[RecordPayload]) -> Record:
    """
    Insert a new prontuário.

    Args:
        db: Database session
        payload: Request body

    Returns:
        Record: The stored record with its assigned id

    Raises:
        MissingFieldsException: If a required field is absent
        StorageException: If the insert fails
    """
    payload = _validate(payload)
    record = Record()
    _apply(record, payload)
    try:
        db.add(record)
        db.commit()
        db.refresh(record)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Failed to create prontuário: {str(e)}")
        raise StorageException(str(e))
    logger.info(f"Prontuário {record.id} created")
    return record


def list_records(db: Session) -> List[Record]:
    """Return every prontuário, newest first."""
    try:
        return db.query(Record).order_by(Record.id.desc()).all()
    except SQLAlchemyError as e:
        logger.error(f"❌ Failed to list prontuários: {str(e)}")
        raise StorageException(str(e))


def update_record(db: Session, record_id: int, payload: Optional[RecordPayload]) -> Record:
    """
    Replace every field of an existing prontuário.

    Raises:
        MissingFieldsException: If a required field is absent
        RecordNotFoundException: If no record has this id
        StorageException: If the update fails
    """
    payload = _validate(payload)
    record = get_record(db, record_id)
    _apply(record, payload)
    try:
        db.commit()
        db.refresh(record)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Failed to update prontuário {record_id}: {str(e)}")
        raise StorageException(str(e))
    logger.info(f"Prontuário {record_id} updated")
    return record


def delete_record(db: Session, record_id: int, upload_dir: Optional[str] = None) -> None:
    """
    Delete a prontuário; its exams go with it through the foreign key cascade.

    Files attached to those exams are removed from ``upload_dir`` once the
    delete is committed.

    Args:
        db: Database session
        record_id: Prontuário to delete
        upload_dir: Directory holding the exam attachments

    Raises:
        RecordNotFoundException: If no record has this id
        StorageException: If the delete fails
    """
    try:
        references = [
            path for (path,) in db.query(Exam.arquivo_path).filter(
                Exam.prontuario_id == record_id,
                Exam.arquivo_path.isnot(None),
            )
        ]
        deleted = db.query(Record).filter(Record.id == record_id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Failed to delete prontuário {record_id}: {str(e)}")
        raise StorageException(str(e))
    if not deleted:
        raise RecordNotFoundException()
    logger.info(f"Prontuário {record_id} deleted with {len(references)} attached file(s)")

    if upload_dir is None:
        return
    for reference in references:
        try:
            remove_upload(reference, upload_dir)
        except OSError as e:
            # The rows are gone already; a leftover file does not undo the delete
            logger.warning(f"Could not remove attachment {reference} of prontuário {record_id}: {str(e)}")
