"""
Exam Service - Business logic for exam ingest and listing.

Two ingest paths exist: a file upload, stored on disk and referenced by
path, and a plain textual result. Both require an existing prontuário.
"""
import logging
from typing import List, Optional

from fastapi import UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.uploads import remove_upload, save_upload
from ..exceptions import MissingFieldsException, StorageException
from ..records.service import get_record
from .models import Exam
from .schemas import TextExamPayload

# Set up logging
logger = logging.getLogger(__name__)


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def pick_result_date(*candidates: Optional[str]) -> Optional[str]:
    """Return the first non-empty date among the alternate field names."""
    for candidate in candidates:
        value = _clean(candidate)
        if value:
            return value
    return None


def _insert(db: Session, exam: Exam) -> Exam:
    try:
        db.add(exam)
        db.commit()
        db.refresh(exam)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Failed to store exam for prontuário {exam.prontuario_id}: {str(e)}")
        raise StorageException(str(e))
    logger.info(f"Exam {exam.id} stored for prontuário {exam.prontuario_id}")
    return exam


def create_file_exam(
    db: Session,
    prontuario_id: Optional[int],
    arquivo: Optional[UploadFile],
    upload_dir: str,
    tipo: Optional[str] = None,
    observacoes: Optional[str] = None,
    data_resultado: Optional[str] = None,
    data_anexo: Optional[str] = None,
) -> Exam:
    """
    Store an uploaded exam file and insert its row.

    Args:
        db: Database session
        prontuario_id: Owning prontuário
        arquivo: Uploaded file
        upload_dir: Directory the file is written to

    Returns:
        Exam: The stored exam

    Raises:
        MissingFieldsException: If the prontuário id or the file is missing
        RecordNotFoundException: If the prontuário does not exist
        StorageException: If writing the file or the row fails
    """
    if prontuario_id is None:
        raise MissingFieldsException("Informe o prontuario_id.")
    if arquivo is None or not arquivo.filename:
        raise MissingFieldsException("Nenhum arquivo enviado.")
    get_record(db, prontuario_id)

    try:
        reference = save_upload(arquivo.file, arquivo.filename, upload_dir)
    except OSError as e:
        logger.error(f"❌ Failed to write upload {arquivo.filename!r}: {str(e)}")
        raise StorageException(str(e))

    exam = Exam(
        prontuario_id=prontuario_id,
        tipo=_clean(tipo),
        observacoes=_clean(observacoes),
        arquivo_path=reference,
        data_resultado=pick_result_date(data_resultado, data_anexo),
    )
    try:
        return _insert(db, exam)
    except StorageException:
        remove_upload(reference, upload_dir)
        raise


def create_text_exam(db: Session, payload: Optional[TextExamPayload]) -> Exam:
    """
    Insert an exam carrying a textual result.

    Raises:
        MissingFieldsException: If the prontuário id or the text is missing
        RecordNotFoundException: If the prontuário does not exist
        StorageException: If the insert fails
    """
    if payload is None or payload.prontuario_id is None:
        raise MissingFieldsException("Informe o prontuario_id.")
    resultado = _clean(payload.resultado_texto)
    if not resultado:
        raise MissingFieldsException("Informe o resultado do exame.")
    get_record(db, payload.prontuario_id)

    exam = Exam(
        prontuario_id=payload.prontuario_id,
        tipo=_clean(payload.tipo),
        observacoes=_clean(payload.observacoes),
        resultado_texto=resultado,
        data_resultado=pick_result_date(payload.data_resultado, payload.data_anexo),
    )
    return _insert(db, exam)


def list_exams(db: Session, prontuario_id: int) -> List[Exam]:
    """Return the exams of a prontuário, most recently created first."""
    try:
        return (
            db.query(Exam)
            .filter(Exam.prontuario_id == prontuario_id)
            .order_by(Exam.created_at.desc(), Exam.id.desc())
            .all()
        )
    except SQLAlchemyError as e:
        logger.error(f"❌ Failed to list exams of prontuário {prontuario_id}: {str(e)}")
        raise StorageException(str(e))
