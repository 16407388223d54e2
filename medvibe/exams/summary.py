"""
Renders the exams of a prontuário as plain text for the triage prompt.
"""
from typing import Iterable

from sqlalchemy.orm import Session

from .models import Exam
from .service import list_exams

FIELD_SEPARATOR = " | "
FILE_ONLY_NOTE = "(sem resultado textual: interpretar o arquivo anexado)"


def render_exam_line(exam: Exam) -> str:
    """
    One line per exam: Tipo, Data, Resultado, Obs, Arquivo in that order,
    absent attributes omitted.
    """
    parts = []
    if exam.tipo:
        parts.append(f"Tipo: {exam.tipo}")
    if exam.data_resultado:
        parts.append(f"Data: {exam.data_resultado}")
    if exam.resultado_texto:
        parts.append(f"Resultado: {exam.resultado_texto}")
    if exam.observacoes:
        parts.append(f"Obs: {exam.observacoes}")
    if exam.arquivo_path:
        parts.append(f"Arquivo: {exam.arquivo_path}")
        if not exam.resultado_texto:
            parts.append(FILE_ONLY_NOTE)
    return FIELD_SEPARATOR.join(parts)


def render_exams(exams: Iterable[Exam]) -> str:
    lines = (render_exam_line(exam) for exam in exams)
    return "\n".join(line for line in lines if line)


def summarize_exams(db: Session, prontuario_id: int) -> str:
    """Summary of every exam of a prontuário, newest first; empty string when there are none."""
    return render_exams(list_exams(db, prontuario_id))
