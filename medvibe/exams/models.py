"""
Exam Model - Stores exam results and attachments of a prontuário.

Rows are written once and never updated; they disappear only through the
ON DELETE CASCADE of their prontuário.
"""
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, func
from ..database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class Exam(Base):
    """
    Exam Model - Stores a lab/imaging result or attachment

    Fields:
    - id: Primary key for the exam
    - prontuario_id: Foreign key to Record, cascades on delete
    - tipo: Exam type label
    - observacoes: Free-text observations
    - arquivo_path: Relative reference of the stored file, if any
    - resultado_texto: Textual result, if any
    - data_resultado: Result/attachment date as sent by the client
    - created_at: When the exam was inserted
    """
    __tablename__ = "exames"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    prontuario_id = Column(Integer, ForeignKey("prontuarios.id", ondelete="CASCADE"), nullable=False, index=True)
    tipo = Column(Text, nullable=True)
    observacoes = Column(Text, nullable=True)
    arquivo_path = Column(Text, nullable=True)
    resultado_texto = Column(Text, nullable=True)
    data_resultado = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, server_default=func.current_timestamp())

    def __repr__(self):
        """String representation of the Exam model"""
        return f"<Exam(id={self.id}, prontuario_id={self.prontuario_id}, tipo={self.tipo!r})>"
