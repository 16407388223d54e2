"""
Record Model - Stores patient visit records ("prontuários").

Exam rows reference this table with ON DELETE CASCADE, so deleting a record
removes its exams at the storage level.
"""
from sqlalchemy import Column, Integer, Text
from ..database import Base


class Record(Base):
    """
    Record Model - Stores a patient visit

    Fields:
    - id: Primary key, assigned in insertion order
    - nome: Patient full name
    - cpf: Personal identifier (free text)
    - data_consulta: Visit date as an ISO date string
    - diagnostico: Free-text diagnosis
    - sintomas: Free-text symptoms
    - anamnese: Free-text anamnesis
    - exames_solicitados: Requested exam names serialized as a JSON array
    """
    __tablename__ = "prontuarios"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(Text, nullable=False)
    cpf = Column(Text, nullable=False)
    data_consulta = Column(Text, nullable=False)
    diagnostico = Column(Text, nullable=False)
    sintomas = Column(Text, nullable=True)
    anamnese = Column(Text, nullable=True)
    exames_solicitados = Column(Text, nullable=False, default="[]", server_default="[]")

    def __repr__(self):
        """String representation of the Record model"""
        return f"<Record(id={self.id}, nome={self.nome!r}, data_consulta={self.data_consulta})>"
