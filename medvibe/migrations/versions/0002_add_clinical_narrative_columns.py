"""add symptoms, anamnesis and requested exams to prontuarios

Revision ID: 0002
Revises: 0001
Create Date: 2025-10-08 14:30:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0002'
down_revision: Union[str, None] = '0001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column('prontuarios', sa.Column('sintomas', sa.Text(), nullable=True))
    op.add_column('prontuarios', sa.Column('anamnese', sa.Text(), nullable=True))
    # JSON array of exam names serialized as text
    op.add_column('prontuarios', sa.Column('exames_solicitados', sa.Text(), nullable=False, server_default='[]'))


def downgrade() -> None:
    """Downgrade schema."""
    with op.batch_alter_table('prontuarios') as batch_op:
        batch_op.drop_column('exames_solicitados')
        batch_op.drop_column('anamnese')
        batch_op.drop_column('sintomas')
