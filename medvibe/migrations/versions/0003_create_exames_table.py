"""create exames table

Revision ID: 0003
Revises: 0002
Create Date: 2025-10-15 10:12:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0003'
down_revision: Union[str, None] = '0002'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('exames',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('prontuario_id', sa.Integer(), nullable=False),
        sa.Column('tipo', sa.Text(), nullable=True),
        sa.Column('observacoes', sa.Text(), nullable=True),
        sa.Column('arquivo_path', sa.Text(), nullable=True),
        sa.Column('resultado_texto', sa.Text(), nullable=True),
        sa.Column('data_resultado', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.current_timestamp(), nullable=True),
        sa.ForeignKeyConstraint(['prontuario_id'], ['prontuarios.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_exames_prontuario_id', 'exames', ['prontuario_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_exames_prontuario_id', table_name='exames')
    op.drop_table('exames')
