"""Create warehouses and products tables

Revision ID: 3f1c2a9b7d10
Revises: 
Create Date: 2026-10-19 10:12:44.318205

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# Revision identifiers used by Alembic
revision: str = '3f1c2a9b7d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'warehouses',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('address', sa.String(length=255), nullable=False),
        sa.Column('telephone', sa.String(length=64), nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=False),
        sa.CheckConstraint('capacity >= 0'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_index(op.f('ix_warehouses_id'), 'warehouses', ['id'], unique=False)

    # Products reference warehouses, so they are created second
    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('code_value', sa.String(length=255), nullable=False),
        sa.Column('is_published', sa.Boolean(), nullable=False),
        sa.Column('expiration', sa.Date(), nullable=True),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('warehouse_id', sa.Integer(), nullable=True),
        sa.CheckConstraint('quantity >= 0'),
        sa.CheckConstraint('price >= 0'),
        sa.ForeignKeyConstraint(['warehouse_id'], ['warehouses.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_products_id'), 'products', ['id'], unique=False)
    op.create_index(op.f('ix_products_code_value'), 'products', ['code_value'], unique=True)
    op.create_index(op.f('ix_products_warehouse_id'), 'products', ['warehouse_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_products_warehouse_id'), table_name='products')
    op.drop_index(op.f('ix_products_code_value'), table_name='products')
    op.drop_index(op.f('ix_products_id'), table_name='products')
    op.drop_table('products')
    op.drop_index(op.f('ix_warehouses_id'), table_name='warehouses')
    op.drop_table('warehouses')
