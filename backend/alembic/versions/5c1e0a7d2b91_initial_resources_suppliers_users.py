"""initial: suppliers, resources, users

Revision ID: 5c1e0a7d2b91
Revises:
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '5c1e0a7d2b91'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'suppliers',
        sa.Column('supid', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(200)),
        sa.Column('phone', sa.String(50)),
        sa.Column('email', sa.String(200)),
    )
    op.create_table(
        'resources',
        sa.Column('resid', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(200)),
        sa.Column('type', sa.String(100)),
        sa.Column('quantity', sa.Integer(), nullable=False, server_default=sa.text('0')),
        sa.Column('cost', sa.Integer(), nullable=False, server_default=sa.text('0')),
        sa.Column('acdate', sa.String(20)),
        sa.Column('supplier', sa.Integer(), sa.ForeignKey('suppliers.supid', ondelete='CASCADE')),
    )
    op.create_index('ix_resources_supplier', 'resources', ['supplier'])
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(50), nullable=False, unique=True),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('roles', sa.String(200), nullable=False, server_default=sa.text("''")),
    )

def downgrade():
    op.drop_table('users')
    op.drop_index('ix_resources_supplier', table_name='resources')
    op.drop_table('resources')
    op.drop_table('suppliers')
