"""add display_name to user; is_image, image_path to question

Revision ID: b7e4f2a91c03
Revises: 3c1d9e7a2b10
Create Date: 2025-10-09 14:12:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'b7e4f2a91c03'
down_revision = '3c1d9e7a2b10'
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)

    user_cols = {c['name'] for c in insp.get_columns('user')}
    if 'display_name' not in user_cols:
        op.add_column('user', sa.Column('display_name', sa.String(length=64), nullable=True))

    question_cols = {c['name'] for c in insp.get_columns('question')}
    with op.batch_alter_table('question') as batch_op:
        if 'is_image' not in question_cols:
            batch_op.add_column(sa.Column('is_image', sa.Boolean(), nullable=False, server_default=sa.false()))
        if 'image_path' not in question_cols:
            batch_op.add_column(sa.Column('image_path', sa.String(length=256), nullable=True))


def downgrade():
    with op.batch_alter_table('question') as batch_op:
        batch_op.drop_column('image_path')
        batch_op.drop_column('is_image')
    op.drop_column('user', 'display_name')
