"""create users, forms and replies tables

Revision ID: 3f2a9c1d7e01
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f2a9c1d7e01'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False, comment='用户ID'),
        sa.Column('face_user_id', sa.String(length=128), nullable=False, comment='百度人脸库用户ID'),
        sa.Column('user_group', sa.String(length=64), nullable=False, comment='用户组（administrator/user）'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_users_face_user_id', 'users', ['face_user_id'], unique=True)

    op.create_table(
        'forms',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False, comment='表单ID'),
        sa.Column('form_no', sa.String(length=32), nullable=False, comment='表单编号（FORM-YYYYMMDD-NNN）'),
        sa.Column('user_id', sa.Integer(), nullable=False, comment='提交用户ID'),
        sa.Column('title', sa.String(length=255), nullable=False, comment='标题'),
        sa.Column('content', sa.Text(), nullable=False, comment='内容'),
        sa.Column('category', sa.String(length=64), nullable=True, comment='分类'),
        sa.Column('ip_address', sa.String(length=64), nullable=True, comment='提交IP'),
        sa.Column('browser_info', sa.String(length=512), nullable=True, comment='浏览器信息'),
        sa.Column('status', sa.String(length=16), server_default='open', nullable=False, comment='表单状态（open/replied）'),
        sa.Column('create_time', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False, comment='创建时间'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('form_no')
    )
    op.create_index('ix_forms_user_id', 'forms', ['user_id'])
    op.create_index('ix_forms_create_time', 'forms', ['create_time'])

    # 不建外键：删除表单时保留历史回复
    op.create_table(
        'replies',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False, comment='回复ID'),
        sa.Column('form_id', sa.Integer(), nullable=False, comment='表单ID'),
        sa.Column('admin_id', sa.Integer(), nullable=False, comment='回复管理员ID'),
        sa.Column('content', sa.Text(), nullable=False, comment='回复内容'),
        sa.Column('create_time', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False, comment='回复时间'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_replies_form_id', 'replies', ['form_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_replies_form_id', table_name='replies')
    op.drop_table('replies')
    op.drop_index('ix_forms_create_time', table_name='forms')
    op.drop_index('ix_forms_user_id', table_name='forms')
    op.drop_table('forms')
    op.drop_index('ix_users_face_user_id', table_name='users')
    op.drop_table('users')
