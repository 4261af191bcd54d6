"""Initial schema - All tables

Revision ID: 001_initial
Revises:
Create Date: 2025-01-01 00:00:00.000000

Creates the issue tracker tables and seeds the priority and status tiers
the rankings depend on. Based on the SQLAlchemy models in database/models/.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _label_columns():
    return [
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('label', sa.String(100), nullable=False),
        sa.Column('thai_label', sa.String(100), nullable=True),
    ]


def upgrade() -> None:
    # ==================================================
    # LOOKUPS
    # ==================================================

    op.create_table(
        'departments',
        sa.Column('id', sa.Integer, primary_key=True),
        *_label_columns(),
    )

    priorities = op.create_table(
        'priorities',
        sa.Column('id', sa.Integer, primary_key=True),
        *_label_columns(),
    )

    statuses = op.create_table(
        'statuses',
        sa.Column('id', sa.Integer, primary_key=True),
        *_label_columns(),
    )

    op.create_table(
        'categories',
        sa.Column('id', sa.Integer, primary_key=True),
        *_label_columns(),
    )

    # ==================================================
    # EMPLOYEES
    # ==================================================

    op.create_table(
        'employees',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('employee_id', sa.String(50), nullable=False, unique=True),
        sa.Column('korean_name', sa.String(100), nullable=False),
        sa.Column('thai_name', sa.String(100), nullable=True),
        sa.Column('nickname', sa.String(100), nullable=True),
        sa.Column('department_id', sa.Integer,
                  sa.ForeignKey('departments.id', ondelete='SET NULL'), nullable=True),
        sa.Column('created_at', sa.DateTime, nullable=True),
        sa.Column('updated_at', sa.DateTime, nullable=True),
    )
    op.create_index('idx_employees_department', 'employees', ['department_id'])

    # ==================================================
    # ISSUES
    # ==================================================

    op.create_table(
        'issues',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('priority_id', sa.Integer, sa.ForeignKey('priorities.id'), nullable=True),
        sa.Column('status_id', sa.Integer, sa.ForeignKey('statuses.id'), nullable=True),
        sa.Column('category_id', sa.Integer, sa.ForeignKey('categories.id'), nullable=True),
        sa.Column('department_id', sa.Integer, sa.ForeignKey('departments.id'), nullable=True),
        sa.Column('assignee_id', sa.Integer,
                  sa.ForeignKey('employees.id', ondelete='SET NULL'), nullable=True),
        sa.Column('solver_id', sa.Integer,
                  sa.ForeignKey('employees.id', ondelete='SET NULL'), nullable=True),
        sa.Column('due_date', sa.Date, nullable=True),
        sa.Column('created_at', sa.DateTime, nullable=True),
        sa.Column('updated_at', sa.DateTime, nullable=True),
    )
    op.create_index('idx_issues_status', 'issues', ['status_id'])
    op.create_index('idx_issues_solver', 'issues', ['solver_id', 'status_id'])
    op.create_index('idx_issues_assignee', 'issues', ['assignee_id'])
    op.create_index('idx_issues_created', 'issues', ['created_at'])
    op.create_index('idx_issues_updated', 'issues', ['updated_at'])

    op.create_table(
        'issue_comments',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('issue_id', sa.Integer,
                  sa.ForeignKey('issues.id', ondelete='CASCADE'), nullable=False),
        sa.Column('author_id', sa.Integer,
                  sa.ForeignKey('employees.id', ondelete='CASCADE'), nullable=False),
        sa.Column('content', sa.Text, nullable=False),
        sa.Column('created_at', sa.DateTime, nullable=False),
    )
    op.create_index('idx_comments_author', 'issue_comments', ['author_id', 'created_at'])
    op.create_index('idx_comments_issue', 'issue_comments', ['issue_id'])

    # ==================================================
    # SEED TIERS
    # ==================================================

    op.bulk_insert(priorities, [
        {'id': 1, 'name': 'Critical', 'label': '긴급', 'thai_label': 'วิกฤต'},
        {'id': 2, 'name': 'High', 'label': '높음', 'thai_label': 'สูง'},
        {'id': 3, 'name': 'Medium', 'label': '보통', 'thai_label': 'ปานกลาง'},
        {'id': 4, 'name': 'Low', 'label': '낮음', 'thai_label': 'ต่ำ'},
    ])

    op.bulk_insert(statuses, [
        {'id': 1, 'name': 'Open', 'label': '미해결', 'thai_label': 'เปิด'},
        {'id': 2, 'name': 'In progress', 'label': '진행중', 'thai_label': 'กำลังดำเนินการ'},
        {'id': 3, 'name': 'Resolved', 'label': '완료', 'thai_label': 'แก้ไขแล้ว'},
        {'id': 4, 'name': 'Verified', 'label': '확인', 'thai_label': 'ตรวจสอบแล้ว'},
        {'id': 5, 'name': 'Closed', 'label': '종료', 'thai_label': 'ปิด'},
    ])


def downgrade() -> None:
    op.drop_table('issue_comments')
    op.drop_table('issues')
    op.drop_table('employees')
    op.drop_table('categories')
    op.drop_table('statuses')
    op.drop_table('priorities')
    op.drop_table('departments')
