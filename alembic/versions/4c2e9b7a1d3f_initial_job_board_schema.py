"""Initial job board schema

Revision ID: 4c2e9b7a1d3f
Revises:
Create Date: 2026-10-12 10:14:32.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '4c2e9b7a1d3f'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

JSON_LIST = sa.JSON().with_variant(postgresql.JSONB(), 'postgresql')

user_role = sa.Enum('JOB_SEEKER', 'JOB_PROVIDER', name='user_role_enum')
job_type = sa.Enum('FULL_TIME', 'PART_TIME', 'CONTRACT', 'INTERNSHIP', name='job_type_enum')
job_status = sa.Enum('ACTIVE', 'CLOSED', name='job_status_enum')
application_status = sa.Enum(
    'PENDING', 'REVIEWING', 'INTERVIEW', 'ACCEPTED', 'REJECTED', name='application_status_enum'
)


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False, unique=True),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('role', user_role, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        'job_seeker_profiles',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('title', sa.String(), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('skills', JSON_LIST, nullable=False),
        sa.Column('experience', sa.Text(), nullable=True),
        sa.Column('education', sa.Text(), nullable=True),
        sa.Column('resume', sa.String(), nullable=True),
        sa.Column('linkedin', sa.String(), nullable=True),
        sa.Column('github', sa.String(), nullable=True),
        sa.Column('website', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        'job_provider_profiles',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('company_name', sa.String(), nullable=True),
        sa.Column('company_description', sa.Text(), nullable=True),
        sa.Column('industry', sa.String(), nullable=True),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('website', sa.String(), nullable=True),
        sa.Column('linkedin', sa.String(), nullable=True),
        sa.Column('founded_year', sa.Integer(), nullable=True),
        sa.Column('company_size', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        'jobs',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('company', sa.String(), nullable=False),
        sa.Column('location', sa.String(), nullable=False),
        sa.Column('type', job_type, nullable=False),
        sa.Column('salary', sa.String(), nullable=True),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('requirements', JSON_LIST, nullable=False),
        sa.Column('responsibilities', JSON_LIST, nullable=False),
        sa.Column('experience', sa.String(), nullable=True),
        sa.Column('education', sa.String(), nullable=True),
        sa.Column('industry', sa.String(), nullable=True),
        sa.Column('skills', JSON_LIST, nullable=False),
        sa.Column('status', job_status, nullable=False),
        sa.Column('featured', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('idx_job_status', 'jobs', ['status'])
    op.create_index('idx_job_created_at', 'jobs', ['created_at'])
    op.create_index('idx_job_user_id', 'jobs', ['user_id'])

    op.create_table(
        'applications',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('job_id', sa.Uuid(), sa.ForeignKey('jobs.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('cover_letter', sa.Text(), nullable=True),
        sa.Column('status', application_status, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint('job_id', 'user_id', name='uq_application_job_user'),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('applications')
    op.drop_index('idx_job_user_id', table_name='jobs')
    op.drop_index('idx_job_created_at', table_name='jobs')
    op.drop_index('idx_job_status', table_name='jobs')
    op.drop_table('jobs')
    op.drop_table('job_provider_profiles')
    op.drop_table('job_seeker_profiles')
    op.drop_table('users')

    bind = op.get_bind()
    for enum_type in (application_status, job_status, job_type, user_role):
        enum_type.drop(bind, checkfirst=True)
