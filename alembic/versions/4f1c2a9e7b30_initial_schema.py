"""initial schema

Revision ID: 4f1c2a9e7b30
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '4f1c2a9e7b30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('full_name', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('vet_license_id', sa.String(length=100), nullable=True),
        sa.Column('is_vet_verified', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('reward_points', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.UniqueConstraint('email', name='ux_users_email'),
    )
    op.create_index('ix_users_email', 'users', ['email'])

    op.create_table(
        'farms',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('owner_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('farm_name', sa.String(length=255), nullable=False),
        sa.Column('address', sa.String(length=512), nullable=False),
        sa.Column('registration_number', sa.String(length=100), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_farms_owner_id', 'farms', ['owner_id'])

    op.create_table(
        'animals',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('farm_id', sa.Uuid(), sa.ForeignKey('farms.id'), nullable=False),
        sa.Column('species', sa.String(length=100), nullable=False),
        sa.Column('tag', sa.String(length=128), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('breed', sa.String(length=255), nullable=True),
        sa.Column('gender', sa.String(length=10), nullable=True),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='active'),
        sa.Column('withdrawal_until_milk', sa.DateTime(timezone=True), nullable=True),
        sa.Column('withdrawal_until_meat', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.UniqueConstraint('farm_id', 'tag', name='ux_animals_farm_tag'),
    )
    op.create_index('ix_animals_farm_id', 'animals', ['farm_id'])
    op.create_index(
        'idx_animals_withdrawal',
        'animals',
        ['status', 'withdrawal_until_meat'],
        postgresql_where=sa.text("status = 'withdrawal'"),
    )

    op.create_table(
        'medications',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('med_name', sa.String(length=255), nullable=False),
        sa.Column('active_ingredient', sa.String(length=255), nullable=False),
        sa.Column('withdrawal_period_milk_hours', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('withdrawal_period_meat_days', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('dosage_instructions', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('med_name', name='ux_medications_name'),
        sa.CheckConstraint('withdrawal_period_milk_hours >= 0', name='milk_hours_non_negative'),
        sa.CheckConstraint('withdrawal_period_meat_days >= 0', name='meat_days_non_negative'),
    )

    op.create_table(
        'treatments',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('animal_id', sa.Uuid(), sa.ForeignKey('animals.id'), nullable=False),
        sa.Column('vet_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('medication_id', sa.Uuid(), sa.ForeignKey('medications.id'), nullable=False),
        sa.Column('diagnosis', sa.Text(), nullable=False),
        sa.Column('dosage', sa.String(length=255), nullable=False),
        sa.Column('route_of_administration', sa.String(length=100), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('treatment_start_date', sa.Date(), nullable=True),
        sa.Column('treatment_end_date', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('idx_treatments_animal_created', 'treatments', ['animal_id', 'created_at'])

    op.create_table(
        'prescription_tasks',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('treatment_id', sa.Uuid(), sa.ForeignKey('treatments.id'), nullable=False),
        sa.Column('animal_id', sa.Uuid(), sa.ForeignKey('animals.id'), nullable=False),
        sa.Column('farmer_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('medication_name', sa.String(length=255), nullable=False),
        sa.Column('dosage', sa.String(length=255), nullable=False),
        sa.Column('scheduled_date', sa.Date(), nullable=False),
        sa.Column('scheduled_time', sa.Time(), nullable=False),
        sa.Column('is_completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('points_awarded', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_prescription_tasks_treatment_id', 'prescription_tasks', ['treatment_id'])
    op.create_index(
        'idx_prescription_tasks_farmer_date', 'prescription_tasks', ['farmer_id', 'scheduled_date']
    )
    op.create_index(
        'idx_prescription_tasks_pending',
        'prescription_tasks',
        ['scheduled_date'],
        postgresql_where=sa.text('is_completed = false'),
    )

    op.create_table(
        'compliance_alerts',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('farm_id', sa.Uuid(), sa.ForeignKey('farms.id'), nullable=False),
        sa.Column('animal_id', sa.Uuid(), sa.ForeignKey('animals.id'), nullable=True),
        sa.Column('task_id', sa.Uuid(), sa.ForeignKey('prescription_tasks.id'), nullable=True),
        sa.Column('alert_type', sa.String(length=50), nullable=False),
        sa.Column('severity', sa.String(length=10), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='active'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('resolved_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index(
        'idx_compliance_alerts_farm_status', 'compliance_alerts', ['farm_id', 'status', 'created_at']
    )
    op.create_index(
        'ux_compliance_alerts_active_task',
        'compliance_alerts',
        ['task_id'],
        unique=True,
        postgresql_where=sa.text("status = 'active' AND task_id IS NOT NULL"),
    )

    op.create_table(
        'consultation_requests',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('farmer_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('vet_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('animal_id', sa.Uuid(), sa.ForeignKey('animals.id'), nullable=True),
        sa.Column('consultation_type', sa.String(length=20), nullable=False, server_default='visit'),
        sa.Column('priority', sa.String(length=20), nullable=False, server_default='medium'),
        sa.Column('symptoms', sa.Text(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('scheduled_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='pending'),
        sa.Column('feedback', sa.Text(), nullable=True),
        sa.Column('rating', sa.Integer(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_consultation_requests_farmer_id', 'consultation_requests', ['farmer_id'])
    op.create_index('ix_consultation_requests_vet_id', 'consultation_requests', ['vet_id'])

    op.create_table(
        'problem_reports',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('farmer_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('animal_id', sa.Uuid(), sa.ForeignKey('animals.id'), nullable=True),
        sa.Column('problem_type', sa.String(length=100), nullable=False),
        sa.Column('symptoms', sa.Text(), nullable=False),
        sa.Column('severity', sa.String(length=10), nullable=False, server_default='medium'),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='pending'),
        sa.Column('vet_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('vet_response', sa.Text(), nullable=True),
        sa.Column('responded_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_problem_reports_farmer_id', 'problem_reports', ['farmer_id'])

    op.create_table(
        'testing_reports',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('animal_id', sa.Uuid(), sa.ForeignKey('animals.id'), nullable=False),
        sa.Column('vet_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('lab_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('test_type', sa.String(length=100), nullable=False),
        sa.Column('test_description', sa.Text(), nullable=True),
        sa.Column('sample_type', sa.String(length=100), nullable=False),
        sa.Column('priority', sa.String(length=20), nullable=False, server_default='routine'),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='pending'),
        sa.Column('results', sa.Text(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('requested_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('received_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_testing_reports_animal_id', 'testing_reports', ['animal_id'])


def downgrade() -> None:
    op.drop_table('testing_reports')
    op.drop_table('problem_reports')
    op.drop_table('consultation_requests')
    op.drop_index('ux_compliance_alerts_active_task', table_name='compliance_alerts')
    op.drop_index('idx_compliance_alerts_farm_status', table_name='compliance_alerts')
    op.drop_table('compliance_alerts')
    op.drop_table('prescription_tasks')
    op.drop_table('treatments')
    op.drop_table('medications')
    op.drop_table('animals')
    op.drop_table('farms')
    op.drop_table('users')
