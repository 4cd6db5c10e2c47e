"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data

This creates:
- 1 superuser (admin)
- A couple (ana + luis) joined through an invitation
- 1 single account (carmen) with personal categories
- Savings goals with contributions
- Calendar events for the current month
"""

from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.accounts.services import provision_account
from apps.couples.models import CoupleProfile
from apps.couples.services import accept_invitation, create_invitation
from apps.events.models import EventKind
from apps.events.services import create_event
from apps.goals.models import GoalPriority
from apps.goals.services import add_contribution, create_goal

SAMPLE_EMAILS = ['ana@example.com', 'luis@example.com', 'carmen@example.com']


class Command(BaseCommand):
    help = 'Create sample data for trying out the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing sample data before creating it again',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        if User.objects.filter(email__in=SAMPLE_EMAILS).exists():
            self.stdout.write(self.style.WARNING(
                'Sample accounts already exist, use --clear to recreate them.'
            ))
            return

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        self.create_couple(users)
        self.create_goals(users)
        self.create_events(users)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin1234 (superuser)')
        self.stdout.write('  ana@example.com / password123')
        self.stdout.write('  luis@example.com / password123')
        self.stdout.write('  carmen@example.com / password123')

    def clear_data(self):
        """Remove sample accounts and the couples they belong to."""
        sample_users = User.objects.filter(email__in=SAMPLE_EMAILS)
        CoupleProfile.objects.filter(members__in=sample_users).delete()
        sample_users.delete()

    def create_users(self):
        self.stdout.write('  Creating users...')

        if not User.objects.filter(email='admin@example.com').exists():
            User.objects.create_superuser(
                email='admin@example.com',
                password='admin1234',
                name='Admin',
            )

        ana = provision_account(
            email='ana@example.com',
            password='password123',
            name='Ana García',
        ).user
        luis = provision_account(
            email='luis@example.com',
            password='password123',
            name='Luis Martín',
        ).user
        carmen = provision_account(
            email='carmen@example.com',
            password='password123',
            name='Carmen López',
            couple_name='Casa de Carmen',
        ).user

        return {'ana': ana, 'luis': luis, 'carmen': carmen}

    def create_couple(self, users):
        """Pair ana and luis through the regular invitation flow."""
        self.stdout.write('  Creating couple...')

        invitation = create_invitation(
            inviter=users['ana'],
            partner_email=users['luis'].email,
            message='¡Gestionemos juntos nuestras finanzas!',
        )
        accept_invitation(token=invitation.token, user=users['luis'])

        for user in users.values():
            user.refresh_from_db()

    def create_goals(self, users):
        self.stdout.write('  Creating savings goals...')
        today = timezone.localdate()

        holiday = create_goal(
            user=users['ana'],
            name='Vacaciones en Italia',
            target_amount=Decimal('2500.00'),
            target_date=today + timedelta(days=180),
            priority=GoalPriority.HIGH,
            icon='plane',
            color='#3B82F6',
        )
        add_contribution(goal_id=holiday.id, user=users['ana'], amount=Decimal('400.00'))
        add_contribution(goal_id=holiday.id, user=users['luis'], amount=Decimal('350.00'))

        create_goal(
            user=users['luis'],
            name='Fondo de emergencia',
            target_amount=Decimal('6000.00'),
            priority=GoalPriority.MEDIUM,
        )

        create_goal(
            user=users['carmen'],
            name='Ordenador nuevo',
            target_amount=Decimal('1200.00'),
            target_date=today + timedelta(days=90),
            priority=GoalPriority.LOW,
        )

    def create_events(self, users):
        self.stdout.write('  Creating calendar events...')
        start = timezone.localdate().replace(day=1)

        entries = [
            (users['ana'], 'Nómina Ana', EventKind.INCOME, Decimal('2100.00'), 0),
            (users['luis'], 'Nómina Luis', EventKind.INCOME, Decimal('1950.00'), 0),
            (users['ana'], 'Alquiler', EventKind.EXPENSE, Decimal('950.00'), 2),
            (users['luis'], 'Supermercado', EventKind.EXPENSE, Decimal('180.50'), 6),
            (users['ana'], 'Revisar seguro del coche', EventKind.REMINDER, None, 14),
            (users['carmen'], 'Nómina', EventKind.INCOME, Decimal('1700.00'), 0),
            (users['carmen'], 'Gimnasio', EventKind.EXPENSE, Decimal('39.90'), 4),
        ]

        for owner, title, kind, amount, offset in entries:
            create_event(
                user=owner,
                title=title,
                kind=kind,
                amount=amount,
                date=start + timedelta(days=offset),
            )
