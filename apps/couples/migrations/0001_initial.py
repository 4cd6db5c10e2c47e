# Generated manually for the couples app

import uuid
from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='CoupleProfile',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=150)),
                ('currency', models.CharField(default='EUR', max_length=3)),
                ('timezone', models.CharField(default='Europe/Madrid', max_length=64)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'couple_profiles',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='SharedSettings',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('split_method', models.CharField(choices=[('equal', 'Equal'), ('proportional', 'Proportional to income'), ('custom', 'Custom')], default='equal', max_length=20)),
                ('default_currency', models.CharField(default='EUR', max_length=3)),
                ('budget_cycle', models.CharField(choices=[('weekly', 'Weekly'), ('monthly', 'Monthly'), ('quarterly', 'Quarterly'), ('yearly', 'Yearly')], default='monthly', max_length=20)),
                ('budget_start_day', models.PositiveSmallIntegerField(default=1, validators=[MinValueValidator(1), MaxValueValidator(31)])),
                ('shared_goal_notifications', models.BooleanField(default=True)),
                ('large_expense_threshold', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('couple', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='shared_settings', to='couples.coupleprofile')),
            ],
            options={
                'db_table': 'shared_settings',
                'verbose_name_plural': 'shared settings',
            },
        ),
        migrations.CreateModel(
            name='CoupleInvitation',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('partner_email', models.EmailField(max_length=254)),
                ('message', models.TextField(blank=True, max_length=500)),
                ('token', models.CharField(db_index=True, editable=False, max_length=64, unique=True)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('accepted', 'Accepted'), ('revoked', 'Revoked')], default='pending', max_length=20)),
                ('expires_at', models.DateTimeField()),
                ('accepted_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('accepted_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='accepted_invitations', to=settings.AUTH_USER_MODEL)),
                ('couple', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='invitations', to='couples.coupleprofile')),
                ('invited_by', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='sent_invitations', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'couple_invitations',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['couple', 'status', 'expires_at'], name='invitation_lookup_idx')],
            },
        ),
    ]
