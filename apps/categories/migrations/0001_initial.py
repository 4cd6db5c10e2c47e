# Generated manually for the categories app

import uuid
import apps.categories.models
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('couples', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Category',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('scope', models.CharField(choices=[('personal', 'Personal'), ('shared', 'Shared')], default='personal', max_length=10)),
                ('name', models.CharField(max_length=100)),
                ('icon', models.CharField(max_length=50)),
                ('color', models.CharField(max_length=7, validators=[apps.categories.models.hex_color_validator])),
                ('kind', models.CharField(choices=[('income', 'Income'), ('expense', 'Expense')], max_length=10)),
                ('is_default', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('couple', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='categories', to='couples.coupleprofile')),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='categories', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'categories',
                'verbose_name_plural': 'categories',
                'ordering': ['-is_default', 'name'],
                'indexes': [
                    models.Index(fields=['couple', 'kind'], name='category_couple_kind_idx'),
                    models.Index(fields=['owner', 'scope'], name='category_owner_scope_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(
                        condition=models.Q(models.Q(('couple__isnull', False), ('scope', 'shared')), models.Q(('couple__isnull', True), ('scope', 'personal')), _connector='OR'),
                        name='category_scope_matches_couple',
                    ),
                ],
            },
        ),
    ]
