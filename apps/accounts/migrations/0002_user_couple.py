# Generated manually for the accounts app

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    dependencies = [
        ('accounts', '0001_initial'),
        ('couples', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='user',
            name='couple',
            field=models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='members', to='couples.coupleprofile'),
        ),
    ]
