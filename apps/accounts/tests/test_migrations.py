import pytest
from io import StringIO
from django.core.management import call_command


@pytest.mark.django_db
def test_models_match_migrations():
    """Every model change is captured in a migration."""
    out = StringIO()

    call_command('makemigrations', '--check', '--dry-run', stdout=out)

    assert 'No changes detected' in out.getvalue()
