# Generated manually for players app

import uuid
import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Player',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('first_name', models.CharField(max_length=100)),
                ('last_name', models.CharField(max_length=100)),
                ('mobile_number', models.CharField(blank=True, max_length=32)),
                ('email', models.EmailField(blank=True, max_length=255)),
                ('birthday', models.CharField(blank=True, max_length=5, validators=[django.core.validators.RegexValidator(message='Birthday must be in MM-DD format', regex='^(0[1-9]|1[0-2])-(0[1-9]|[12]\\d|3[01])$')])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'players',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['last_name', 'first_name'], name='players_last_na_4b1f0e_idx'),
                    models.Index(fields=['created_at'], name='players_created_9d2c41_idx'),
                ],
            },
        ),
    ]
