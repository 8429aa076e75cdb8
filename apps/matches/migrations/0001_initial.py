# Generated manually for matches app

import uuid
from decimal import Decimal
import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('players', '0001_initial'),
        ('teams', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Match',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('match_date', models.DateField()),
                ('opponent_team', models.CharField(blank=True, max_length=200)),
                ('venue', models.CharField(blank=True, max_length=200)),
                ('ground_fee', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('ball_amount', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('other_expenses', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('total_expense', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('players_count', models.PositiveIntegerField(default=0)),
                ('paying_players_count', models.PositiveIntegerField(default=0)),
                ('expense_per_player', models.DecimalField(decimal_places=6, default=Decimal('0'), max_digits=16)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('team', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='matches', to='teams.team')),
            ],
            options={
                'db_table': 'matches',
                'ordering': ['-match_date', '-created_at'],
                'verbose_name_plural': 'matches',
            },
        ),
        migrations.CreateModel(
            name='MatchParticipation',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('is_paying', models.BooleanField(default=True)),
                ('expense_share', models.DecimalField(decimal_places=6, default=Decimal('0'), max_digits=16)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('match', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='participations', to='matches.match')),
                ('player', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='match_participations', to='players.player')),
            ],
            options={
                'db_table': 'match_players',
                'ordering': ['created_at'],
                'unique_together': {('match', 'player')},
                'indexes': [
                    models.Index(fields=['player'], name='match_players_player_idx'),
                ],
            },
        ),
        migrations.AddField(
            model_name='match',
            name='players',
            field=models.ManyToManyField(related_name='matches', through='matches.MatchParticipation', to='players.player'),
        ),
        migrations.AddIndex(
            model_name='match',
            index=models.Index(fields=['-match_date'], name='matches_date_idx'),
        ),
        migrations.AddIndex(
            model_name='match',
            index=models.Index(fields=['team', '-match_date'], name='matches_team_date_idx'),
        ),
    ]
