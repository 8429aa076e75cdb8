"""
Management command to create sample data for testing the API.

Usage:
    python manage.py create_sample_data

This creates:
- 1 admin (linked to a player who manages both teams)
- 6 players, 3 of them with logins
- 2 teams with memberships
- 3 matches with rosters and allocated shares
- Contributions and club-wide expenses
"""

from datetime import date, timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import User, UserRole
from apps.finances.models import Contribution, Expense
from apps.finances.services import create_contribution, create_expense
from apps.matches.models import Match
from apps.matches.services import create_match
from apps.players.models import Player
from apps.players.services import create_player
from apps.teams.models import Team
from apps.teams.services import create_team, add_player_to_team


PLAYERS = [
    ('Sam', 'Reed', '07700 900001', '04-12'),
    ('Priya', 'Shah', '07700 900002', '09-30'),
    ('Tom', 'Hughes', '07700 900003', ''),
    ('Ravi', 'Kumar', '07700 900004', '01-05'),
    ('Jack', 'Moore', '', '11-21'),
    ('Ali', 'Khan', '07700 900006', ''),
]


class Command(BaseCommand):
    help = 'Create sample data for testing the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        players = self.create_players()
        users = self.create_users(players)
        teams = self.create_teams(players)
        self.create_matches(players, teams)
        self.create_ledger(players)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        for username, password in users:
            self.stdout.write(f'  {username} / {password}')

    def clear_data(self):
        """Clear all club data from the database."""
        Contribution.objects.all().delete()
        Expense.objects.all().delete()
        Match.objects.all().delete()
        Team.objects.all().delete()
        User.objects.filter(is_superuser=False).delete()
        Player.objects.all().delete()

    def create_players(self):
        self.stdout.write('  Creating players...')
        return [
            create_player(first_name=first, last_name=last, mobile_number=mobile, birthday=birthday)
            for first, last, mobile, birthday in PLAYERS
        ]

    def create_users(self, players):
        self.stdout.write('  Creating users...')
        accounts = [
            ('clubadmin', 'admin123', UserRole.ADMIN, players[0]),
            ('priya', 'password123', UserRole.PLAYER, players[1]),
            ('tom', 'password123', UserRole.PLAYER, players[2]),
        ]
        created = []
        for username, password, role, player in accounts:
            user, _ = User.objects.get_or_create(
                username=username,
                defaults={'role': role, 'player': player, 'is_staff': role == UserRole.ADMIN},
            )
            user.set_password(password)
            user.save()
            created.append((username, password))
        return created

    def create_teams(self, players):
        self.stdout.write('  Creating teams...')
        today = date.today()
        first_xi = create_team(name='First XI', date_formed=date(2019, 4, 1), manager_id=players[0].id)
        sunday_xi = create_team(name='Sunday XI', date_formed=date(2021, 5, 2), manager_id=players[0].id)

        for player in players[:4]:
            add_player_to_team(team_id=first_xi.id, player_id=player.id, joined_date=today - timedelta(days=300))
        for player in players[2:]:
            add_player_to_team(team_id=sunday_xi.id, player_id=player.id, joined_date=today - timedelta(days=120))

        return {'first_xi': first_xi, 'sunday_xi': sunday_xi}

    def create_matches(self, players, teams):
        self.stdout.write('  Creating matches...')
        today = date.today()

        create_match(
            team_id=teams['first_xi'].id,
            match_date=today - timedelta(days=21),
            opponent_team='Riverside CC',
            venue='Home Ground',
            ground_fee='300',
            ball_amount='150',
            other_expenses='50',
            players={p.id: True for p in players[:4]},
        )
        create_match(
            team_id=teams['first_xi'].id,
            match_date=today - timedelta(days=14),
            opponent_team='Hillside CC',
            venue='Hillside Park',
            ground_fee='250',
            ball_amount='120',
            players={players[0].id: True, players[1].id: True, players[2].id: True, players[3].id: False},
        )
        create_match(
            team_id=teams['sunday_xi'].id,
            match_date=today - timedelta(days=7),
            opponent_team='Old Boys',
            venue='Memorial Field',
            ground_fee='200',
            ball_amount='100',
            players={p.id: True for p in players[2:]},
        )

    def create_ledger(self, players):
        self.stdout.write('  Creating contributions and expenses...')
        today = date.today()

        for offset, player in enumerate(players):
            create_contribution(
                player_id=player.id,
                amount=Decimal('200.00') + offset * Decimal('25.00'),
                date=today - timedelta(days=30),
                description='Season subscription',
            )

        create_expense(
            description='New stumps and bails',
            amount=Decimal('180.00'),
            date=today - timedelta(days=40),
            category='Equipment',
        )
        create_expense(
            description='League registration',
            amount=Decimal('500.00'),
            date=today - timedelta(days=60),
            category='Fees',
        )
