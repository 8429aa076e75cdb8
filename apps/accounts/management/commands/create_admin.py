"""
Management command to create the club admin account.

Usage:
    python manage.py create_admin
    python manage.py create_admin --username captain --password s3cret --first-name Sam --last-name Reed

With a first and last name the admin gets a linked player profile, which
the admin dashboard uses to find the teams the admin manages.
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import User, UserRole
from apps.players.services import create_player


class Command(BaseCommand):
    help = 'Create the club admin user'

    def add_arguments(self, parser):
        parser.add_argument('--username', default='admin')
        parser.add_argument('--password', default='admin123')
        parser.add_argument('--first-name', default='')
        parser.add_argument('--last-name', default='')

    @transaction.atomic
    def handle(self, *args, **options):
        username = options['username']

        if User.objects.filter(username=username).exists():
            self.stdout.write(self.style.WARNING(f'Admin user "{username}" already exists'))
            return

        player = None
        if options['first_name'] and options['last_name']:
            player = create_player(first_name=options['first_name'], last_name=options['last_name'])

        User.objects.create_user(
            username=username,
            password=options['password'],
            role=UserRole.ADMIN,
            is_staff=True,
            player=player,
        )

        self.stdout.write(self.style.SUCCESS('Admin user created successfully!'))
        self.stdout.write('')
        self.stdout.write('Login credentials:')
        self.stdout.write(f'  Username: {username}')
        self.stdout.write(f'  Password: {options["password"]}')
