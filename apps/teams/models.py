from django.db import models
from django.utils import timezone
import uuid


class Team(models.Model):
    """Club team, managed by a player."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    date_formed = models.DateField()
    manager = models.ForeignKey(
        'players.Player',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='managed_teams'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'teams'
        indexes = [
            models.Index(fields=['manager', 'name'], name='teams_manager_name_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    def has_member(self, player):
        return self.memberships.filter(player=player).exists()


class TeamMembership(models.Model):
    """Player membership in a team, with the date the player joined."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    team = models.ForeignKey(Team, on_delete=models.CASCADE, related_name='memberships')
    player = models.ForeignKey('players.Player', on_delete=models.CASCADE, related_name='team_memberships')
    joined_date = models.DateField(default=timezone.localdate)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'team_players'
        unique_together = [['team', 'player']]
        indexes = [
            models.Index(fields=['player', 'joined_date'], name='team_players_player_idx'),
        ]
        ordering = ['-joined_date']

    def __str__(self):
        return f"{self.player.full_name} in {self.team.name}"
