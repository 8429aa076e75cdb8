"""
Teams app services layer.

Services contain business logic and orchestrate operations across models.
"""

from .exceptions import (
    TeamsServiceError,
    TeamNotFoundError,
    PlayerNotFoundError,
    AlreadyOnTeamError,
    NotOnTeamError,
)

from .team_management import (
    get_team_by_id,
    create_team,
    update_team,
    delete_team,
)

from .membership_management import (
    add_player_to_team,
    remove_player_from_team,
    get_team_members,
    get_player_teams,
)


__all__ = [
    # Exceptions
    'TeamsServiceError',
    'TeamNotFoundError',
    'PlayerNotFoundError',
    'AlreadyOnTeamError',
    'NotOnTeamError',

    # Team Management
    'get_team_by_id',
    'create_team',
    'update_team',
    'delete_team',

    # Membership Management
    'add_player_to_team',
    'remove_player_from_team',
    'get_team_members',
    'get_player_teams',
]
