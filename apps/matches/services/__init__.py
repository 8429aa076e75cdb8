"""
Matches app services layer.

Services contain business logic and orchestrate operations across models.
"""

from .exceptions import (
    MatchesServiceError,
    MatchNotFoundError,
    PlayerNotFoundError,
    TeamNotFoundError,
    ParticipationNotFoundError,
    InvalidRosterError,
    NoPlayersSelectedError,
    NoPayingPlayersError,
    AlreadyInMatchError,
    InvalidAllocationError,
)

from .allocation import ExpenseAllocator

from .match_management import (
    create_match,
    update_match,
    delete_match,
    get_match,
    list_matches,
    reallocate_match_shares,
)

from .participation_management import (
    add_player_to_match,
    remove_player_from_match,
    set_paying_status,
)


__all__ = [
    # Exceptions
    'MatchesServiceError',
    'MatchNotFoundError',
    'PlayerNotFoundError',
    'TeamNotFoundError',
    'ParticipationNotFoundError',
    'InvalidRosterError',
    'NoPlayersSelectedError',
    'NoPayingPlayersError',
    'AlreadyInMatchError',
    'InvalidAllocationError',

    # Allocation
    'ExpenseAllocator',

    # Match Management
    'create_match',
    'update_match',
    'delete_match',
    'get_match',
    'list_matches',
    'reallocate_match_shares',

    # Participation Management
    'add_player_to_match',
    'remove_player_from_match',
    'set_paying_status',
]
