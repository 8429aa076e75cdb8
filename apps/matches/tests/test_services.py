import pytest
from datetime import date
from decimal import Decimal

from apps.matches.models import Match, MatchParticipation
from apps.matches.services import (
    create_match,
    update_match,
    delete_match,
    list_matches,
    add_player_to_match,
    remove_player_from_match,
    set_paying_status,
    NoPlayersSelectedError,
    NoPayingPlayersError,
    AlreadyInMatchError,
    PlayerNotFoundError,
    TeamNotFoundError,
    ParticipationNotFoundError,
)


def shares(match):
    return {
        p.player_id: p.expense_share
        for p in MatchParticipation.objects.filter(match=match)
    }


def paying_sum(match):
    return sum(
        MatchParticipation.objects.filter(match=match, is_paying=True).values_list('expense_share', flat=True),
        Decimal('0'),
    )


@pytest.mark.django_db
class TestCreateMatch:

    def test_all_paying_equal_split(self, match, roster):
        match.refresh_from_db()

        assert match.total_expense == Decimal('500.00')
        assert match.players_count == 4
        assert match.paying_players_count == 4
        assert match.expense_per_player == Decimal('125')
        assert set(shares(match).values()) == {Decimal('125')}

    def test_roster_as_list_of_entries(self, roster):
        match = create_match(
            match_date=date(2024, 6, 1),
            ground_fee='100',
            players=[
                {'player_id': roster[0].id},
                {'player_id': str(roster[1].id), 'is_paying': False},
            ],
        )

        assert shares(match) == {roster[0].id: Decimal('100'), roster[1].id: Decimal('0')}

    def test_missing_costs_count_as_zero(self, roster):
        match = create_match(match_date=date(2024, 6, 1), players={roster[0].id: True}, ball_amount='40')

        assert match.total_expense == Decimal('40.00')
        assert match.ground_fee == Decimal('0')

    def test_empty_roster_rejected(self):
        with pytest.raises(NoPlayersSelectedError) as exc:
            create_match(match_date=date(2024, 6, 1), players={}, ground_fee='100')

        assert str(exc.value) == 'Please select at least one player for the match'
        assert Match.objects.count() == 0

    def test_no_paying_players_persists_nothing(self, roster):
        with pytest.raises(NoPayingPlayersError) as exc:
            create_match(
                match_date=date(2024, 6, 1),
                players={p.id: False for p in roster[:3]},
                ground_fee='300',
            )

        assert str(exc.value) == 'At least one player must be a paying player'
        assert Match.objects.count() == 0
        assert MatchParticipation.objects.count() == 0

    def test_unknown_player_persists_nothing(self, roster):
        with pytest.raises(PlayerNotFoundError):
            create_match(
                match_date=date(2024, 6, 1),
                players={roster[0].id: True, '00000000-0000-0000-0000-000000000000': True},
            )

        assert Match.objects.count() == 0

    def test_unknown_team(self, roster):
        with pytest.raises(TeamNotFoundError):
            create_match(
                match_date=date(2024, 6, 1),
                team_id='00000000-0000-0000-0000-000000000000',
                players={roster[0].id: True},
            )


@pytest.mark.django_db
class TestRosterChanges:

    def test_toggle_to_non_paying_resplits(self, match, roster):
        set_paying_status(match_id=match.id, player_id=roster[3].id, is_paying=False)
        match.refresh_from_db()
        current = shares(match)

        assert match.total_expense == Decimal('500.00')
        assert match.paying_players_count == 3
        assert match.players_count == 4
        assert current[roster[3].id] == Decimal('0')
        assert {current[p.id] for p in roster[:3]} == {Decimal('166.666667')}
        assert current[roster[0].id].quantize(Decimal('0.01')) == Decimal('166.67')
        assert abs(paying_sum(match) - match.total_expense) <= Decimal('0.03')

    def test_toggle_back_to_paying(self, match, roster):
        set_paying_status(match_id=match.id, player_id=roster[3].id, is_paying=False)
        set_paying_status(match_id=match.id, player_id=roster[3].id, is_paying=True)

        assert set(shares(match).values()) == {Decimal('125')}

    def test_remove_paying_player_deletes_row(self, three_payer_match):
        match, players = three_payer_match

        remove_player_from_match(match_id=match.id, player_id=players[0].id)
        match.refresh_from_db()

        assert not MatchParticipation.objects.filter(match=match, player=players[0]).exists()
        assert shares(match) == {players[1].id: Decimal('150'), players[2].id: Decimal('150')}
        assert match.players_count == 2
        assert match.paying_players_count == 2

    def test_add_player_resplits(self, three_payer_match, make_player):
        match, players = three_payer_match
        newcomer = make_player()

        participation = add_player_to_match(match_id=match.id, player_id=newcomer.id)

        assert participation.expense_share == Decimal('75')
        assert set(shares(match).values()) == {Decimal('75')}

    def test_add_non_paying_player_keeps_shares(self, three_payer_match, make_player):
        match, players = three_payer_match
        newcomer = make_player()

        add_player_to_match(match_id=match.id, player_id=newcomer.id, is_paying=False)
        match.refresh_from_db()

        assert shares(match)[newcomer.id] == Decimal('0')
        assert shares(match)[players[0].id] == Decimal('100')
        assert match.players_count == 4
        assert match.paying_players_count == 3

    def test_add_duplicate_player_rejected(self, match, roster):
        with pytest.raises(AlreadyInMatchError):
            add_player_to_match(match_id=match.id, player_id=roster[0].id)

        assert MatchParticipation.objects.filter(match=match).count() == 4

    def test_toggle_last_payer_rejected(self, roster):
        match = create_match(
            match_date=date(2024, 6, 1),
            ground_fee='100',
            players={roster[0].id: True, roster[1].id: False},
        )

        with pytest.raises(NoPayingPlayersError):
            set_paying_status(match_id=match.id, player_id=roster[0].id, is_paying=False)

        assert shares(match)[roster[0].id] == Decimal('100')

    def test_remove_last_payer_rejected(self, roster):
        match = create_match(
            match_date=date(2024, 6, 1),
            ground_fee='100',
            players={roster[0].id: True, roster[1].id: False},
        )

        with pytest.raises(NoPayingPlayersError):
            remove_player_from_match(match_id=match.id, player_id=roster[0].id)

        assert MatchParticipation.objects.filter(match=match).count() == 2

    def test_remove_non_paying_player_allowed(self, roster):
        match = create_match(
            match_date=date(2024, 6, 1),
            ground_fee='100',
            players={roster[0].id: True, roster[1].id: False},
        )

        remove_player_from_match(match_id=match.id, player_id=roster[1].id)
        match.refresh_from_db()

        assert match.players_count == 1
        assert shares(match) == {roster[0].id: Decimal('100')}

    def test_player_not_in_match(self, match, make_player):
        with pytest.raises(ParticipationNotFoundError):
            set_paying_status(match_id=match.id, player_id=make_player().id, is_paying=False)

    def test_repeated_changes_do_not_drift(self, three_payer_match, make_player):
        match, players = three_payer_match
        extras = [make_player() for _ in range(4)]

        for extra in extras:
            add_player_to_match(match_id=match.id, player_id=extra.id)
        for extra in extras[:3]:
            remove_player_from_match(match_id=match.id, player_id=extra.id)

        assert set(shares(match).values()) == {Decimal('75')}


@pytest.mark.django_db
class TestUpdateAndDelete:

    def test_cost_change_resplits(self, match, roster):
        update_match(match_id=match.id, ground_fee=Decimal('500'))
        match.refresh_from_db()

        assert match.total_expense == Decimal('700.00')
        assert set(shares(match).values()) == {Decimal('175')}

    def test_detail_change_keeps_shares(self, match):
        update_match(match_id=match.id, venue='Away Ground')
        match.refresh_from_db()

        assert match.venue == 'Away Ground'
        assert set(shares(match).values()) == {Decimal('125')}

    def test_delete_match_removes_roster(self, match):
        delete_match(match_id=match.id)

        assert MatchParticipation.objects.count() == 0

    def test_list_matches_by_player(self, match, roster, make_player):
        outsider = make_player()
        create_match(match_date=date(2024, 7, 1), players={outsider.id: True})

        assert list(list_matches(player_id=roster[0].id)) == [match]
