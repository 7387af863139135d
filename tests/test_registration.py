import pytest

from scoreledger.models import PlayerRecord
from scoreledger.services.errors import Unauthenticated
from scoreledger.services.registration import (
    UNSET,
    apply_display_name,
    normalize_display_name,
    register_player,
)
from scoreledger.services.scores import submit_score


def test_register_creates_default_record(store):
    record = register_player(store, 'W1')
    assert record == PlayerRecord()
    assert store.get('W1') == PlayerRecord()


def test_register_trims_name(store):
    record = register_player(store, 'W1', '  Frogger  ')
    assert record.display_name == 'Frogger'


def test_too_long_name_is_ignored(store):
    register_player(store, 'W1', 'Frogger')
    record = register_player(store, 'W1', 'x' * 31)
    assert record.display_name == 'Frogger'
    assert store.get('W1').display_name == 'Frogger'


def test_blank_name_is_ignored(store):
    register_player(store, 'W1', 'Frogger')
    assert register_player(store, 'W1', '    ').display_name == 'Frogger'


def test_thirty_characters_is_allowed(store):
    assert register_player(store, 'W1', 'y' * 30).display_name == 'y' * 30


def test_explicit_none_clears_name(store):
    register_player(store, 'W1', 'Frogger')
    record = register_player(store, 'W1', None)
    assert record.display_name is None


def test_unset_keeps_name(store):
    register_player(store, 'W1', 'Frogger')
    assert register_player(store, 'W1', UNSET).display_name == 'Frogger'


def test_register_leaves_scores_alone(store):
    submit_score(store, 'W1', 42, 'replay', 7)
    record = register_player(store, 'W1', 'Frogger')
    assert record.high_score == 42
    assert record.games_played == 1
    assert record.last_played_at == 7
    assert record.replay_data == 'replay'


def test_register_requires_identity(store):
    with pytest.raises(Unauthenticated):
        register_player(store, None, 'Frogger')
    assert store.keys() == []


def test_normalize_counts_characters_not_bytes():
    name = 'é' * 30
    assert normalize_display_name(name) == name
    assert normalize_display_name('é' * 31) is None


def test_apply_display_name_returns_copy():
    current = PlayerRecord(display_name='A')
    updated = apply_display_name(current, 'B')
    assert current.display_name == 'A'
    assert updated.display_name == 'B'
    assert not UNSET
