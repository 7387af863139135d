import pytest

from scoreledger.services.errors import StoreError, SubmissionError
from scoreledger.services.ledger import (
    LedgerMessage,
    RegisterPlayer,
    SaveScore,
    execute,
    replay_messages,
)
from scoreledger.services.registration import UNSET
from scoreledger.services.scores import submit_score
from scoreledger.services.store import MemoryPlayerStore


def test_register_request_distinguishes_omitted_and_null():
    assert RegisterPlayer().display_name_update() is UNSET
    assert RegisterPlayer.model_validate({}).display_name_update() is UNSET
    assert RegisterPlayer.model_validate({'display_name': None}).display_name_update() is None
    assert RegisterPlayer(display_name='Frog').display_name_update() == 'Frog'


def test_message_parses_tagged_request():
    message = LedgerMessage.model_validate(
        {'signer': 'W1', 'request': {'kind': 'save_score', 'score': 3, 'timestamp': 9}}
    )
    assert isinstance(message.request, SaveScore)
    message = LedgerMessage.model_validate(
        {'signer': 'W1', 'request': {'kind': 'register_player'}}
    )
    assert isinstance(message.request, RegisterPlayer)


def test_direct_and_replayed_calls_agree(store):
    requests = [
        SaveScore(score=10, timestamp=1, replay_data='r10'),
        SaveScore(score=20, timestamp=2),
        SaveScore(score=0, timestamp=3, replay_data='r0'),
        SaveScore(score=4, timestamp=4),
        RegisterPlayer(display_name='Frog'),
    ]

    for request in requests:
        try:
            execute(store, 'W1', request)
        except SubmissionError:
            pass

    replayed = MemoryPlayerStore()
    outcomes = replay_messages(
        replayed, [LedgerMessage(signer='W1', request=request) for request in requests]
    )
    assert [outcome.ok for outcome in outcomes] == [True, False, False, True, True]
    assert [outcome.error for outcome in outcomes] == [
        None,
        'replay_required',
        'invalid_score',
        None,
        None,
    ]
    assert replayed.get('W1') == store.get('W1')
    assert replayed.get('W1').games_played == 2


def test_unsigned_message_is_rejected(store):
    outcomes = replay_messages(
        store, [LedgerMessage(request=SaveScore(score=1, timestamp=1, replay_data='r'))]
    )
    assert outcomes[0].ok is False
    assert outcomes[0].error == 'unauthenticated'
    assert store.keys() == []


def test_store_error_stops_the_batch(store):
    submit_score(store, 'W1', 1, 'r', 1)

    class FailingStore:
        def get(self, key):
            return store.get(key)

        def put(self, key, record):
            raise StoreError()

        def keys(self):
            return store.keys()

    with pytest.raises(StoreError):
        replay_messages(
            FailingStore(),
            [LedgerMessage(signer='W1', request=SaveScore(score=1, timestamp=2))],
        )
    assert store.get('W1').games_played == 1
