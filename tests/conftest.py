import os

import pytest

os.environ.setdefault('SECRET_KEY', 'test-secret')
os.environ.setdefault('DATABASE_URL', 'sqlite://')
os.environ.setdefault('PLAYER_STORE', 'memory')
os.environ.setdefault('SEQUENCER_TOKEN', 'sequencer-secret')
os.environ.setdefault('LOG_LEVEL', 'WARNING')

from fastapi.testclient import TestClient
from sqlmodel import Session

from scoreledger.api.deps import get_store, issue_wallet_token
from scoreledger.core import build_engine, init_db
from scoreledger.services.store import MemoryPlayerStore, SqlPlayerStore


@pytest.fixture()
def store():
    return MemoryPlayerStore()


@pytest.fixture()
def db_engine():
    engine = build_engine('sqlite://')
    init_db(engine, reset=False)
    yield engine
    engine.dispose()


@pytest.fixture()
def sql_store(db_engine):
    with Session(db_engine) as session:
        yield SqlPlayerStore(session)


@pytest.fixture()
def client(store):
    from scoreledger.app import app

    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def sql_client(sql_store):
    from scoreledger.app import app

    app.dependency_overrides[get_store] = lambda: sql_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def login(client):
    def _login(wallet_address):
        res = client.post(
            '/auth/wallet',
            json={'wallet_address': wallet_address, 'token': issue_wallet_token(wallet_address)},
        )
        assert res.status_code == 200
        return res

    return _login


@pytest.fixture()
def sql_login(sql_client):
    def _login(wallet_address):
        res = sql_client.post(
            '/auth/wallet',
            json={'wallet_address': wallet_address, 'token': issue_wallet_token(wallet_address)},
        )
        assert res.status_code == 200
        return res

    return _login
