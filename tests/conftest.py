"""
Shared fixtures: in-memory SQLite database, seeded players, API client.
"""
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, make_engine, get_db
from main import app
from models import Player, Race, Profession
from services.level_service import apply_level

SEED_PLAYERS = [
    # name, title, race, profession, experience, birthday, banned
    ("Alice", "Knight", Race.HUMAN, Profession.WARRIOR, 100, datetime(2005, 1, 1), False),
    ("bob", "Thief of Shadows", Race.ELF, Profession.ROGUE, 3000, datetime(2010, 6, 15), True),
    ("Carol", "Archmage", Race.DWARF, Profession.SORCERER, 50000, datetime(2001, 3, 3), False),
    ("Dave", "Knight Errant", Race.ORC, Profession.WARRIOR, 0, datetime(2020, 12, 31), False),
    ("Eve", "Shadow Cleric", Race.HUMAN, Profession.CLERIC, 9000, datetime(2015, 7, 7), True),
]


@pytest.fixture
def engine():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def players(db):
    """Five players with ids 1..5 in SEED_PLAYERS order."""
    seeded = []
    for name, title, race, profession, experience, birthday, banned in SEED_PLAYERS:
        player = Player(
            name=name,
            title=title,
            race=race,
            profession=profession,
            experience=experience,
            birthday=birthday,
            banned=banned,
        )
        apply_level(player)
        db.add(player)
        seeded.append(player)
    db.commit()
    return seeded


@pytest.fixture
def client(session_factory, players):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
