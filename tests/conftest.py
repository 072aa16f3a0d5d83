import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.clinical.cdt.reference import ReferenceTable
from app.clinical.cdt.schemas import CodeEntry
from app.core.db import Base


@pytest.fixture
def small_table() -> ReferenceTable:
    return ReferenceTable(
        [
            CodeEntry(code="D1110", description="Prophylaxis - adult", category="Preventive"),
            CodeEntry(code="D2391", description="Resin-based composite - one surface, posterior", category="Restorative"),
            CodeEntry(code="D2140", description="Amalgam - one surface, primary or permanent", category="Restorative"),
            CodeEntry(
                code="D3330",
                description="Endodontic therapy (root canal), molar tooth (excluding final restoration)",
                category="Endodontics",
            ),
            CodeEntry(code="D3348", description="Retreatment of previous root canal therapy - molar", category="Endodontics"),
        ]
    )


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    engine.dispose()


@pytest.fixture
def cdt_csv(tmp_path):
    path = tmp_path / "cdt.csv"
    path.write_text(
        "code,description,category\n"
        'D0120,"Periodic oral evaluation - established patient",Diagnostic\n'
        'D1110,"Prophylaxis - adult",Preventive\n'
        'D2391,"Resin-based composite - one surface, posterior",Restorative\n',
        encoding="utf-8",
    )
    return path


@pytest.fixture
def client():
    from app.main import app

    with TestClient(app) as c:
        yield c
