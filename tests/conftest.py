import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from gallery_admin.database import Base
from gallery_admin.models import DemoStorageEntry  # noqa: F401
from gallery_admin.schemas.rsvp import RSVPResponseCreate
from gallery_admin.services.rsvp_service import RSVPService
from gallery_admin.services.rsvp_store import LocalRSVPStore
from gallery_admin.utils.rsvp_helpers import create_question

WEDDING_ID = "wedding-1"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def local_store(session_factory):
    return LocalRSVPStore(session_factory)


@pytest.fixture
def rsvp_service(local_store):
    return RSVPService(WEDDING_ID, local_store)


@pytest.fixture
def make_question():
    """Question factory: make_question("text", label="Allergies", order=0)"""

    def _make(kind="text", order=0, wedding_id=WEDDING_ID, **updates):
        question = create_question(kind, wedding_id, order)
        return question.model_copy(update=updates) if updates else question

    return _make


@pytest.fixture
def make_submission():
    def _make(name="Alice Martin", attendance="yes", guests=0, **fields):
        return RSVPResponseCreate(
            respondent_name=name,
            attendance=attendance,
            guests=[{"name": f"Guest {i + 1}"} for i in range(guests)],
            **fields,
        )

    return _make
