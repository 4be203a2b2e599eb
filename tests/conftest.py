import pytest

from contactform.core.config import Settings
from contactform.db.memory import MemorySubmissionStore
from contactform.models.contact import FormData


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, mongodb_url=None, mongo_uri=None)


@pytest.fixture
def memory_store(settings) -> MemorySubmissionStore:
    return MemorySubmissionStore(settings.namespace, settings.database)


@pytest.fixture
def valid_form() -> FormData:
    return FormData(name="Ada Lovelace", email="ada@example.com", message="Hello")
