import mongomock
import pytest

from infrastructure.container import container
from infrastructure.storage import LocalStorageAdapter


@pytest.fixture
def mongo_db():
    return mongomock.MongoClient(tz_aware=True)["bazaar_test"]


@pytest.fixture
def image_dir(tmp_path):
    directory = tmp_path / "product"
    directory.mkdir()
    return directory


@pytest.fixture
def storage(image_dir):
    return LocalStorageAdapter(location=str(image_dir))


@pytest.fixture
def wired_container(mongo_db, storage):
    container.configure_for_testing(mongo_db, storage)
    yield container
    container.reset()
