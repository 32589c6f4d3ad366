import pytest
from fastapi.testclient import TestClient

from product_catalog_api.app.core.config import Settings
from product_catalog_api.app.main import create_app
from product_catalog_api.app.schemas.product import Product
from tests.fakes import make_service

BULBASAUR = Product(
    title="Bulbasaur",
    description="There is a plant seed on its back right from the day this Pokémon is born.",
    price=99.99,
)
CHARMANDER = Product(
    title="Charmander",
    description="It has a preference for hot things.",
    price=1093.45,
)


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "products.db")


@pytest.fixture
def settings(db_path):
    return Settings(database_url=db_path, port=8080)


@pytest.fixture
def fake():
    """Real service over an in-memory repository seeded with two products."""
    return make_service([BULBASAUR, CHARMANDER])


@pytest.fixture
def client(settings, fake):
    service, _ = fake
    app = create_app(settings, service=service)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def repository(fake):
    return fake[1]


@pytest.fixture
def sqlite_client(settings):
    """Client over the real SQLite stack; migrations run on startup."""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
