"""The service is a pure pass-through over its repository."""

import pytest

from product_catalog_api.app.core.errors import NotFoundError, StorageError
from product_catalog_api.app.schemas.product import Product
from tests.fakes import make_service


@pytest.fixture
def setup():
    return make_service()


def test_each_method_delegates_once(setup):
    service, repo = setup
    created = service.create_product(Product(title="t", description="d", price=1.0))
    service.get_all_products()
    service.get_product_by_id(created.id)
    service.update_product(created.model_copy(update={"title": "u"}))
    service.delete_product(created.id)
    assert repo.calls == ["create", "get_all", "get_by_id", "update", "delete"]


def test_returns_repository_results_unchanged(setup):
    service, repo = setup
    created = service.create_product(Product(title="t", description="d", price=1.0))
    assert service.get_product_by_id(created.id) == repo.get_by_id(created.id)
    assert service.get_all_products() == repo.get_all()


def test_not_found_propagates(setup):
    service, _ = setup
    with pytest.raises(NotFoundError):
        service.get_product_by_id(999)


@pytest.mark.parametrize(
    "call",
    [
        lambda s: s.get_all_products(),
        lambda s: s.create_product(Product(title="t", description="d", price=1.0)),
        lambda s: s.get_product_by_id(1),
        lambda s: s.update_product(Product(id=1, title="t", description="d", price=1.0)),
        lambda s: s.delete_product(1),
    ],
)
def test_storage_errors_propagate_unchanged(setup, call):
    service, repo = setup
    error = StorageError("database is locked")
    repo.fail_with = error
    with pytest.raises(StorageError) as excinfo:
        call(service)
    assert excinfo.value is error
