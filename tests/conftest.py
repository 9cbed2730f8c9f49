import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from modules.media.dtos import StoredAssetDTO
from modules.media.exceptions import AssetDestroyFailed, UploadFailed
from modules.media.storage import IAssetStorage


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture(autouse=True)
def _clear_cache():
    """Throttle counters and OTP entries live in the cache."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


class FakeAssetStorage(IAssetStorage):
    """In-memory media host.

    Public ids listed in ``failing_destroys`` raise on destroy; setting
    ``fail_uploads`` makes every upload raise.
    """

    def __init__(self) -> None:
        self.uploaded: list[str] = []
        self.destroyed: list[str] = []
        self.failing_destroys: set[str] = set()
        self.fail_uploads = False

    def upload(self, file) -> StoredAssetDTO:
        if self.fail_uploads:
            raise UploadFailed("host unavailable")
        public_id = f"longs/covers/asset-{len(self.uploaded) + 1}"
        self.uploaded.append(public_id)
        return StoredAssetDTO(
            url=f"https://res.cloudinary.test/{public_id}.jpg", public_id=public_id
        )

    def destroy(self, public_id: str) -> None:
        if public_id in self.failing_destroys:
            raise AssetDestroyFailed(f"could not delete {public_id}")
        self.destroyed.append(public_id)


@pytest.fixture()
def fake_storage():
    return FakeAssetStorage()


@pytest.fixture()
def order_payload():
    """Checkout payload as the storefront sends it."""

    def build(reference: str = "ORD_1", **overrides):
        payload = {
            "orderReference": reference,
            "customerInfo": {
                "firstName": "Jane",
                "lastName": "Doe",
                "email": "jane@example.com",
                "phone": "+1 416 555 0100",
                "address": "1 King St W",
                "city": "Toronto",
                "province": "ON",
                "postalCode": "M5H 1A1",
            },
            "orderItems": [
                {
                    "productId": "prod-1",
                    "name": "Linen shirt",
                    "quantity": 1,
                    "price": 100,
                }
            ],
            "orderSummary": {
                "subtotal": 100,
                "shippingFee": 10,
                "totalAmount": 110,
                "itemsCount": 1,
            },
        }
        payload.update(overrides)
        return payload

    return build
