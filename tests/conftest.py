import pytest

from fakes import FakeCategoryAPI, FakeTransactionAPI, FakeUserAPI
from models.category import Category
from models.user import User
from services.category_service import CategoryRegistry
from services.export_service import ExportService
from services.report_service import ReportService
from services.tracker_service import TrackerService
from services.transaction_service import TransactionStore


@pytest.fixture
def categories():
    """System Food/Income plus one category owned by user 1"""
    return [
        Category(id=1, name="Food", type="expense", color_hex="#e74c3c"),
        Category(id=2, name="Income", type="income", color_hex="#27ae60"),
        Category(id=3, name="Gym", type="expense", color_hex="#123456", user_id=1),
    ]


@pytest.fixture
def category_api(categories):
    return FakeCategoryAPI(categories, user_id=1)


@pytest.fixture
def tx_api():
    return FakeTransactionAPI()


@pytest.fixture
def user():
    return User(id=1, email="asha@example.com", display_name="Asha")


@pytest.fixture
def user_api(user):
    return FakeUserAPI(user)


@pytest.fixture
def registry(category_api):
    reg = CategoryRegistry(category_api)
    reg.load()
    return reg


@pytest.fixture
def store(tx_api, registry):
    return TransactionStore(tx_api, registry)


@pytest.fixture
def tracker(user_api, category_api, tx_api):
    registry = CategoryRegistry(category_api)
    store = TransactionStore(tx_api, registry)
    return TrackerService(
        user_api, registry, store, ReportService(registry), ExportService("YYYY-MM-DD")
    )


@pytest.fixture
def started_tracker(tracker):
    tracker.start()
    tracker.select_period("2024-03")
    return tracker
