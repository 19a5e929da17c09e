import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from store import SubscriptionStore  # noqa: E402
import utils  # noqa: E402


@pytest.fixture
def store():
    return SubscriptionStore(utils.sample_subscriptions())


@pytest.fixture
def empty_store():
    return SubscriptionStore()


@pytest.fixture
def jane():
    return dict(
        customer="Jane Doe",
        phone="12345678",
        next_date="09/25/2025",
        recurring_amount="$35.00",
        plan="Monthly",
        status="In Progress",
        kind="Product",
    )
