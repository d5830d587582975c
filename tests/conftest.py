import sys
from pathlib import Path

import pytest
from freezegun import freeze_time

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from sku_checkout.engine.promotions.promotions import Combined, Individual  # noqa: E402


@pytest.fixture(scope="session")
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture(scope="session")
def config_path(project_root: Path) -> Path:
    return project_root / "data" / "sku_checkout" / "checkout_config.yaml"


@pytest.fixture
def reference_promotions():
    return [Individual(3, "a", 130), Individual(2, "b", 45), Combined("c", "d", 30)]


@pytest.fixture
def freezer():
    with freeze_time("2020-01-01T00:00:00Z") as frozen_datetime:
        yield frozen_datetime
