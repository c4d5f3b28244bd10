import pytest

from bgrun.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _quiet_logging():
    # Rebind the log stream to this test's captured stderr.
    configure_logging(verbose=False)
    yield
