import os
import pytest
from pgbuilder.connection import connect


@pytest.fixture(scope="function")
def setup_db(request):
    """Setup a temporary file SQLite database for each test."""
    os.makedirs("/tmp/pgbuilder-tests", exist_ok=True)
    path = f"/tmp/pgbuilder-tests/test-{request.function.__module__}-{request.function.__name__}.sqlite3"
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    connect(f"sqlite:///{path}")
    yield path
