import pytest
import pytest_asyncio

from ddl import Database

from tests.mocks import FakeSchema


@pytest.fixture
def schema():
    """Schema where no table declares a primary key."""
    return FakeSchema()


@pytest_asyncio.fixture
async def db():
    async with Database.connect(":memory:") as database:
        yield database
