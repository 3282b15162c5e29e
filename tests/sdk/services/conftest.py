import pytest

from graphnode import Config, GraphNodeClient


@pytest.fixture
def client(config: Config) -> GraphNodeClient:
    return GraphNodeClient(config=config)
