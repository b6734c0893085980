"""Shared test fixtures for Kilometer Trips."""

import os
import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE for local testing (DynamoDB Local doesn't need it)
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_cached_clients():
    from core.clients import get_dynamo_resource
    from core.config import _reset_config
    from core.storage import get_trip_store

    _reset_config()
    get_trip_store.cache_clear()
    get_dynamo_resource.cache_clear()
    yield
    _reset_config()
    get_trip_store.cache_clear()
    get_dynamo_resource.cache_clear()


@pytest.fixture
def memory_store():
    from core.storage import InMemoryTripStore

    return InMemoryTripStore()


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake credentials so moto never reaches a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.delenv("DYNAMODB_ENDPOINT", raising=False)


@pytest.fixture
def mocked_trips_table(aws_credentials):
    """A moto-backed kilometer-trips table."""
    import boto3
    from moto import mock_aws

    with mock_aws():
        resource = boto3.resource("dynamodb", region_name="us-east-1")
        table = resource.create_table(
            TableName="kilometer-trips",
            KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )
        yield table


# DynamoDB Local fixtures
@pytest.fixture
def dynamodb_resource():
    """Provide a DynamoDB resource for integration tests."""
    import boto3
    from core.config import get_config

    config = get_config()

    resource = boto3.resource(
        "dynamodb",
        endpoint_url=config.dynamodb_endpoint,
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )

    return resource


@pytest.fixture
def trips_table(dynamodb_resource):
    """Provide the kilometer-trips table."""
    from core.config import get_config

    table = dynamodb_resource.Table(get_config().trips_table)
    yield table

    # Cleanup: scan and delete all items created during test
    response = table.scan()
    with table.batch_writer() as batch:
        for item in response.get("Items", []):
            batch.delete_item(Key={"id": item["id"]})
