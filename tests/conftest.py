"""Pytest configuration and fixtures for backend tests.

This module provides shared fixtures for testing the backend application,
including mocked AWS resources, API Gateway event factories and sample data.
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any
from typing import Callable
from typing import Generator
from typing import Optional
from unittest import mock
from uuid import uuid4

import boto3
import pytest
from botocore.config import Config
from moto import mock_aws

# Add backend source to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

REGION = 'us-west-2'
ITEMS_TABLE = 'versa-items'
REPORTS_TABLE = 'versa-reports'
BUCKET = 'versa-uploads'


# --- AWS Fixtures ---


@pytest.fixture(autouse=True)
def aws_credentials() -> Generator[None, None, None]:
    """Set fake credentials so boto3 can never reach a live account."""
    with mock.patch.dict(os.environ, clear=True):
        os.environ['AWS_ACCESS_KEY_ID'] = 'testing'
        os.environ['AWS_SECRET_ACCESS_KEY'] = 'testing'
        os.environ['AWS_SECURITY_TOKEN'] = 'testing'
        os.environ['AWS_SESSION_TOKEN'] = 'testing'
        os.environ['AWS_DEFAULT_REGION'] = REGION
        os.environ['AWS_REGION'] = REGION
        yield


@pytest.fixture(autouse=True)
def clear_clients() -> Generator[None, None, None]:
    """Drop cached boto3 clients so each test sees its own moto backend."""
    from versa.services.aws_clients import clear_client_cache

    clear_client_cache()
    yield
    clear_client_cache()


@pytest.fixture
def mocked_aws() -> Generator[None, None, None]:
    """Activate moto for DynamoDB, S3 and EventBridge."""
    with mock_aws():
        yield


@pytest.fixture
def dynamodb(mocked_aws) -> Any:
    return boto3.resource('dynamodb', region_name=REGION)


def _create_table(dynamodb: Any, name: str, key: str) -> Any:
    table = dynamodb.create_table(
        TableName=name,
        KeySchema=[{'AttributeName': key, 'KeyType': 'HASH'}],
        AttributeDefinitions=[{'AttributeName': key, 'AttributeType': 'S'}],
        BillingMode='PAY_PER_REQUEST',
    )
    table.wait_until_exists()
    return table


@pytest.fixture
def items_table(dynamodb) -> Any:
    """An empty items table keyed by itemId."""
    return _create_table(dynamodb, ITEMS_TABLE, 'itemId')


@pytest.fixture
def reports_table(dynamodb) -> Any:
    """An empty reports table keyed by reportId."""
    return _create_table(dynamodb, REPORTS_TABLE, 'reportId')


@pytest.fixture
def s3_client(mocked_aws) -> Any:
    client = boto3.client(
        's3',
        region_name=REGION,
        config=Config(signature_version='s3v4'),
    )
    client.create_bucket(
        Bucket=BUCKET,
        CreateBucketConfiguration={'LocationConstraint': REGION},
    )
    return client


@pytest.fixture
def item_repository(items_table):
    from versa.db.repositories import ItemRepository

    return ItemRepository(items_table)


@pytest.fixture
def report_repository(reports_table):
    from versa.db.repositories import ReportRepository

    return ReportRepository(reports_table)


# --- Sample Data Factories ---


@pytest.fixture
def sample_report_body() -> dict:
    """A valid create-report request body."""
    return {
        'name': 'Broken street light',
        'contact': 'jane@example.com',
        'location': {'lat': 22.282667, 'lng': 114.158167},
        'imageKey': 'uploads/3f1c.jpeg',
    }


# --- API Event Fixtures ---


@pytest.fixture
def api_event() -> Callable[..., dict]:
    """Factory for API Gateway proxy events."""

    def _make(
        method: str = 'GET',
        path: str = '/items',
        path_params: Optional[dict] = None,
        query: Optional[dict] = None,
        body: Any = None,
    ) -> dict:
        if isinstance(body, (dict, list)):
            body = json.dumps(body)
        return {
            'httpMethod': method,
            'path': path,
            'pathParameters': path_params,
            'queryStringParameters': query,
            'multiValueQueryStringParameters': None,
            'headers': {'Content-Type': 'application/json'},
            'requestContext': {'requestId': str(uuid4())},
            'body': body,
            'isBase64Encoded': False,
        }

    return _make


def response_json(response: dict) -> Any:
    """Decode the JSON body of a handler response."""
    return json.loads(response['body'])
