import pytest
import boto3
from botocore.stub import Stubber
from PIL import Image

from textract_debug.textract import TextractAnalyzer


@pytest.fixture
def textract_client():
    return boto3.client(
        "textract",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def stubber(textract_client):
    with Stubber(textract_client) as stub:
        yield stub
        stub.assert_no_pending_responses()


@pytest.fixture
def analyzer(textract_client):
    return TextractAnalyzer(client=textract_client)


@pytest.fixture
def white_image(tmp_path):
    """100x100 white PNG on disk"""
    path = tmp_path / "page.png"
    Image.new("RGB", (100, 100), (255, 255, 255)).save(path, format="PNG")
    return path
