"""
Textract Document Analyzer
Submits local or S3-hosted documents to AWS Textract for form analysis
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import asyncio
import logging

import boto3

logger = logging.getLogger(__name__)

DEFAULT_FEATURE_TYPES = ["FORMS"]


@dataclass
class DocumentReference:
    """Either raw document bytes or an S3 object location"""
    content: Optional[bytes] = None
    bucket: Optional[str] = None
    key: Optional[str] = None

    def __post_init__(self):
        has_bytes = self.content is not None
        has_s3 = self.bucket is not None or self.key is not None

        if has_bytes == has_s3:
            raise ValueError("DocumentReference needs exactly one of content or bucket/key")
        if has_s3 and (self.bucket is None or self.key is None):
            raise ValueError("S3 document reference needs both bucket and key")

    @property
    def is_remote(self) -> bool:
        return self.content is None

    def to_request(self) -> Dict[str, Any]:
        """Render the Textract `Document` request shape"""
        if self.is_remote:
            return {"S3Object": {"Bucket": self.bucket, "Name": self.key}}
        return {"Bytes": self.content}


class TextractAnalyzer:
    """Analyze documents with AWS Textract AnalyzeDocument"""

    def __init__(
        self,
        client=None,
        region_name: str = "us-east-1",
        profile_name: Optional[str] = None,
        feature_types: Optional[List[str]] = None
    ):
        """
        Initialize Textract analyzer

        Args:
            client: Existing boto3 Textract client (optional)
            region_name: AWS region used when building a client
            profile_name: AWS credentials profile (optional)
            feature_types: AnalyzeDocument feature types (default: FORMS)
        """
        self.feature_types = list(feature_types or DEFAULT_FEATURE_TYPES)

        if client is None:
            session = boto3.Session(profile_name=profile_name, region_name=region_name)
            client = session.client("textract")
            logger.info(f"Textract client initialized for region: {region_name}")

        self.client = client

    async def analyze(self, document: DocumentReference) -> Dict[str, Any]:
        """
        Run AnalyzeDocument for a document reference

        The blocking boto3 call runs on a worker thread. The raw response is
        returned unchanged and service errors propagate unwrapped.
        """
        source = f"s3://{document.bucket}/{document.key}" if document.is_remote else "bytes"
        logger.info(f"Submitting {source} to Textract ({', '.join(self.feature_types)})")

        try:
            response = await asyncio.to_thread(
                self.client.analyze_document,
                Document=document.to_request(),
                FeatureTypes=self.feature_types
            )
        except Exception as e:
            logger.error(f"Textract analysis failed: {e}")
            raise

        logger.info(f"Textract returned {len(response.get('Blocks', []))} blocks")
        return response

    async def analyze_local_file(self, input_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Analyze a document at a local file path

        Args:
            input_path: Path to input file

        Returns:
            Raw AnalyzeDocument response
        """
        content = await asyncio.to_thread(Path(input_path).read_bytes)
        logger.debug(f"Read {len(content)} bytes from {input_path}")

        return await self.analyze(DocumentReference(content=content))

    async def analyze_remote_file(self, bucket: str, key: str) -> Dict[str, Any]:
        """
        Analyze a document hosted on S3

        Args:
            bucket: S3 bucket name
            key: Object key within the bucket

        Returns:
            Raw AnalyzeDocument response
        """
        return await self.analyze(DocumentReference(bucket=bucket, key=key))
