"""Loading of the subject names configuration."""
import json
import logging
from typing import Optional

import boto3
from botocore.exceptions import ClientError

from processor.errors import SubjectConfigError
from processor.models import SubjectDictionary

logger = logging.getLogger(__name__)


class SubjectStore:
    """Reads the subject dictionary from S3 or a local JSON file."""

    DEFAULT_PATH = 'config/subject_names.json'

    def __init__(
        self,
        path: Optional[str] = None,
        bucket: Optional[str] = None,
        key: str = 'subject_names.json'
    ):
        """
        Initialize the subject store.

        Args:
            path: Local JSON file, used when no bucket is given
            bucket: S3 bucket holding the subject names object
            key: S3 object key of the subject names object
        """
        self.path = path or self.DEFAULT_PATH
        self.bucket = bucket
        self.key = key

    def load(self) -> SubjectDictionary:
        """
        Load the subject dictionary.

        Returns:
            SubjectDictionary with entries in file order

        Raises:
            SubjectConfigError: If the configuration is missing or malformed
        """
        if self.bucket:
            source = f"s3://{self.bucket}/{self.key}"
            content = self._read_s3()
        else:
            source = self.path
            content = self._read_file()

        subjects = self.parse(content)
        logger.info(f"Loaded {len(subjects)} subject names from {source}")
        return subjects

    @staticmethod
    def parse(content: str) -> SubjectDictionary:
        """
        Parse a JSON object of group fragments to subject names.

        Key order is kept, as it decides which entry wins when several match.
        """
        try:
            pairs = json.loads(content, object_pairs_hook=list)
        except json.JSONDecodeError as e:
            raise SubjectConfigError(f"Subject names are not valid JSON: {e}") from e

        if not isinstance(pairs, list) or not all(isinstance(p, tuple) for p in pairs):
            raise SubjectConfigError("Subject names must be a JSON object")

        for key, value in pairs:
            if not isinstance(value, str):
                raise SubjectConfigError(f"Subject name for {key!r} must be a string")

        return SubjectDictionary.from_pairs(pairs)

    def _read_s3(self) -> str:
        try:
            s3 = boto3.client('s3')
            response = s3.get_object(Bucket=self.bucket, Key=self.key)
            return response['Body'].read().decode('utf-8')
        except ClientError as e:
            logger.error(f"Error reading subject names from S3: {e}")
            raise SubjectConfigError(
                f"Failed to read s3://{self.bucket}/{self.key}: {e}"
            ) from e

    def _read_file(self) -> str:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                return f.read()
        except OSError as e:
            raise SubjectConfigError(f"Failed to read {self.path}: {e}") from e
