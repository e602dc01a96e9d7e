"""
S3 service for document storage.
"""
from typing import Dict, Optional
from botocore.exceptions import ClientError
from config import Config
from logger_config import get_logger
from services.aws_clients import get_aws_clients

logger = get_logger(__name__)


class S3Service:
    """Service for S3 document operations."""

    def __init__(self, bucket_name: str, client=None):
        """
        Initialize S3 service.

        Args:
            bucket_name: Name of the S3 bucket
            client: Optional boto3 S3 client (the region-bound shared client if omitted)
        """
        self.bucket_name = bucket_name
        self._s3_client = client

    @classmethod
    def from_config(cls, config: Config) -> "S3Service":
        """
        Build the service for the DOCUMENTS_BUCKET setting.

        Raises:
            ValueError: If DOCUMENTS_BUCKET is not configured
        """
        if not config.documents_bucket:
            raise ValueError('DOCUMENTS_BUCKET is required for document storage')
        return cls(config.documents_bucket, client=get_aws_clients().s3)

    @property
    def s3_client(self):
        """Lazy lookup of the shared S3 client."""
        if self._s3_client is None:
            self._s3_client = get_aws_clients().s3
        return self._s3_client

    def object_exists(self, key: str) -> bool:
        """
        Check if an object exists in the bucket.

        Args:
            key: S3 object key

        Returns:
            True if object exists, False otherwise
        """
        try:
            self.s3_client.head_object(Bucket=self.bucket_name, Key=key)
            return True
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', '')
            if error_code in ('404', 'NoSuchKey', 'NotFound'):
                return False
            # Fail-open for permission or throttling errors
            logger.warning(f'S3 head_object failed for key {key}: {str(e)}')
            return False

    def put_document(
        self,
        key: str,
        body: bytes | str,
        content_type: str = 'application/octet-stream',
        metadata: Optional[Dict[str, str]] = None
    ) -> None:
        """
        Store a document in the bucket.

        Args:
            key: S3 object key
            body: Document content (str is stored UTF-8 encoded)
            content_type: MIME type recorded on the object
            metadata: Optional user metadata

        Raises:
            ClientError: If S3 operation fails
        """
        put_kwargs = {
            'Bucket': self.bucket_name,
            'Key': key,
            'Body': body.encode('UTF-8') if isinstance(body, str) else body,
            'ContentType': content_type,
        }
        if metadata:
            put_kwargs['Metadata'] = metadata

        self.s3_client.put_object(**put_kwargs)
        logger.info(f'Successfully put document to s3://{self.bucket_name}/{key}')

    def get_document(self, key: str) -> bytes:
        """
        Read a document from the bucket.

        Raises:
            ClientError: If the object is missing or S3 operation fails
        """
        response = self.s3_client.get_object(Bucket=self.bucket_name, Key=key)
        return response['Body'].read()
