"""
FileNet upload service.

Documents reach FileNet through the state ESB as SOAP requests. Envelopes
are marshalled by the caller; this service owns the transport: endpoint,
HTTP Basic credentials, timeouts and TLS trust.
"""
import requests
from requests.adapters import HTTPAdapter
from requests.auth import HTTPBasicAuth
from typing import Optional
from config import Config
from logger_config import get_logger
from utils.exceptions import FileNetUploadError

logger = get_logger(__name__)

SOAP_CONTENT_TYPE = 'text/xml; charset=utf-8'


class FileNetUploadService:
    """Service for posting SOAP upload requests to FileNet through the ESB."""

    def __init__(
        self,
        upload_url: str,
        username: str,
        password: str,
        timeout_seconds: int = 60,
        ca_bundle: Optional[str] = None,
        pool_size: int = 10
    ) -> None:
        """
        Initialize FileNet upload service.

        Args:
            upload_url: ESB endpoint for document uploads
            username: ESB user
            password: ESB password
            timeout_seconds: Connect and read timeout
            ca_bundle: Optional CA bundle path used to verify the ESB certificate
            pool_size: Maximum pooled connections to the ESB host
        """
        self.upload_url = upload_url
        self.timeout = (timeout_seconds, timeout_seconds)

        session = requests.Session()
        adapter = HTTPAdapter(pool_connections=1, pool_maxsize=pool_size)
        session.mount('https://', adapter)
        session.mount('http://', adapter)
        session.auth = HTTPBasicAuth(username, password)
        if ca_bundle:
            session.verify = ca_bundle
        self.session = session

    @classmethod
    def from_config(cls, config: Config) -> "FileNetUploadService":
        """
        Build the service from FILENET_* settings.

        Raises:
            ValueError: If the upload URL or credentials are not configured
        """
        missing = [
            name for name, value in (
                ('FILENET_UPLOAD_URL', config.filenet_upload_url),
                ('FILENET_USERNAME', config.filenet_username),
                ('FILENET_PASSWORD', config.filenet_password),
            ) if not value
        ]
        if missing:
            raise ValueError(
                f'FileNet upload is not configured, missing: {", ".join(missing)}'
            )

        return cls(
            upload_url=config.filenet_upload_url,
            username=config.filenet_username,
            password=config.filenet_password,
            timeout_seconds=config.filenet_timeout_seconds,
            ca_bundle=config.filenet_ca_bundle,
        )

    def upload(self, envelope: bytes | str, soap_action: Optional[str] = None) -> str:
        """
        Post a marshalled SOAP envelope to the ESB.

        Args:
            envelope: Complete SOAP envelope
            soap_action: Optional SOAPAction header value

        Returns:
            The response body

        Raises:
            FileNetUploadError: If the request fails or returns a non-2xx status
        """
        if isinstance(envelope, str):
            envelope = envelope.encode('utf-8')

        headers = {'Content-Type': SOAP_CONTENT_TYPE}
        if soap_action is not None:
            headers['SOAPAction'] = f'"{soap_action}"'

        try:
            response = self.session.post(
                self.upload_url,
                data=envelope,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f'FileNet upload to {self.upload_url} failed: {str(e)}')
            raise FileNetUploadError(f'FileNet upload failed: {str(e)}') from e

        if not response.ok:
            logger.error(
                f'FileNet upload to {self.upload_url} returned {response.status_code}'
            )
            raise FileNetUploadError(
                f'FileNet upload returned HTTP {response.status_code}',
                status_code=response.status_code,
                response_text=response.text,
            )

        logger.info(f'Uploaded document to FileNet ({len(envelope)} bytes)')
        return response.text
