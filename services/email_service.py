"""
SES service for email notifications.
"""
from typing import List, Optional
from config import Config
from logger_config import get_logger
from services.aws_clients import get_aws_clients

logger = get_logger(__name__)


class EmailService:
    """Service for sending emails through SES."""

    def __init__(self, ses_client, sender: Optional[str]) -> None:
        """
        Initialize email service.

        Args:
            ses_client: boto3 SES client
            sender: Verified sender address
        """
        self.client = ses_client
        self.sender = sender

    @classmethod
    def from_config(cls, config: Config) -> "EmailService":
        """
        Build the service from the shared SES client and EMAIL_SENDER.

        Raises:
            EmailNotificationsDisabledError: If EMAIL_NOTIFICATIONS is off
        """
        return cls(get_aws_clients().ses, config.email_sender)

    def send_email(
        self,
        to: List[str],
        subject: str,
        body_text: str,
        body_html: Optional[str] = None
    ) -> str:
        """
        Send an email.

        Args:
            to: Recipient addresses
            subject: Subject line
            body_text: Plain-text body
            body_html: Optional HTML body

        Returns:
            The SES message id

        Raises:
            ValueError: If no sender or recipients are given
            ClientError: If SES rejects the message
        """
        if not self.sender:
            raise ValueError('EMAIL_SENDER is required to send email')
        if not to:
            raise ValueError('At least one recipient is required')

        body = {'Text': {'Data': body_text, 'Charset': 'UTF-8'}}
        if body_html is not None:
            body['Html'] = {'Data': body_html, 'Charset': 'UTF-8'}

        response = self.client.send_email(
            Source=self.sender,
            Destination={'ToAddresses': list(to)},
            Message={
                'Subject': {'Data': subject, 'Charset': 'UTF-8'},
                'Body': body,
            },
        )
        message_id = response['MessageId']
        logger.info(f'Sent email "{subject}" to {len(to)} recipient(s): {message_id}')
        return message_id
