"""
CloudWatch service for custom metrics.
"""
from typing import Dict, Optional
from botocore.exceptions import BotoCoreError, ClientError
from device_detector import DeviceInfo
from logger_config import get_logger

logger = get_logger(__name__)

DEVICE_METRIC_NAME = 'DeviceClassified'


class MetricsService:
    """Service for publishing custom CloudWatch metrics."""

    def __init__(self, cloudwatch_client, namespace: str) -> None:
        self.client = cloudwatch_client
        self.namespace = namespace

    def put_count(
        self,
        name: str,
        dimensions: Optional[Dict[str, str]] = None,
        value: float = 1
    ) -> bool:
        """
        Publish a Count metric.

        Publishing failures are logged, never raised.

        Returns:
            True if the metric was accepted, False otherwise
        """
        datum = {'MetricName': name, 'Value': value, 'Unit': 'Count'}
        if dimensions:
            datum['Dimensions'] = [
                {'Name': dim_name, 'Value': dim_value}
                for dim_name, dim_value in dimensions.items()
            ]

        try:
            self.client.put_metric_data(Namespace=self.namespace, MetricData=[datum])
            return True
        except (ClientError, BotoCoreError) as e:
            logger.warning(f'Failed to publish metric {self.namespace}/{name}: {str(e)}')
            return False

    def record_device(self, device_info: DeviceInfo) -> bool:
        """Count one classified request by device type and platform."""
        return self.put_count(
            DEVICE_METRIC_NAME,
            dimensions={
                'DeviceType': device_info.device_type,
                'Platform': device_info.platform,
            },
        )
