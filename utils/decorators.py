"""
Handler decorators for error handling, logging, and response formatting.
"""
import functools
import uuid
import traceback
from typing import Callable, Any, Dict
from logger_config import get_logger
from utils.exceptions import ValidationError

logger = get_logger(__name__)


def _error_response(
    error_type: str,
    message: str,
    correlation_id: str,
    handler_name: str
) -> Dict[str, Any]:
    return {
        "error": {
            "type": error_type,
            "message": message,
            "correlation_id": correlation_id
        },
        "metadata": {
            "correlation_id": correlation_id,
            "handler": handler_name
        }
    }


def lambda_handler(
    func: Callable[[Any, Any], Any]
) -> Callable[[Any, Any], Dict[str, Any]]:
    """
    Decorator for directly invoked Lambda handler functions.

    Provides:
    - Request correlation IDs for logging
    - Dict responses with a metadata block
    - Structured error responses instead of raised exceptions

    Args:
        func: The handler function to decorate

    Returns:
        Decorated handler function
    """
    @functools.wraps(func)
    def wrapper(event: Any, context: Any) -> Dict[str, Any]:
        correlation_id = str(uuid.uuid4())
        handler_name = func.__name__

        logger.info(
            f"Handler {handler_name} invoked",
            extra={
                "correlation_id": correlation_id,
                "handler": handler_name,
                "request_id": getattr(context, "aws_request_id", None) if context else None
            }
        )

        try:
            result = func(event, context)
        except (ValidationError, ValueError) as e:
            logger.warning(
                f"Handler {handler_name} validation error: {str(e)}",
                extra={"correlation_id": correlation_id}
            )
            return _error_response(
                "ValidationError", str(e), correlation_id, handler_name
            )
        except Exception as e:
            logger.error(
                f"Handler {handler_name} failed: {str(e)}",
                extra={
                    "correlation_id": correlation_id,
                    "traceback": traceback.format_exc()
                },
                exc_info=True
            )
            return _error_response(
                type(e).__name__, str(e), correlation_id, handler_name
            )

        if not isinstance(result, dict):
            logger.warning(
                f"Handler {handler_name} returned non-dict result, wrapping",
                extra={"correlation_id": correlation_id}
            )
            if isinstance(result, (list, str)):
                result = {"result": result}
            else:
                result = {"data": result}

        result.setdefault("metadata", {})["correlation_id"] = correlation_id

        logger.info(
            f"Handler {handler_name} completed successfully",
            extra={"correlation_id": correlation_id}
        )
        return result

    return wrapper
