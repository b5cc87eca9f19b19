"""AWS Lambda handler for the calendar converter HTTP API."""
import json
import logging
import os
import time
from functools import lru_cache
from typing import Any, Dict, Optional

from fetcher.calendar_fetcher import CalendarFetcher
from processor.calendar_converter import DEFAULT_PRODID
from processor.conversion_service import ConversionService
from processor.errors import CalconvError
from processor.models import SubjectDictionary
from storage.subject_store import SubjectStore


STATUS_CODES = {
    'converter-not-found': 404,
    'fetch-error': 502,
}

ERROR_MESSAGES = {
    'converter-not-found': 'Unknown converter',
    'fetch-error': 'Failed to fetch calendar',
}


# Configure JSON logging
class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    RESERVED_ATTRS = frozenset(
        logging.LogRecord('', 0, '', 0, '', (), None).__dict__
    ) | {'message', 'asctime'}

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'message': record.getMessage(),
            'logger': record.name
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in self.RESERVED_ATTRS and key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def setup_logging(log_level: str = 'INFO') -> None:
    """
    Configure logging with JSON formatter.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    root_logger = logging.getLogger()

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root_logger.addHandler(handler)

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


@lru_cache(maxsize=None)
def load_subjects(path: str, bucket: Optional[str], key: str) -> SubjectDictionary:
    """Load the subject dictionary once per container."""
    return SubjectStore(path=path, bucket=bucket, key=key).load()


def _response(status_code: int, body: str, content_type: str) -> Dict[str, Any]:
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': content_type},
        'body': body
    }


def _error_response(status_code: int, message: str) -> Dict[str, Any]:
    return _response(
        status_code,
        json.dumps({'message': message}),
        'application/json'
    )


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Convert the calendar named in the query string.

    Expects an API Gateway proxy event for GET /conv?c=<converter>&url=<url>.

    Args:
        event: API Gateway proxy event
        context: Lambda context object

    Returns:
        API Gateway proxy response with the converted calendar
    """
    # Read configuration from environment variables
    log_level = os.environ.get('LOG_LEVEL', 'INFO')
    subjects_path = os.environ.get('SUBJECT_NAMES_PATH', SubjectStore.DEFAULT_PATH)
    subjects_bucket = os.environ.get('SUBJECT_NAMES_BUCKET') or None
    subjects_key = os.environ.get('SUBJECT_NAMES_KEY', 'subject_names.json')
    prodid = os.environ.get('PRODID', DEFAULT_PRODID)

    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    params = event.get('queryStringParameters') or {}
    converter_name = params.get('c')
    url = params.get('url')
    if not converter_name or not url:
        logger.warning("Request without converter or url parameter")
        return _error_response(400, 'Query parameters c and url are required')

    start_time = time.time()
    logger.info(
        "Conversion request received",
        extra={'converter': converter_name}
    )

    try:
        timeout_seconds = int(os.environ.get('TIMEOUT_SECONDS', '30'))
        max_retries = int(os.environ.get('MAX_RETRIES', '3'))
        subjects = load_subjects(subjects_path, subjects_bucket, subjects_key)
        fetcher = CalendarFetcher(timeout=timeout_seconds, max_retries=max_retries)
        service = ConversionService(fetcher, subjects, prodid=prodid)
        calendar_text = service.convert(converter_name, url)

    except CalconvError as e:
        status_code = STATUS_CODES.get(e.kind, 500)
        logger.error(
            f"Conversion failed: {e}",
            extra={
                'error_kind': e.kind,
                'error_type': type(e).__name__,
                'duration_seconds': round(time.time() - start_time, 2)
            },
            exc_info=status_code == 500
        )
        return _error_response(
            status_code,
            ERROR_MESSAGES.get(e.kind, 'Internal server error')
        )

    except Exception as e:
        logger.error(
            f"Lambda execution failed: {e}",
            extra={
                'error_type': type(e).__name__,
                'duration_seconds': round(time.time() - start_time, 2)
            },
            exc_info=True
        )
        return _error_response(500, 'Internal server error')

    logger.info(
        "Conversion request completed",
        extra={'duration_seconds': round(time.time() - start_time, 2)}
    )
    return _response(200, calendar_text, 'text/calendar; charset=utf-8')
