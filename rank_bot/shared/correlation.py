"""Request correlation and logging for Functions Framework handlers."""
import time
from functools import wraps
from typing import Callable

from flask import request as flask_request

from rank_bot.shared.observability import get_correlation_id


def with_correlation(logger):
    """Decorator to handle correlation ID and request logging.

    Handlers return ``(body, status)`` or ``(body, status, headers)`` tuples;
    the correlation ID is added to the response headers.

    Usage:
        @with_correlation(logger)
        def my_handler(request: Request):
            # correlation_id is available via request.correlation_id
            ...
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            req = flask_request
            correlation_id = get_correlation_id(req)
            req.correlation_id = correlation_id
            start_time = time.time()

            logger.info(
                "Request started",
                correlation_id=correlation_id,
                method=req.method,
                path=req.path,
                user_agent=req.headers.get('User-Agent', ''),
                remote_addr=req.headers.get('X-Forwarded-For', '').split(',')[0]
            )

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration_ms = (time.time() - start_time) * 1000
                logger.error(
                    "Request failed",
                    error=e,
                    correlation_id=correlation_id,
                    method=req.method,
                    path=req.path,
                    duration_ms=round(duration_ms, 2)
                )
                raise

            if isinstance(result, tuple):
                body = result[0]
                status_code = result[1] if len(result) > 1 else 200
                headers = dict(result[2]) if len(result) > 2 else {}
            else:
                body, status_code, headers = result, 200, {}
            headers['X-Correlation-ID'] = correlation_id

            duration_ms = (time.time() - start_time) * 1000
            logger.info(
                "Request completed",
                correlation_id=correlation_id,
                method=req.method,
                path=req.path,
                status_code=status_code,
                duration_ms=round(duration_ms, 2)
            )

            return body, status_code, headers

        return wrapper
    return decorator
