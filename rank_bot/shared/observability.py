"""Structured JSON logging and OpenTelemetry tracing for the rank bot."""
import os
import json
import logging
import traceback
import uuid
from typing import Optional, Dict, Any
from datetime import datetime, timezone
from functools import wraps

from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.resources import Resource
from opentelemetry.exporter.cloud_trace import CloudTraceSpanExporter
from opentelemetry.instrumentation.requests import RequestsInstrumentor


class StructuredLogger:
    """Structured logger emitting one JSON object per line."""

    def __init__(self, service_name: str):
        self.service_name = service_name
        self.logger = self._setup_logger()

    def _setup_logger(self):
        logger = logging.getLogger(self.service_name)
        logger.setLevel(os.getenv('LOG_LEVEL', 'INFO').upper())
        logger.handlers = []
        logger.propagate = False

        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)

        return logger

    def _get_trace_context(self) -> Dict[str, str]:
        span = trace.get_current_span()
        if span and span.is_recording():
            span_context = span.get_span_context()
            return {
                "trace_id": format(span_context.trace_id, '032x'),
                "span_id": format(span_context.span_id, '016x')
            }
        return {}

    def _build_log_entry(self, message: str, level: str, correlation_id: Optional[str] = None, **extra) -> Dict[str, Any]:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            "severity": level,
            "service": self.service_name,
            "message": message,
        }

        entry.update(self._get_trace_context())

        if correlation_id:
            entry["correlation_id"] = correlation_id

        entry.update(extra)
        return entry

    def info(self, message: str, **kwargs):
        entry = self._build_log_entry(message, "INFO", **kwargs)
        self.logger.info(json.dumps(entry, default=str))

    def warning(self, message: str, **kwargs):
        entry = self._build_log_entry(message, "WARNING", **kwargs)
        self.logger.warning(json.dumps(entry, default=str))

    def error(self, message: str, error: Optional[Exception] = None, **kwargs):
        """Log ERROR level, attaching exception details when given."""
        if error:
            kwargs["error"] = {
                "type": type(error).__name__,
                "message": str(error),
                "stacktrace": ''.join(traceback.format_exception(type(error), error, error.__traceback__))
            }
        entry = self._build_log_entry(message, "ERROR", **kwargs)
        self.logger.error(json.dumps(entry, default=str))


class JsonFormatter(logging.Formatter):
    """Pass pre-rendered JSON through, wrap anything else."""

    def format(self, record):
        if isinstance(record.msg, str) and record.msg.startswith('{'):
            return record.msg

        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            "severity": record.levelname,
            "message": record.getMessage(),
        }
        return json.dumps(log_obj)


class TracingManager:
    """OpenTelemetry tracing manager."""

    def __init__(self, service_name: str, environment: str = "production"):
        self.service_name = service_name
        self.environment = environment
        self.tracer = self._setup_tracer()

    def _setup_tracer(self):
        """Setup the tracer provider, exporting to Cloud Trace outside local dev."""
        resource = Resource.create({
            "service.name": self.service_name,
            "service.namespace": "valorant-rank-bot",
            "deployment.environment": self.environment,
        })

        tracer_provider = TracerProvider(resource=resource)

        if not os.getenv("LOCAL_DEV"):
            try:
                cloud_trace_exporter = CloudTraceSpanExporter(project_id=os.getenv('GCP_PROJECT_ID'))
                tracer_provider.add_span_processor(BatchSpanProcessor(cloud_trace_exporter))
            except Exception as e:
                logging.getLogger(self.service_name).warning(
                    "Could not setup Cloud Trace exporter: %s", e
                )

        trace.set_tracer_provider(tracer_provider)
        return trace.get_tracer(self.service_name)

    def instrument_requests(self):
        """Auto-instrument the requests library."""
        try:
            RequestsInstrumentor().instrument()
        except Exception as e:
            logging.getLogger(self.service_name).warning(
                "Could not instrument requests: %s", e
            )


# The global tracer provider can only be set once per process.
_tracing: Optional[TracingManager] = None


def init_observability(service_name: str, environment: str = None):
    """Initialize logging and tracing for a service.

    Args:
        service_name: Name of the service
        environment: Environment name (defaults to $ENVIRONMENT or production)

    Returns:
        tuple: (logger, tracing_manager)
    """
    global _tracing

    if environment is None:
        environment = os.getenv('ENVIRONMENT', 'production')

    logger = StructuredLogger(service_name)

    if _tracing is None:
        _tracing = TracingManager(os.getenv('K_SERVICE', 'rank-bot'), environment)
        _tracing.instrument_requests()
        logger.info("Observability initialized", environment=environment)

    return logger, _tracing


def traced_function(operation_name: Optional[str] = None):
    """Decorator to trace a function with OpenTelemetry.

    Usage:
        @traced_function("my_operation")
        def my_function():
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            tracer = trace.get_tracer(__name__)
            op_name = operation_name or func.__name__

            with tracer.start_as_current_span(op_name) as span:
                span.set_attribute("function.name", func.__name__)
                span.set_attribute("function.module", func.__module__)

                try:
                    result = func(*args, **kwargs)
                    span.set_attribute("function.status", "success")
                    return result
                except Exception as e:
                    span.set_attribute("function.status", "error")
                    span.set_attribute("error.type", type(e).__name__)
                    span.set_attribute("error.message", str(e))
                    span.record_exception(e)
                    raise

        return wrapper
    return decorator


def get_correlation_id(request=None) -> str:
    """Get or generate correlation ID from request.

    Checks for correlation ID in:
    1. X-Correlation-ID header
    2. X-Request-ID header
    3. Generates new UUID if not found
    """
    if request is not None:
        return (
            request.headers.get('X-Correlation-ID') or
            request.headers.get('X-Request-ID') or
            str(uuid.uuid4())
        )
    return str(uuid.uuid4())
