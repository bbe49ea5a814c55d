"""
Logging decorators for passgen infrastructure operations.
Provides structured, context-rich, and secure logging around adapter methods.
"""
import logging
import functools
import time
import uuid
import inspect
import traceback
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Dict, Any, Optional, Callable, Set
from datetime import datetime, timezone

from passgen.infrastructure.config.infrastructure_settings import infra_settings
from .log_config import get_logger


# Default sensitive fields blacklist
DEFAULT_SENSITIVE_FIELDS: Set[str] = {
    'password', 'plaintext', 'verification_hash', 'secret', 'token', 'key'
}


def op_config(
    level: str = "INFO",
    args: bool = True,
    result: bool = True,
    perform: bool = True,
    blacklist: Optional[Set[str]] = None
) -> Dict[str, Any]:
    """
    Create operation config with flexible overrides for logging decorators.

    Args:
        level: Logging level (default INFO)
        args: Whether to log function arguments
        result: Whether to log operation result
        perform: Whether to log timing metrics
        blacklist: Additional sensitive fields to mask

    Returns:
        dict: Configuration for the decorator
    """
    return {
        "level": level,
        "include_args": args,
        "include_result": result,
        "include_performance": perform,
        "sensitive_fields": blacklist or set()
    }


def _sanitize_sensitive_data(data: Any, blacklist: Set[str]) -> Any:
    """
    Recursively sanitize sensitive data from logs.
    Replaces values of keys matching sensitive fields with [REDACTED].

    Args:
        data: Data to sanitize (dict, list, dataclass, etc.)
        blacklist: Set of sensitive field names

    Returns:
        Sanitized data with sensitive fields masked
    """
    if is_dataclass(data) and not isinstance(data, type):
        return _sanitize_sensitive_data(asdict(data), blacklist)
    if isinstance(data, dict):
        sanitized = {}
        for key, value in data.items():
            if any(sensitive in str(key).lower() for sensitive in blacklist):
                sanitized[key] = "[REDACTED]"
            else:
                sanitized[key] = _sanitize_sensitive_data(value, blacklist)
        return sanitized
    if isinstance(data, (list, tuple, set)):
        return [_sanitize_sensitive_data(item, blacklist) for item in data]
    if isinstance(data, bytes):
        return f"[BINARY_DATA_{len(data)}_BYTES]"
    if isinstance(data, Enum):
        return data.value
    if isinstance(data, (str, int, float, bool)) or data is None:
        return data
    return type(data).__name__


def _build_operation_context(
    operation: str,
    method_name: str,
    component_name: str
) -> Dict[str, Any]:
    """
    Build base context for operation logging.

    Args:
        operation: Operation name
        method_name: Name of the method/function
        component_name: Name of the component/class

    Returns:
        dict: Context for logging
    """
    return {
        "component": component_name,
        "operation": operation,
        "method": method_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": infra_settings.environment,
        "service": infra_settings.service_name,
        "trace_id": f"trace_{uuid.uuid4().hex[:12]}",
        "operation_id": f"op_{uuid.uuid4().hex[:8]}"
    }


class _OperationLogger:
    """Shared start/success/failure bookkeeping for sync and async wrappers."""

    def __init__(self, func: Callable, instance: Any, operation: str, level: str,
                 include_args: bool, include_result: bool, include_performance: bool,
                 blacklist: Set[str], args: tuple, kwargs: dict):
        component_name = f"{func.__module__}.{instance.__class__.__name__}"
        self.logger = get_logger(component_name)
        self.operation = operation
        self.level = level
        self.log_level = getattr(logging, level.upper(), logging.INFO)
        self.include_result = include_result
        self.include_performance = include_performance
        self.blacklist = blacklist
        self.context = _build_operation_context(operation, func.__name__, component_name)

        if include_args:
            bound_args = inspect.signature(func).bind(instance, *args, **kwargs)
            bound_args.apply_defaults()
            args_dict = {k: v for k, v in bound_args.arguments.items() if k != 'self'}
            self.context["arguments"] = _sanitize_sensitive_data(args_dict, blacklist)

        self.start_time = time.time()

    def started(self) -> None:
        if self.include_performance:
            self.context["status"] = "started"
        self.logger.log(self.log_level, f"Starting {self.operation}", extra={"extra_fields": self.context})

    def completed(self, result: Any) -> None:
        duration_ms = (time.time() - self.start_time) * 1000
        success_context = self.context.copy()
        success_context["status"] = "completed"

        if self.include_performance:
            success_context["duration_ms"] = round(duration_ms, 2)
            if duration_ms > 2000:
                success_context["slow_operation"] = True

        if self.include_result and result is not None:
            success_context["result"] = _sanitize_sensitive_data(result, self.blacklist)
            success_context["result_type"] = type(result).__name__
            if hasattr(result, '__len__') and not isinstance(result, (str, bytes)):
                success_context["result_size"] = len(result)

        self.logger.log(self.log_level, f"Completed {self.operation}", extra={"extra_fields": success_context})

    def failed(self, error: Exception) -> None:
        duration_ms = (time.time() - self.start_time) * 1000
        error_context = self.context.copy()
        error_context.update({
            "status": "failed",
            "error_type": type(error).__name__,
            "error_message": str(error),
            "duration_ms": round(duration_ms, 2)
        })

        if infra_settings.environment == "development":
            error_context["stack_trace"] = traceback.format_exc()

        error_level = logging.CRITICAL if self.level.upper() == "CRITICAL" else logging.ERROR
        self.logger.log(error_level, f"Failed {self.operation}", extra={"extra_fields": error_context})


def log_infrastructure_operation(
    operation: str,
    level: str = "INFO",
    include_args: bool = False,
    include_result: bool = True,
    include_performance: bool = True,
    sensitive_fields: Optional[Set[str]] = None
) -> Callable:
    """
    Decorator for infrastructure operations (sync or async methods).
    Provides structured, context-rich, and secure logging for method execution.

    Args:
        operation: Business operation name
        level: Logging level
        include_args: Whether to log function arguments
        include_result: Whether to log operation result
        include_performance: Whether to log timing metrics
        sensitive_fields: Additional sensitive fields to blacklist

    Returns:
        Decorated function with automatic structured logging
    """
    blacklist = DEFAULT_SENSITIVE_FIELDS.copy()
    if sensitive_fields:
        blacklist.update(sensitive_fields)

    def decorator(func: Callable) -> Callable:
        def _start(self, args, kwargs) -> _OperationLogger:
            op_logger = _OperationLogger(
                func, self, operation, level, include_args, include_result,
                include_performance, blacklist, args, kwargs
            )
            op_logger.started()
            return op_logger

        if inspect.iscoroutinefunction(func):
            @functools.wraps(func)
            async def async_wrapper(self, *args, **kwargs):
                op_logger = _start(self, args, kwargs)
                try:
                    result = await func(self, *args, **kwargs)
                except Exception as e:
                    op_logger.failed(e)
                    raise
                op_logger.completed(result)
                return result

            return async_wrapper

        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            op_logger = _start(self, args, kwargs)
            try:
                result = func(self, *args, **kwargs)
            except Exception as e:
                op_logger.failed(e)
                raise
            op_logger.completed(result)
            return result

        return wrapper
    return decorator
