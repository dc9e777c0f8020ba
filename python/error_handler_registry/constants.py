from enum import Enum


# Event categories a handler can be registered for
class Category(str, Enum):
    ERROR = "error"
    EXCEPTION = "exception"
    SHUTDOWN = "shutdown"


# Result of an error handler; only NOT_HANDLED passes the event to older handlers
class ErrorResult(Enum):
    HANDLED = "handled"
    NOT_HANDLED = "not_handled"


ENV_VAR_PREFIX = "ERROR_HANDLER_REGISTRY_"
