from .error_reporter import LoggingErrorReporter

__all__ = ["LoggingErrorReporter"]
