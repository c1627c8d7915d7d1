"""Translation session state and orchestration."""

from src.session.session import ErrorSink, SessionState, TranslationSession, log_error

__all__ = ["ErrorSink", "SessionState", "TranslationSession", "log_error"]
