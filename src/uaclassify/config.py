"""Classifier configuration with sensible defaults."""

from dataclasses import dataclass

# WSGI/CGI key holding the request's User-Agent header
USER_AGENT_ENVIRON_KEY = "HTTP_USER_AGENT"


@dataclass
class ClassifierConfig:
    """Configuration for the User-Agent classifier.

    Only governs call-time defaults and diagnostics; the pattern tables
    themselves live in ``uaclassify.definition``.
    """

    # Run the filter chain after structural extraction. Turning this off
    # trades accuracy for speed on high-volume call sites.
    strict: bool = True

    # Key looked up by UserAgent.from_environ()
    environ_key: str = USER_AGENT_ENVIRON_KEY

    # Log a one-line summary of every classification at DEBUG
    log_matches: bool = False
