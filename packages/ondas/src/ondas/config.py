"""Configuration for ondas."""

from dataclasses import dataclass
from importlib.metadata import version

# Get version from package metadata for User-Agent
_VERSION = version("ondas")

DEFAULT_MIRRORS: tuple[str, ...] = (
    "https://de1.api.radio-browser.info",
    "https://nl1.api.radio-browser.info",
    "https://at1.api.radio-browser.info",
    "https://all.api.radio-browser.info",
)

DEFAULT_USER_AGENT = f"ondas/{_VERSION} (+signage radio)"


@dataclass(frozen=True)
class SearchConfig:
    """Station search configuration.

    Attributes:
        mirrors: Radio directory base URLs, tried first to last.
        timeout: Per-request timeout in seconds.
        user_agent: User-Agent header sent to every mirror.
        default_limit: Result count used when the caller gives none.
        limit_min: Lower bound for the requested result count.
        limit_max: Upper bound for the requested result count.
        max_errors: Maximum number of diagnostics kept in a result.
    """

    mirrors: tuple[str, ...] = DEFAULT_MIRRORS
    timeout: float = 9.0
    user_agent: str = DEFAULT_USER_AGENT
    default_limit: int = 80
    limit_min: int = 10
    limit_max: int = 120
    max_errors: int = 8
