"""
SciClope Web Installer

Decides which installer page to show for a request, renders it, and tracks
which pages have been filled across requests.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Callable, List, NamedTuple, Optional
from urllib.parse import urlencode

from sciclope.install.fingerprint import fingerprint
from sciclope.install.output import InstallerOutput
from sciclope.install.pages import DEFAULT_PAGES, Signal
from sciclope.install.registry import PageRegistry
from sciclope.logging_config import get_logger
from sciclope.startup import SiteContext

logger = get_logger("install")

# Session staleness threshold in hours
SESSION_STALE_HOURS = 24


@dataclass
class WizardState:
    """Persistent state for one installer run."""
    started_at: str = ""
    filled_pages: List[int] = field(default_factory=list)
    completed: bool = False

    @classmethod
    def new(cls) -> "WizardState":
        return cls(started_at=datetime.now().isoformat())

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "WizardState":
        # Drop anything that is not a page index
        pages = sorted({
            p for p in data.get("filled_pages", [])
            if isinstance(p, int) and not isinstance(p, bool) and p >= 0
        })
        return cls(
            started_at=data.get("started_at") or "",
            filled_pages=pages,
            completed=bool(data.get("completed", False)),
        )

    def copy(self) -> "WizardState":
        return WizardState(
            started_at=self.started_at,
            filled_pages=list(self.filled_pages),
            completed=self.completed,
        )

    def first_remaining(self) -> int:
        """Highest page index the user may visit."""
        if not self.filled_pages:
            return 0
        return max(self.filled_pages) + 1

    def mark_filled(self, index: int):
        if index not in self.filled_pages:
            self.filled_pages.append(index)
            self.filled_pages.sort()

    def get_age_hours(self) -> float:
        """Get session age in hours."""
        if not self.started_at:
            return 0
        try:
            started = datetime.fromisoformat(self.started_at)
            delta = datetime.now() - started
            return delta.total_seconds() / 3600
        except (ValueError, TypeError):
            return 0

    def is_stale(self, threshold_hours: float = SESSION_STALE_HOURS) -> bool:
        """Check if session is stale (older than threshold)."""
        return self.get_age_hours() > threshold_hours


class AdvanceResult(NamedTuple):
    """Outcome of one installer request."""
    output: str
    state: WizardState
    page_name: str
    page_index: int
    signal: Signal


class WebInstaller:
    """Runs the installer page sequence for a single request."""

    def __init__(
        self,
        context: SiteContext,
        request: Any = None,
        registry: Optional[PageRegistry] = None,
        output: Optional[InstallerOutput] = None,
        url_for_page: Optional[Callable[[str], str]] = None
    ):
        self.context = context
        self.request = request
        self.registry = registry or PageRegistry(DEFAULT_PAGES)
        self.output = output or InstallerOutput(title=f"{context.site_name} Installer")
        self._url_for_page = url_for_page

    def get_fingerprint(self) -> str:
        """Get the fingerprint identifying this installation."""
        return fingerprint(str(self.context.install_path), self.context.version)

    def page_url(self, name: str) -> str:
        """Get the URL that requests the named page."""
        if self._url_for_page:
            return self._url_for_page(name)
        return "?" + urlencode({"p": name})

    def select_page(self, state: WizardState, requested: Optional[str]) -> int:
        """Pick the page index to show. Never ahead of the user's progress."""
        first_remaining = min(state.first_remaining(), self.registry.last_index)

        index = self.registry.index_of(requested)
        if index is None:
            if requested:
                logger.debug("Unknown installer page '%s', showing page %d",
                             requested, first_remaining)
            return first_remaining

        if index > first_remaining:
            logger.info("Page '%s' requested ahead of progress, showing page %d",
                        requested, first_remaining)
            return first_remaining
        return index

    def next_page_name(self, index: int) -> Optional[str]:
        """Get the name of the page after index, or None at the end."""
        if index >= self.registry.last_index:
            return None
        return self.registry.name_at(index + 1)

    def advance(self, state: WizardState, requested: Optional[str] = "") -> AdvanceResult:
        """Render the appropriate page and return the updated state.

        A page signalling CONTINUE is recorded as filled; filling the last
        page completes the installation. The input state is not modified.
        """
        new_state = state.copy()
        index = self.select_page(new_state, requested)
        name = self.registry.name_at(index)
        logger.debug("Showing installer page %d (%s)", index, name)

        mark = len(self.output.emitted)
        page = self.registry.create(index, self)
        signal = page.emit()

        if signal is Signal.CONTINUE:
            new_state.mark_filled(index)
            if new_state.first_remaining() > self.registry.last_index:
                new_state.completed = True
                logger.info("Installation pages complete")

        output = "".join(self.output.emitted[mark:])
        return AdvanceResult(output, new_state, name, index, signal)
