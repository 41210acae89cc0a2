"""
Installer Page Registry

Fixed, ordered mapping of page names to page factories.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable, List, Optional, Tuple

from sciclope.exceptions import RegistryError
from sciclope.install.pages.base import Page

if TYPE_CHECKING:
    from sciclope.install.installer import WebInstaller


PageFactory = Callable[["WebInstaller", str], Page]


@dataclass(frozen=True)
class PageDefinition:
    """Definition of an installer page."""
    name: str
    factory: PageFactory


class PageRegistry:
    """Ordered installer page sequence. Insertion order is wizard order."""

    def __init__(self, pages: Iterable[Tuple[str, PageFactory]]):
        self._pages: List[PageDefinition] = []
        self._index = {}
        for name, factory in pages:
            if name in self._index:
                raise RegistryError(f"Duplicate installer page '{name}'", page=name)
            self._index[name] = len(self._pages)
            self._pages.append(PageDefinition(name=name, factory=factory))

        if not self._pages:
            raise RegistryError("Installer page registry is empty")

    def __len__(self) -> int:
        return len(self._pages)

    def __contains__(self, name: str) -> bool:
        return name in self._index

    @property
    def names(self) -> List[str]:
        return [page.name for page in self._pages]

    @property
    def last_index(self) -> int:
        return len(self._pages) - 1

    def index_of(self, name: Optional[str]) -> Optional[int]:
        """Get the index of a page, or None if the name is unknown."""
        if not name:
            return None
        return self._index.get(name)

    def name_at(self, index: int) -> str:
        return self._pages[index].name

    def create(self, index: int, installer: "WebInstaller") -> Page:
        """Instantiate the page at the given index."""
        definition = self._pages[index]
        return definition.factory(installer, definition.name)
