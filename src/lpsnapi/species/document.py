"""Read-only view over a parsed LPSN HTML page."""

from bs4 import BeautifulSoup, Tag
from bs4.exceptions import ParserRejectedMarkup

from lpsnapi.species.errors import ParseError

DETAIL_PAGE_ID = "detail-page"
TREE_SECTION_CLASS = "tree-arrow-open"
TREE_HEADER_CLASS = "open"


class LPSNDocument:
    """Typed query operations over an LPSN page.

    The underlying tree is never mutated; every lookup returns elements
    owned by the parsed soup.
    """

    def __init__(self, soup: BeautifulSoup):
        self._soup = soup

    @classmethod
    def parse(cls, html: str) -> "LPSNDocument":
        """Parse HTML text into a document.

        Raises:
            ParseError: If the markup is rejected by the parser
        """
        if not isinstance(html, str):
            raise ParseError(
                f"Error while parsing content: expected text, got {type(html).__name__}"
            )
        try:
            soup = BeautifulSoup(html, "html.parser")
        except ParserRejectedMarkup as e:
            raise ParseError(f"Error while parsing content: {e}") from e
        return cls(soup)

    @property
    def root(self) -> BeautifulSoup:
        return self._soup

    def find_by_id(self, element_id: str) -> Tag | None:
        found = self._soup.find(id=element_id)
        return found if isinstance(found, Tag) else None

    @staticmethod
    def find_by_class(scope: Tag, class_name: str) -> list[Tag]:
        return scope.find_all(class_=class_name)

    @staticmethod
    def find_by_tag(scope: Tag, tag_name: str) -> list[Tag]:
        return scope.find_all(tag_name)

    def detail_page(self) -> Tag | None:
        """Return the container holding the species details, if present."""
        return self.find_by_id(DETAIL_PAGE_ID)

    def tree_section(self, header: str) -> Tag | None:
        """Return the first collapsible section whose header mentions ``header``.

        Matching is case-insensitive and substring based, e.g. ``"notes:"``
        matches a header reading ``Notes: (3)``.
        """
        page = self.detail_page()
        if page is None:
            return None

        wanted = header.lower()
        for section in self.find_by_class(page, TREE_SECTION_CLASS):
            for head in self.find_by_class(section, TREE_HEADER_CLASS):
                if wanted in head.get_text().lower():
                    return section
        return None
