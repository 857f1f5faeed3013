from typing import List, Optional

from bs4 import BeautifulSoup
from pydantic import BaseModel, ConfigDict

from .core import Element


class HTMLDocument(BaseModel):
    """
    A parsed HTML document or fragment.

    Wraps the BeautifulSoup tree together with the root-level facts the
    builder collected. Rules only read from it.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    soup: BeautifulSoup
    has_doctype: bool = False
    root_tag_valid: bool = False

    def select(self, selector: str) -> List[Element]:
        """All elements matching `selector`, in document order."""
        return [Element(tag) for tag in self.soup.select(selector)]

    def select_one(self, selector: str) -> Optional[Element]:
        tag = self.soup.select_one(selector)
        return Element(tag) if tag is not None else None

    def count(self, selector: str) -> int:
        return len(self.soup.select(selector))
