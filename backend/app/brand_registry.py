"""In-memory brand profile registry with a current selection."""
import threading
from typing import Iterable, List, Optional

from backend.app.constants import default_brands
from backend.app.errors import BrandNotFoundError
from backend.app.logger import get_logger
from backend.app.models import BrandProfile

logger = get_logger(__name__)


class BrandRegistry:
    """
    Ordered, mutable list of brand profiles.

    Nothing is persisted: the registry starts from the demo brands (or the
    given list) and is lost with the process. Identifiers are trusted as
    supplied; adding a second profile with an existing id is not rejected.
    """

    def __init__(self, brands: Optional[Iterable[BrandProfile]] = None):
        self._brands: List[BrandProfile] = list(brands) if brands is not None else default_brands()
        self._selected_id: Optional[str] = None
        self._lock = threading.RLock()

    def list(self) -> List[BrandProfile]:
        with self._lock:
            return list(self._brands)

    def get(self, brand_id: str) -> Optional[BrandProfile]:
        with self._lock:
            for brand in self._brands:
                if brand.id == brand_id:
                    return brand
            return None

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    @property
    def selected(self) -> Optional[BrandProfile]:
        with self._lock:
            if self._selected_id is None:
                return None
            return self.get(self._selected_id)

    def add(self, profile: BrandProfile) -> BrandProfile:
        """Append a profile and make it the current selection."""
        with self._lock:
            self._brands.append(profile)
            self._selected_id = profile.id
        logger.info(f"Brand added: {profile.name} ({profile.id})")
        return profile

    def delete(self, brand_id: str) -> bool:
        """Remove every profile with ``brand_id``; deselect it if it was selected."""
        with self._lock:
            remaining = [b for b in self._brands if b.id != brand_id]
            removed = len(remaining) != len(self._brands)
            self._brands = remaining
            if self._selected_id == brand_id:
                self._selected_id = None
        if removed:
            logger.info(f"Brand deleted: {brand_id}")
        return removed

    def select(self, brand_id: Optional[str]) -> Optional[BrandProfile]:
        """Select a registered brand, or clear the selection with None."""
        with self._lock:
            if brand_id is None:
                self._selected_id = None
                return None
            brand = self.get(brand_id)
            if brand is None:
                raise BrandNotFoundError(brand_id)
            self._selected_id = brand_id
            return brand

    def __len__(self) -> int:
        return len(self._brands)
