"""Composer session - the form state behind one user's page.

Every user action maps to one method here so the UI layer only reads state
and forwards events.
"""
import time
from enum import Enum
from typing import Callable, Optional, Tuple
from uuid import uuid4

from backend.app.brand_registry import BrandRegistry
from backend.app.errors import GENERIC_ALERT, GenerationError, GenerationInProgressError
from backend.app.logger import get_logger
from backend.app.models import BrandProfile, ContentRequest, GeneratedResponse, Tone

logger = get_logger(__name__)

COPIED_RESET_SECONDS = 2.0


class GenerationStatus(str, Enum):
    """Lifecycle of the generate action. Only SUBMITTING blocks a new submission."""
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ComposerSession:
    """Current request, brand selection, output and flags for a single session."""

    def __init__(
        self,
        registry: Optional[BrandRegistry] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.registry = registry if registry is not None else BrandRegistry()
        self.request = ContentRequest()
        self.status = GenerationStatus.IDLE
        self.output: Optional[GeneratedResponse] = None
        self.error: Optional[str] = None
        self._clock = clock
        self._pending_id: Optional[str] = None
        self._pending_request: Optional[ContentRequest] = None
        self._copied_at: Optional[float] = None
        # tone/audience as they were before a brand overrode them
        self._pre_brand: Optional[Tuple[Tone, Optional[str]]] = None

    # ------------------------------------------------------------------
    # Form fields
    # ------------------------------------------------------------------

    def update(self, **changes) -> ContentRequest:
        """Replace the current request with one carrying ``changes``."""
        data = self.request.model_dump()
        data.update(changes)
        self.request = ContentRequest.model_validate(data)
        return self.request

    # ------------------------------------------------------------------
    # Brands
    # ------------------------------------------------------------------

    @property
    def selected_brand(self) -> Optional[BrandProfile]:
        return self.registry.selected

    def select_brand(self, brand_id: Optional[str]) -> Optional[BrandProfile]:
        previous = self.registry.selected
        brand = self.registry.select(brand_id)
        if brand is None:
            self._drop_brand_overrides(previous)
        else:
            self._apply_brand(brand)
        return brand

    def add_brand(self, profile: BrandProfile) -> BrandProfile:
        self.registry.add(profile)
        self._apply_brand(profile)
        return profile

    def delete_brand(self, brand_id: str) -> bool:
        previous = self.registry.selected
        was_selected = self.registry.selected_id == brand_id
        removed = self.registry.delete(brand_id)
        if was_selected:
            self._drop_brand_overrides(previous)
        return removed

    def _apply_brand(self, brand: BrandProfile) -> None:
        if self._pre_brand is None:
            self._pre_brand = (self.request.tone, self.request.target_audience)
        self.update(tone=brand.default_tone, target_audience=brand.default_audience, brand=brand)

    def _drop_brand_overrides(self, previous: Optional[BrandProfile]) -> None:
        changes = {"brand": None}
        if previous is not None and self._pre_brand is not None:
            tone, audience = self._pre_brand
            # fields the user edited after selecting the brand are kept
            if self.request.tone == previous.default_tone:
                changes["tone"] = tone
            if self.request.target_audience == previous.default_audience:
                changes["target_audience"] = audience
        self._pre_brand = None
        self.update(**changes)

    # ------------------------------------------------------------------
    # Generation lifecycle
    # ------------------------------------------------------------------

    @property
    def is_busy(self) -> bool:
        return self.status == GenerationStatus.SUBMITTING

    def begin_generation(self) -> str:
        """
        Move to SUBMITTING and return the id that must accompany the result.

        Raises:
            GenerationInProgressError: if a generation is already in flight
        """
        if self.is_busy:
            raise GenerationInProgressError("A generation is already in progress")
        self._pending_id = uuid4().hex
        self._pending_request = self.request
        self.status = GenerationStatus.SUBMITTING
        self.output = None
        self.error = None
        return self._pending_id

    def complete_generation(self, request_id: str, content: str) -> bool:
        """Store the result for ``request_id``. Results for stale ids are dropped."""
        if request_id != self._pending_id:
            logger.debug(f"Discarding stale generation result {request_id}")
            return False
        self.output = GeneratedResponse(content=content, framework=self._pending_request.framework)
        self.status = GenerationStatus.SUCCEEDED
        self._finish()
        return True

    def fail_generation(self, request_id: str, message: str = GENERIC_ALERT) -> bool:
        if request_id != self._pending_id:
            logger.debug(f"Discarding stale generation failure {request_id}")
            return False
        self.error = message
        self.status = GenerationStatus.FAILED
        self._finish()
        return True

    def _finish(self) -> None:
        self._pending_id = None
        self._pending_request = None

    def generate(self, generator) -> Optional[GeneratedResponse]:
        """Run one generation with ``generator`` against the current request.

        Failures leave the form untouched and put the generic alert in ``error``.
        """
        request_id = self.begin_generation()
        request = self._pending_request
        try:
            content = generator.generate(request)
        except GenerationError:
            self.fail_generation(request_id)
            return None
        except Exception:
            self.fail_generation(request_id)
            raise
        self.complete_generation(request_id, content)
        return self.output

    # ------------------------------------------------------------------
    # Output actions
    # ------------------------------------------------------------------

    def clear(self) -> ContentRequest:
        """Drop the output and reset topic/description (and audience without a brand)."""
        self.output = None
        self.error = None
        self._copied_at = None
        if not self.is_busy:
            self.status = GenerationStatus.IDLE
        audience = self.request.target_audience if self.registry.selected_id else ""
        return self.update(topic="", description="", target_audience=audience)

    def copy_output(self) -> Optional[str]:
        """Return the text to put on the clipboard and start the copied indicator."""
        if self.output is None or not self.output.content:
            return None
        self._copied_at = self._clock()
        return self.output.content

    @property
    def copied(self) -> bool:
        if self._copied_at is None:
            return False
        return self._clock() - self._copied_at < COPIED_RESET_SECONDS
