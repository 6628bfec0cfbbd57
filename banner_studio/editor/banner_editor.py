"""
Banner Editor
=============

Live, mutable editing state for one banner: the text elements, the
canvas config and the current selection.

Discrete actions (add, delete, layer moves, drag end, config changes)
capture history immediately. Field edits are debounced so a burst of
changes becomes one undo step.
"""

import logging
import os
import uuid
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from ..models.banner_models import (
    BannerConfig,
    LayerDirection,
    LayoutVariation,
    TextElement,
)
from ..models.preset_models import EDITOR_QUICK_SIZES, get_banner_size
from .debounce import CaptureDebouncer
from .history import HistoryManager, MAX_HISTORY

logger = logging.getLogger(__name__)


DEFAULT_ELEMENT_TEXT = "Enter text"


class EditorSettings(BaseModel):
    """Configuration for editor sessions."""
    history_limit: int = Field(default=MAX_HISTORY, ge=1)
    debounce_seconds: float = Field(default=0.5, ge=0)

    @classmethod
    def from_env(cls) -> "EditorSettings":
        """Read overrides from BANNER_HISTORY_LIMIT / BANNER_DEBOUNCE_SECONDS."""
        values: Dict[str, Any] = {}
        if os.getenv("BANNER_HISTORY_LIMIT"):
            values["history_limit"] = os.getenv("BANNER_HISTORY_LIMIT")
        if os.getenv("BANNER_DEBOUNCE_SECONDS"):
            values["debounce_seconds"] = os.getenv("BANNER_DEBOUNCE_SECONDS")
        return cls(**values)


class BannerEditor:
    """
    Editing surface for a single banner session.

    Unknown element ids are ignored and logged; no operation here raises
    for a stale reference.
    """

    def __init__(
        self,
        config: Optional[BannerConfig] = None,
        elements: Optional[List[TextElement]] = None,
        settings: Optional[EditorSettings] = None
    ):
        self.settings = settings or EditorSettings()
        self.config = config.model_copy(deep=True) if config else BannerConfig()
        self.elements: List[TextElement] = [e.model_copy(deep=True) for e in elements or []]
        self.selected_id: Optional[str] = None

        # Drag state
        self.is_dragging = False
        self._drag_offset: Tuple[float, float] = (0.0, 0.0)
        self._drag_origin: Optional[Tuple[float, float]] = None

        self.history = HistoryManager(limit=self.settings.history_limit)
        self.history.reset(self.elements, self.config)
        self._debouncer = CaptureDebouncer(self._capture, delay=self.settings.debounce_seconds)
        self._pending_edit: Optional[Tuple[str, Tuple[str, ...]]] = None

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _find_index(self, element_id: str) -> Optional[int]:
        for i, element in enumerate(self.elements):
            if element.id == element_id:
                return i
        return None

    def get_element(self, element_id: str) -> Optional[TextElement]:
        index = self._find_index(element_id)
        return self.elements[index] if index is not None else None

    @property
    def selected_element(self) -> Optional[TextElement]:
        if self.selected_id is None:
            return None
        return self.get_element(self.selected_id)

    def sorted_layers(self) -> List[TextElement]:
        """Elements ordered topmost first, as shown in the layer panel."""
        return sorted(self.elements, key=lambda e: e.z_index)[::-1]

    # ------------------------------------------------------------------
    # History plumbing
    # ------------------------------------------------------------------

    def _capture(self) -> None:
        self.history.capture(self.elements, self.config)

    def _capture_now(self) -> None:
        # The snapshot already includes any debounced edits
        self._debouncer.cancel()
        self._capture()

    @property
    def has_pending_capture(self) -> bool:
        return self._debouncer.pending

    def flush_pending(self) -> bool:
        """Record a debounced edit now instead of waiting for the timer."""
        return self._debouncer.flush()

    # ------------------------------------------------------------------
    # Element operations
    # ------------------------------------------------------------------

    def add_element(self) -> TextElement:
        """Append a default text element on top of all others and select it."""
        max_z = max([e.z_index for e in self.elements] + [0])
        element = TextElement(
            id=f"text-{uuid.uuid4().hex[:12]}",
            text=DEFAULT_ELEMENT_TEXT,
            x=50,
            y=50,
            width=200,
            height=40,
            font_size=20,
            font_family="Arial, sans-serif",
            font_weight="normal",
            color="#000000",
            text_align="center",
            z_index=max_z + 1
        )
        self.elements.append(element)
        self.selected_id = element.id
        self._capture_now()
        logger.info(f"[EDITOR] Added element {element.id} at z={element.z_index}")
        return element

    def update_element(self, element_id: str, updates: Dict[str, Any]) -> Optional[TextElement]:
        """
        Merge partial fields into an element.

        Repeated edits to the same fields of the same element coalesce
        into one history step. Editing a different element or field set
        first records the pending step.

        Args:
            element_id: Target element
            updates: Field values to change; "id" is ignored

        Returns:
            The updated element, or None if the id is unknown

        Raises:
            pydantic.ValidationError: if a field value is invalid
        """
        index = self._find_index(element_id)
        if index is None:
            logger.warning(f"[EDITOR] update_element: unknown id {element_id}")
            return None

        changes = {k: v for k, v in updates.items() if k != "id"}
        merged = TextElement.model_validate({**self.elements[index].model_dump(), **changes})

        edit_key = (element_id, tuple(sorted(changes)))
        if self._debouncer.pending and edit_key != self._pending_edit:
            self._debouncer.flush()

        self.elements[index] = merged
        self._pending_edit = edit_key
        self._debouncer.trigger()
        return merged

    def delete_element(self, element_id: str) -> bool:
        """Remove an element. Returns False if the id is unknown."""
        index = self._find_index(element_id)
        if index is None:
            logger.warning(f"[EDITOR] delete_element: unknown id {element_id}")
            return False

        del self.elements[index]
        if self.selected_id == element_id:
            self.selected_id = None
        if self.is_dragging and self.selected_id is None:
            self.is_dragging = False
        self._capture_now()
        logger.info(f"[EDITOR] Deleted element {element_id}")
        return True

    def move_layer(self, element_id: str, direction: LayerDirection) -> bool:
        """
        Move an element one step up or down in paint order.

        The element trades z-index with its neighbour in that direction.
        Elements sharing a z-index paint in list order; when the neighbour
        is tied, the stack is renumbered 1..n first so the swap takes
        effect. Topmost-up and bottommost-down are no-ops.
        """
        element = self.get_element(element_id)
        if element is None:
            logger.warning(f"[EDITOR] move_layer: unknown id {element_id}")
            return False

        direction = LayerDirection(direction)
        ordered = sorted(self.elements, key=lambda e: e.z_index)
        position = next(i for i, e in enumerate(ordered) if e.id == element_id)
        target = position + 1 if direction == LayerDirection.UP else position - 1
        if target < 0 or target >= len(ordered):
            return False

        neighbour = ordered[target]
        if neighbour.z_index == element.z_index:
            for z_index, layer in enumerate(ordered, start=1):
                layer.z_index = z_index

        element.z_index, neighbour.z_index = neighbour.z_index, element.z_index
        self._capture_now()
        logger.info(f"[EDITOR] Moved {element_id} {direction.value} to z={element.z_index}")
        return True

    def select(self, element_id: str) -> bool:
        """Select an element, implicitly deselecting the previous one."""
        if self._find_index(element_id) is None:
            logger.warning(f"[EDITOR] select: unknown id {element_id}")
            return False
        self.selected_id = element_id
        return True

    def clear_selection(self) -> None:
        self.selected_id = None

    # ------------------------------------------------------------------
    # Pointer drag
    # ------------------------------------------------------------------

    def pointer_down(self, element_id: str, pointer_x: float, pointer_y: float) -> bool:
        """Start dragging an element. Pointer coordinates are canvas-relative."""
        element = self.get_element(element_id)
        if element is None:
            logger.warning(f"[EDITOR] pointer_down: unknown id {element_id}")
            return False

        self.selected_id = element_id
        self.is_dragging = True
        self._drag_offset = (pointer_x - element.x, pointer_y - element.y)
        self._drag_origin = (element.x, element.y)
        return True

    def pointer_move(self, pointer_x: float, pointer_y: float) -> Optional[TextElement]:
        """Reposition the dragged element. Does not touch history."""
        if not self.is_dragging or self.selected_id is None:
            return None

        element = self.selected_element
        if element is None:
            self.is_dragging = False
            return None

        offset_x, offset_y = self._drag_offset
        max_x = max(0.0, self.config.width - element.width)
        max_y = max(0.0, self.config.height - element.height)
        element.x = min(max(pointer_x - offset_x, 0.0), max_x)
        element.y = min(max(pointer_y - offset_y, 0.0), max_y)
        return element

    def pointer_up(self) -> bool:
        """
        Finish a drag gesture.

        Returns True if the element moved, in which case exactly one
        history state is captured for the whole gesture.
        """
        if not self.is_dragging:
            return False

        self.is_dragging = False
        origin, self._drag_origin = self._drag_origin, None
        element = self.selected_element
        if element is None or origin is None:
            return False

        if (element.x, element.y) == origin:
            return False

        self._capture_now()
        return True

    # ------------------------------------------------------------------
    # Canvas config
    # ------------------------------------------------------------------

    def update_config(self, **changes: Any) -> BannerConfig:
        """
        Change width, height, background_color or background_image.

        None values are ignored. Captures history immediately.
        """
        values = {k: v for k, v in changes.items() if v is not None}
        if not values:
            return self.config

        self.config = BannerConfig.model_validate({**self.config.model_dump(), **values})
        self._capture_now()
        logger.info(f"[EDITOR] Config updated: {values}")
        return self.config

    def apply_size_preset(self, size_id: str) -> bool:
        """Resize the canvas to a platform preset or an editor quick size."""
        size = get_banner_size(size_id)
        if size is not None:
            self.update_config(width=size.width, height=size.height)
            return True

        if size_id in EDITOR_QUICK_SIZES:
            width, height = EDITOR_QUICK_SIZES[size_id]
            self.update_config(width=width, height=height)
            return True

        logger.warning(f"[EDITOR] Unknown size preset: {size_id}")
        return False

    def load_variation(self, variation: LayoutVariation) -> None:
        """Replace the element set with a generated layout variation."""
        self.elements = [e.model_copy(deep=True) for e in variation.elements]
        self.selected_id = None
        self.is_dragging = False
        self._capture_now()
        logger.info(f"[EDITOR] Loaded variation '{variation.id}' ({len(self.elements)} elements)")

    # ------------------------------------------------------------------
    # Undo / redo
    # ------------------------------------------------------------------

    def _restore_current(self) -> None:
        state = self.history.current
        if state is None:
            return
        self.elements, self.config = state.restore()
        if self.selected_id is not None and self._find_index(self.selected_id) is None:
            self.selected_id = None
        self.is_dragging = False

    def undo(self) -> bool:
        """Revert to the previous state. Returns False at the oldest state."""
        self._debouncer.flush()
        if not self.history.can_undo:
            return False
        self.history.undo()
        self._restore_current()
        return True

    def redo(self) -> bool:
        """Reapply an undone state. Returns False at the newest state."""
        self._debouncer.flush()
        if not self.history.can_redo:
            return False
        self.history.redo()
        self._restore_current()
        return True

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo or self._debouncer.pending

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo and not self._debouncer.pending

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Plain structural clone of the editing state (history excluded)."""
        return {
            "config": self.config.model_dump(),
            "elements": [e.model_dump() for e in self.elements],
            "selected_id": self.selected_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], settings: Optional[EditorSettings] = None) -> "BannerEditor":
        """Resume an editor from to_dict() output."""
        editor = cls(
            config=BannerConfig.model_validate(data.get("config", {})),
            elements=[TextElement.model_validate(e) for e in data.get("elements", [])],
            settings=settings
        )
        selected_id = data.get("selected_id")
        if selected_id and editor.get_element(selected_id) is not None:
            editor.selected_id = selected_id
        return editor
