"""UI-adapter state for the generator.

A front end keeps one :class:`GeneratorSession` per user and forwards its
events to the ``on_*`` handlers.  The session calls the pure engines in
:mod:`securegen` and queues toast-style :class:`Notice` messages for the
front end to display.
"""

import logging
from dataclasses import dataclass, field

from securegen import (
    CHARSETS,
    DEFAULT_LENGTH,
    FALLBACK_CATEGORY,
    clamp_length,
    generate,
    generate_uuid,
)

logger = logging.getLogger(__name__)

_COPY_MESSAGES = {
    "password": "Password copied!",
    "uuid": "UUID copied!",
}


@dataclass
class Notice:
    """A toast message for the front end to show once."""

    message: str
    kind: str = "success"  # success | error | info


@dataclass
class GeneratorSession:
    """Generator settings and current outputs for one front-end user.

    Construction generates an initial password and UUID.
    """

    length: int = DEFAULT_LENGTH
    categories: dict[str, bool] = field(
        default_factory=lambda: {name: True for name in CHARSETS}
    )
    password: str = ""
    strength: dict = field(default_factory=dict)
    uuid: str = ""
    notices: list[Notice] = field(default_factory=list)

    def __post_init__(self):
        self.length = clamp_length(self.length)
        self.on_regenerate()
        self.on_regenerate_uuid()

    # ── handler table ─────────────────────────────────────────────────────

    def on_regenerate(self) -> str:
        """Generate a new password from the current length and categories.

        An empty selection re-enables uppercase and queues an error notice.
        """
        selected = [name for name, on in self.categories.items() if on]
        result = generate(self.length, selected)

        if result["fallback"]:
            self.categories[FALLBACK_CATEGORY] = True
            self.notices.append(
                Notice("Select at least one character type!", "error")
            )

        self.password = result["password"]
        self.strength = {"score": result["score"], "label": result["label"]}
        return self.password

    def on_adjust_length(self, delta: int) -> str:
        """Step the length by *delta* (clamped) and regenerate."""
        return self.on_set_length(self.length + delta)

    def on_set_length(self, value) -> str:
        """Set the length from any user input (clamped) and regenerate."""
        self.length = clamp_length(value)
        return self.on_regenerate()

    def on_toggle(self, category: str, enabled: bool) -> str:
        """Enable or disable *category* and regenerate."""
        if category not in CHARSETS:
            raise ValueError(f"Unknown character category: {category!r}")
        self.categories[category] = enabled
        return self.on_regenerate()

    def on_regenerate_uuid(self) -> str:
        """Generate a new UUID."""
        self.uuid = generate_uuid()
        return self.uuid

    def on_copy(self, target: str) -> str:
        """Return the text to place on the clipboard for *target*.

        *target* is ``"password"`` or ``"uuid"``.  The clipboard write itself
        belongs to the front end.
        """
        if target not in _COPY_MESSAGES:
            raise ValueError(f"Nothing to copy for {target!r}")
        logger.debug("Copying %s to clipboard", target)
        self.notices.append(Notice(_COPY_MESSAGES[target]))
        return self.password if target == "password" else self.uuid

    def pop_notices(self) -> list[Notice]:
        """Return and clear the pending notices."""
        notices, self.notices = self.notices, []
        return notices
