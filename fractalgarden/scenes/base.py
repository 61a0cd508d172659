from __future__ import annotations


class Scene:
    """
    Base for everything the SceneManager can drive.

    The manager pumps events into handle_event, advances update once per
    display tick and then calls render; scenes never own a loop.
    """

    def enter(self, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        """Called once when the scene becomes active (inside the event loop)."""
        return None

    def handle_event(self, event, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        """Process a single pygame event."""
        return None

    def update(self, dt_ms: int, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        """Advance scene state by dt_ms."""
        return None

    def render(self, renderer, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        """Draw the scene."""
        return None

    def leave(self, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        return None
