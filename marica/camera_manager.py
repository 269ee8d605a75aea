"""Named cameras with one of them active."""

from __future__ import annotations

from typing import Any

__all__ = ["CameraManager"]


class CameraManager:
    """Keeps cameras by alias and tracks the active one."""

    def __init__(self) -> None:
        self._cameras: dict[str, Any] = {}
        self._active: Any = None

    def __contains__(self, alias: str) -> bool:
        return alias in self._cameras

    @property
    def active_camera(self) -> Any:
        """The active camera, or None."""
        return self._active

    def add_camera(self, alias: str, camera: Any) -> None:
        """Register ``camera`` under ``alias``; an existing alias keeps its camera."""
        self._cameras.setdefault(alias, camera)

    def set_active_camera(self, alias: str) -> None:
        """Activate the camera under ``alias``; an unknown alias leaves none active."""
        self._active = self._cameras.get(alias)