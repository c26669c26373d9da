"""Viewer settings."""

from __future__ import annotations

from dataclasses import dataclass

from puzzlechess.ui.styles.theme import BoardTheme


@dataclass
class ViewerSettings:
    """All user-configurable viewer settings."""

    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_destinations: bool = True
    glyph_scale: float = 0.7  # glyph point size relative to the tile

    @property
    def theme(self) -> BoardTheme:
        return BoardTheme.named(self.board_theme)


def apply_settings(scene, settings: ViewerSettings) -> None:
    """Push *settings* onto a :class:`~puzzlechess.ui.board.board_scene.BoardScene`."""
    scene.set_theme(settings.theme)
    scene.set_glyph_scale(settings.glyph_scale)
    scene.set_show_coordinates(settings.show_coordinates)
    scene.set_show_destinations(settings.show_destinations)
