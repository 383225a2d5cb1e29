from __future__ import annotations

from typing import Callable, List
import pygame


class Button:
    def __init__(
        self,
        rect: pygame.Rect,
        text: str,
        font: pygame.font.Font,
        on_click: Callable[[], None],
    ) -> None:
        self.rect = rect
        self.text = text
        self.font = font
        self.on_click = on_click
        self.hover: bool = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Returns True when the event was a click on this button."""
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.on_click()
                return True
        return False

    def draw(self, surface: pygame.Surface) -> None:
        base_color = (70, 70, 80)
        hover_color = (100, 100, 120)
        color = hover_color if self.hover else base_color

        pygame.draw.rect(surface, color, self.rect, border_radius=4)
        pygame.draw.rect(surface, (20, 20, 20), self.rect, 1, border_radius=4)

        text_surf = self.font.render(self.text, True, (240, 240, 240))
        text_rect = text_surf.get_rect(center=self.rect.center)
        surface.blit(text_surf, text_rect)


def draw_label(surface: pygame.Surface, font: pygame.font.Font, text: str, x: int, y: int) -> None:
    text_surf = font.render(text, True, (220, 220, 220))
    surface.blit(text_surf, (x, y))


def wrap_text(font: pygame.font.Font, text: str, max_width: int) -> List[str]:
    """Greedy word wrap so status messages fit the sidebar."""
    lines: List[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and font.size(candidate)[0] > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines
