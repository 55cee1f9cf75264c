"""Bordered status panel for the terminal UI."""

from __future__ import annotations

from typing import Iterable, List

from .text_utils import pad_to_width


class StatusBox:
    """Render a fixed-height panel framed with box-drawing characters."""

    def __init__(self, height: int = 1, min_width: int = 16) -> None:
        if height < 1:
            raise ValueError("Status box height must be positive")
        self.height = height
        self.min_width = min_width

    def render(self, lines: Iterable[str], width: int) -> List[str]:
        inner_width = max(self.min_width, width)
        body = [f"│{line}│" for line in self._prepare_lines(lines, inner_width)]
        top = "┌" + "─" * inner_width + "┐"
        bottom = "└" + "─" * inner_width + "┘"
        return [top, *body, bottom]

    def _prepare_lines(self, lines: Iterable[str], inner_width: int) -> List[str]:
        collected: List[str] = []
        for line in lines:
            if len(collected) == self.height:
                break
            text = f" {line or ''}"[:inner_width]
            collected.append(pad_to_width(text, inner_width))
        while len(collected) < self.height:
            collected.append(" " * inner_width)
        return collected
