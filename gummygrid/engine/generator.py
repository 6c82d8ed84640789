"""GummyGrid: wires the randomizer, grid and renderer together.

Usage:
    gg = GummyGrid({"grid": {"vertical_symmetry": True}})
    doc = gg.build_from("jarvis")
    doc.markup
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from gummygrid.engine.defaults import build_config
from gummygrid.engine.grid import Grid
from gummygrid.engine.randomizer import Randomizer
from gummygrid.models.config import GeneratorConfig
from gummygrid.models.svg_document import SvgDocument
from gummygrid.svg.renderer import SvgRenderer

logger = logging.getLogger(__name__)


class GummyGrid:
    """Deterministic avatar generator. Not safe for concurrent use."""

    def __init__(self, config: Mapping[str, Any] | GeneratorConfig | None = None) -> None:
        if isinstance(config, GeneratorConfig):
            self.config = config
        else:
            self.config = GeneratorConfig.model_validate(build_config(config))
        self.rand = Randomizer(self.config.randomizer.salt)
        self.grid = Grid(
            self.config.grid,
            self.rand,
            fill_probability=self.config.randomizer.bias.cell_fill_probability,
        )
        self.svg = SvgRenderer(
            self.config.svg,
            self.grid.size,
            self.rand,
            color_weights=self.config.randomizer.bias.color_weights,
        )
        self._connect_locked_color_weights()
        self.document: SvgDocument | None = None

    def build_from(self, seed: str) -> SvgDocument:
        self.rand.set_seed(seed)
        self.grid.clear()
        self.grid.build()
        self.grid.log()
        self.document = self.svg.build_from(self.grid)
        logger.debug("Rendered avatar, %d bytes of markup", len(self.document.markup))
        return self.document

    def _connect_locked_color_weights(self) -> None:
        """Give every locked category the weights of the first one that has some."""
        weights = self.svg.color_weights
        locked = self.svg.locked_categories
        shared = next((weights[c] for c in locked if c in weights), None)
        if shared is None:
            return
        for category in locked:
            weights[category] = shared


def generate(seed: str, config: Mapping[str, Any] | None = None) -> SvgDocument:
    """One-shot helper: a fresh generator per call."""
    return GummyGrid(config).build_from(seed)
