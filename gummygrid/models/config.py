"""Generator configuration models.

The user's configuration is merged over the defaults in
``gummygrid.engine.defaults`` and validated into ``GeneratorConfig``. Range
checks (grid dimensions, rounding fractions, color array lengths) are left to
the components that own them so they raise the library's own errors.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PrivateAttr,
    ValidatorFunctionWrapHandler,
    model_validator,
)


class ColorCategory(str, enum.Enum):
    BACKGROUND = "background"
    CELL_FILL = "cell_fill"
    CELL_STROKE = "cell_stroke"
    DROP_SHADOW = "drop_shadow"

    @property
    def css_name(self) -> str:
        return self.value.replace("_", "-")


class _Model(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class Stop(_Model):
    offset: float | str
    color: str
    opacity: float = 1


class Flat(_Model):
    kind: Literal["flat"] = "flat"
    value: str


class Gradient(_Model):
    kind: Literal["gradient"] = "gradient"
    type: Literal["linearGradient", "radialGradient"]
    attrs: dict[str, str] = Field(default_factory=dict)
    stops: list[Stop] = Field(default_factory=list)


def _tag_color(value: object) -> object:
    if isinstance(value, str):
        return {"kind": "flat", "value": value}
    if isinstance(value, dict) and "kind" not in value:
        return {"kind": "gradient", **value}
    return value


# Flat | Gradient, tagged by ``kind``; plain strings in config are flat colors.
Color = Annotated[Union[Flat, Gradient], BeforeValidator(_tag_color)]

FlatColor = Annotated[Flat, BeforeValidator(_tag_color)]


class Bias(_Model):
    cell_fill_probability: float = 0.5
    color_weights: dict[ColorCategory, list[float]] = Field(default_factory=dict)


class RandomizerConfig(_Model):
    salt: int = 0
    bias: Bias = Field(default_factory=Bias)


class GridSize(_Model):
    # Checked by Grid so that bad sizes raise InvalidDimensions.
    rows: int | float
    columns: int | float


class EnsureFill(_Model):
    top_bottom: bool = False
    left_right: bool = False


class GridConfig(_Model):
    size: int | float | GridSize = Field(default_factory=lambda: GridSize(rows=5, columns=5))
    vertical_symmetry: bool = False
    ensure_fill: EnsureFill = Field(default_factory=EnsureFill)


class Palette(_Model):
    background: list[Color] = Field(default_factory=list)
    cell_fill: list[Color] = Field(default_factory=list)
    cell_stroke: list[Color] = Field(default_factory=list)
    drop_shadow: list[FlatColor] = Field(default_factory=list)

    def get(self, category: ColorCategory) -> list[Flat | Gradient]:
        return getattr(self, category.value)


class CellRounding(_Model):
    outer: float = 0
    inner: float = 0


class Filters(_Model):
    """CSS filter functions applied to the pattern.

    Filters apply in sequence, so they are written in the order the
    configuration lists them.
    """

    blur: str | None = None
    brightness: str | None = None
    contrast: str | None = None
    drop_shadow: tuple[str, str, str] | None = None
    grayscale: str | None = None
    hue_rotate: str | None = None
    invert: str | None = None
    opacity: str | None = None
    saturate: str | None = None
    sepia: str | None = None

    _order: tuple[str, ...] = PrivateAttr(default=())

    @model_validator(mode="wrap")
    @classmethod
    def _remember_order(cls, data: Any, handler: ValidatorFunctionWrapHandler) -> Filters:
        filters = handler(data)
        if isinstance(data, Mapping):
            filters._order = tuple(data)
        return filters

    def ordered_items(self) -> list[tuple[str, Any]]:
        """Configured filters as (name, value) pairs, in configuration order."""
        values = self.model_dump(exclude_none=True)
        names = [name for name in self._order if name in values]
        names += [name for name in values if name not in names]
        return [(name, values[name]) for name in names]


class SvgConfig(_Model):
    pattern_area_ratio: float = Field(0.675, gt=0)
    colors: Palette = Field(default_factory=Palette)
    lock_colors: list[ColorCategory] | Literal["all"] = Field(default_factory=list)
    cell_rounding: CellRounding = Field(default_factory=CellRounding)
    gutter: float = 0
    flow: bool = True
    stroke_width: float = 0
    filters: Filters = Field(default_factory=Filters)
    paint_order: Literal["stroke", "normal"] = "stroke"
    stroke_line_join: Literal["miter", "miter-clip", "round", "bevel", "arcs"] = "miter"


class GeneratorConfig(_Model):
    randomizer: RandomizerConfig = Field(default_factory=RandomizerConfig)
    grid: GridConfig = Field(default_factory=GridConfig)
    svg: SvgConfig = Field(default_factory=SvgConfig)
