"""Pydantic models defining the data contracts of vcover."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


# ---------------------------------------------------------------------------
# Construction options
# ---------------------------------------------------------------------------

class CoverOptions(BaseModel):
    """Options accepted by cover algorithm constructors."""
    model_config = ConfigDict(frozen=True)

    weight_attribute: Optional[str] = Field(
        default=None,
        description="Node attribute to read vertex weights from when no map is given",
    )
    validate_on_init: bool = Field(
        default=True,
        description="Check that every vertex has a weight when the algorithm is built",
    )


# ---------------------------------------------------------------------------
# Result record
# ---------------------------------------------------------------------------

class VertexCover(BaseModel):
    """
    A vertex cover together with its total weight.

    ``vertices`` keeps the order in which the algorithm picked them; test
    membership through :attr:`vertex_set`.  Instances are immutable
    records: like any pydantic model they iterate over their fields.
    """
    model_config = ConfigDict(frozen=True)

    vertices: tuple[Any, ...] = ()
    weight: float = 0.0

    _vertex_set: frozenset = PrivateAttr(default_factory=frozenset)

    def model_post_init(self, __context: Any) -> None:
        self._vertex_set = frozenset(self.vertices)

    @property
    def vertex_set(self) -> frozenset:
        """Membership view of ``vertices``, built once per instance."""
        return self._vertex_set
