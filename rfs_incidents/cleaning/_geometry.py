"""Geometry canonicalization.

The feed wraps incident geometries in ``GeometryCollection``s, often
nested several levels deep, even when every member is a ``Polygon``.
These helpers flatten the containers and re-express a uniform result as
the matching multipart type, keeping a ``GeometryCollection`` only when
the members genuinely differ in type.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from rfs_incidents.models.geojson import GEOMETRY_COLLECTION

if TYPE_CHECKING:
    from rfs_incidents.models.geojson import Geometry

_MULTI_PREFIX = "Multi"


class _Missing:
    """Marker for "no geometry supplied", distinct from an explicit ``None``."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


def flatten_geometries(geometry: Geometry | None | _Missing = MISSING) -> list[Any]:
    """Expand nested ``GeometryCollection``s into a flat list of geometries.

    - no argument (``MISSING``) gives ``[]``
    - ``None`` gives ``[None]`` so "null geometry" survives flattening
    - any other geometry gives ``[geometry]``
    - a collection gives its members flattened depth-first, in order;
      empty collections at any depth contribute nothing

    Uses an explicit stack, so nesting depth is not bounded by the
    interpreter's recursion limit.
    """
    if geometry is MISSING:
        return []

    flat: list[Any] = []
    stack: list[Any] = [geometry]
    while stack:
        current = stack.pop()
        if current is not None and current.get("type") == GEOMETRY_COLLECTION:
            members = current.get("geometries") or []
            # Reversed so the first member is popped first.
            stack.extend(reversed(members))
        else:
            flat.append(current)
    return flat


def is_uniform_type(geometries: list[Any]) -> bool:
    """Whether every geometry in the list shares one ``type``.

    Lists shorter than two are trivially uniform.
    """
    if len(geometries) < 2:
        return True
    first = _geometry_type(geometries[0])
    return all(_geometry_type(geom) == first for geom in geometries[1:])


def clean_geometry(geometry: Geometry | None | _Missing = MISSING) -> Any:
    """Return the canonical form of a feed geometry.

    Returns:
        ``None`` when there is nothing to represent, the single member
        when flattening leaves one geometry, a ``Multi<Type>`` when all
        members share a type, otherwise a flat ``GeometryCollection``.
    """
    flat = flatten_geometries(geometry)

    match flat:
        case []:
            return None
        case [single]:
            return single
        case [None, *_] if is_uniform_type(flat):
            return None
        case [{"type": str(geom_type)}, *_] if is_uniform_type(flat) and geom_type.startswith(
            _MULTI_PREFIX
        ):
            # Multipart members merge into one multipart geometry of the same type.
            return {
                "type": geom_type,
                "coordinates": [part for geom in flat for part in geom["coordinates"]],
            }
        case _ if is_uniform_type(flat):
            return {
                "type": _MULTI_PREFIX + flat[0]["type"],
                "coordinates": [geom["coordinates"] for geom in flat],
            }
        case _:
            return {"type": GEOMETRY_COLLECTION, "geometries": flat}


def _geometry_type(geometry: Any) -> str | None:
    return None if geometry is None else geometry.get("type")
