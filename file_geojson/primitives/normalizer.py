"""Shape normalization and metadata merge for parsed GeoJSON documents.

Pure functions, no I/O.
"""

from typing import Any, Optional

DEFAULT_TITLE = "Koop File GeoJSON"


def split_metadata(document: dict) -> tuple[dict, dict]:
    """Separate the optional top-level metadata from the GeoJSON payload.

    Returns (metadata, payload). The input document is left untouched; a
    missing, null or non-object metadata value yields an empty mapping.
    """
    payload = dict(document)
    metadata = payload.pop("metadata", None)
    if not isinstance(metadata, dict):
        metadata = {}
    return dict(metadata), payload


def _geometry_type(geometry: Any) -> Optional[str]:
    if isinstance(geometry, dict):
        return geometry.get("type")
    return None


def normalize_as_feature_collection(payload: dict) -> dict:
    """Coerce a Feature, bare geometry or FeatureCollection into a FeatureCollection."""
    if payload.get("type") == "Feature":
        return {
            "type": "FeatureCollection",
            "features": [payload],
            "metadata": {"geometryType": _geometry_type(payload.get("geometry"))},
        }

    # Neither a Feature nor a FeatureCollection: a geometry
    if payload.get("type") != "FeatureCollection":
        return {
            "type": "FeatureCollection",
            "features": [{"type": "Feature", "geometry": payload, "properties": {}}],
            "metadata": {"geometryType": payload.get("type")},
        }

    return payload


def first_geometry_type(geojson: dict) -> Optional[str]:
    """Geometry type of the first feature, None when there is none."""
    features = geojson.get("features")
    if not isinstance(features, list) or not features:
        return None
    first = features[0]
    if not isinstance(first, dict):
        return None
    return _geometry_type(first.get("geometry"))


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def merge_metadata(geojson: dict, metadata: dict, filename: str, ttl: int) -> dict:
    """Attach ttl and metadata to a normalized FeatureCollection.

    geometryType always comes from the first feature. title, name and
    description are defaulted only when missing or blank in the source
    metadata.
    """
    metadata = dict(metadata)
    geojson["ttl"] = ttl
    metadata["geometryType"] = first_geometry_type(geojson)
    if _is_blank(metadata.get("title")):
        metadata["title"] = DEFAULT_TITLE
    if _is_blank(metadata.get("name")):
        metadata["name"] = filename
    if _is_blank(metadata.get("description")):
        metadata["description"] = f"GeoJSON from {filename}"
    geojson["metadata"] = metadata
    return geojson
