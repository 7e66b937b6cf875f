"""Classic OpenGL lighting materials (ambient, diffuse, specular, shininess)."""

from __future__ import annotations

from dataclasses import dataclass

Vec3 = tuple[float, float, float]

ONE: Vec3 = (1.0, 1.0, 1.0)


@dataclass(frozen=True)
class Material:
    """Phong material description."""

    ambient: Vec3
    diffuse: Vec3
    specular: Vec3
    shininess: float


_MATERIALS: dict[str, Material] = {
    # gemstones
    "emerald": Material(
        (0.0215, 0.1745, 0.0215), (0.07568, 0.61424, 0.07568), (0.633, 0.727811, 0.633), 0.6
    ),
    "jade": Material(
        (0.135, 0.2225, 0.1575), (0.54, 0.89, 0.63), (0.316228, 0.316228, 0.316228), 0.1
    ),
    "obsidian": Material(
        (0.05375, 0.05, 0.06625), (0.18275, 0.17, 0.22525), (0.332741, 0.328634, 0.346435), 0.3
    ),
    "pearl": Material(
        (0.25, 0.20725, 0.20725), (1.0, 0.829, 0.829), (0.296648, 0.296648, 0.296648), 0.088
    ),
    "ruby": Material(
        (0.1745, 0.01175, 0.01175), (0.61424, 0.04136, 0.04136), (0.727811, 0.626959, 0.626959), 0.6
    ),
    "turquoise": Material(
        (0.1, 0.18725, 0.1745), (0.396, 0.74151, 0.69102), (0.297254, 0.30829, 0.306678), 0.1
    ),
    # metals
    "brass": Material(
        (0.329412, 0.223529, 0.027451),
        (0.780392, 0.568627, 0.113725),
        (0.992157, 0.941176, 0.807843),
        0.21794872,
    ),
    "bronze": Material(
        (0.2125, 0.1275, 0.054), (0.714, 0.4284, 0.18144), (0.393548, 0.271906, 0.166721), 0.2
    ),
    "chrome": Material(
        (0.25, 0.25, 0.25), (0.4, 0.4, 0.4), (0.774597, 0.774597, 0.774597), 0.6
    ),
    "copper": Material(
        (0.19125, 0.0735, 0.0225), (0.7038, 0.27048, 0.0828), (0.256777, 0.137622, 0.086014), 0.1
    ),
    "gold": Material(
        (0.24725, 0.1995, 0.0745), (0.75164, 0.60648, 0.22648), (0.628281, 0.555802, 0.366065), 0.4
    ),
    "silver": Material(
        (0.19225, 0.19225, 0.19225), (0.50754, 0.50754, 0.50754), (0.508273, 0.508273, 0.508273), 0.4
    ),
    # plastics
    "plastic_black": Material((0.0, 0.0, 0.0), (0.01, 0.01, 0.01), (0.50, 0.50, 0.50), 0.25),
    "plastic_cyan": Material(
        (0.0, 0.1, 0.06), (0.0, 0.50980392, 0.50980392), (0.50196078, 0.50196078, 0.50196078), 0.25
    ),
    "plastic_green": Material((0.0, 0.0, 0.0), (0.1, 0.35, 0.1), (0.45, 0.55, 0.45), 0.25),
    "plastic_red": Material((0.0, 0.0, 0.0), (0.5, 0.0, 0.0), (0.7, 0.6, 0.6), 0.25),
    "plastic_white": Material((0.0, 0.0, 0.0), (0.55, 0.55, 0.55), (0.70, 0.70, 0.70), 0.25),
    "plastic_yellow": Material((0.0, 0.0, 0.0), (0.5, 0.5, 0.0), (0.60, 0.60, 0.50), 0.25),
    # rubbers
    "rubber_black": Material((0.02, 0.02, 0.02), (0.01, 0.01, 0.01), (0.4, 0.4, 0.4), 0.078125),
    "rubber_cyan": Material((0.0, 0.05, 0.05), (0.4, 0.5, 0.5), (0.04, 0.7, 0.7), 0.078125),
    "rubber_green": Material((0.0, 0.05, 0.0), (0.4, 0.5, 0.4), (0.04, 0.7, 0.04), 0.078125),
    "rubber_red": Material((0.05, 0.0, 0.0), (0.5, 0.4, 0.4), (0.7, 0.04, 0.04), 0.078125),
    "rubber_white": Material((0.05, 0.05, 0.05), (0.5, 0.5, 0.5), (0.7, 0.7, 0.7), 0.078125),
    "rubber_yellow": Material((0.05, 0.05, 0.0), (0.5, 0.5, 0.4), (0.7, 0.7, 0.04), 0.078125),
}

_ALIASES = {"plastic": "plastic_black"}


def material(name: str) -> Material:
    """Return the named material; names are case-insensitive, '-' or ' ' may replace '_'."""
    key = name.strip().lower().replace("-", "_").replace(" ", "_")
    key = _ALIASES.get(key, key)
    try:
        return _MATERIALS[key]
    except KeyError:
        raise KeyError(f"unknown material: {name!r}") from None


def material_names() -> list[str]:
    """Return the names of all known materials, in catalogue order."""
    return list(_MATERIALS)