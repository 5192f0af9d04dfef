"""Derived parameters — the named knobs every generator reads from.

Each field is computed from (seed, field name) alone. Generators pick the
subset that suits their visual grammar; there is no shared schema beyond this.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from glyph.engine.seed import param_choice, param_float, param_int

SYMMETRY_TYPES = (
    "radial",
    "bilateral",
    "rotational",
    "translational",
    "glide",
    "point",
    "none",
    "asymmetric",
)

# name -> (lo, hi, integer?)
PARAMETER_RANGES: dict[str, tuple[float, float, bool]] = {
    "element_count": (6, 20, True),
    "layer_count": (1, 5, True),
    "rotation_offset": (0.0, 360.0, False),
    "angle_spread": (0.0, 90.0, False),
    "curve_tension": (0.3, 0.9, False),
    "curve_amplitude": (0.0, 50.0, False),
    "taper_ratio": (0.2, 0.8, False),
    "stroke_width": (1.0, 12.0, False),
    "spacing_factor": (0.5, 2.0, False),
    "scale_factor": (0.7, 1.3, False),
    "style_variant": (0, 7, True),
    "color_placement": (0, 7, True),
    "gradient_angle": (0.0, 360.0, False),
    "organic_amount": (0.0, 1.0, False),
    "jitter_amount": (0.0, 10.0, False),
    "arm_width": (2.0, 15.0, False),
    "arm_length": (20.0, 50.0, False),
    "center_radius": (0.0, 15.0, False),
    "spiral_amount": (0.0, 0.5, False),
    "bulge_amount": (0.0, 0.5, False),
    "corner_radius": (0.0, 30.0, False),
    "depth_offset": (2.0, 20.0, False),
    "perspective_strength": (0.0, 1.0, False),
    "letter_weight": (100, 900, True),
    "cut_depth": (0.0, 1.0, False),
    "overlap_amount": (0.2, 0.8, False),
    "ring_thickness": (2.0, 12.0, False),
    "flow_intensity": (0.0, 1.0, False),
    "extrusion_depth": (5.0, 25.0, False),
}


@dataclass(frozen=True)
class DerivedParameters:
    element_count: int
    layer_count: int
    rotation_offset: float
    angle_spread: float
    curve_tension: float
    curve_amplitude: float
    taper_ratio: float
    stroke_width: float
    spacing_factor: float
    scale_factor: float
    symmetry_type: str
    style_variant: int
    color_placement: int
    gradient_angle: float
    organic_amount: float
    jitter_amount: float
    arm_width: float
    arm_length: float
    center_radius: float
    spiral_amount: float
    bulge_amount: float
    corner_radius: float
    depth_offset: float
    perspective_strength: float
    letter_weight: int
    cut_depth: float
    overlap_amount: float
    ring_thickness: float
    flow_intensity: float
    extrusion_depth: float

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def derive_parameters(seed: str) -> DerivedParameters:
    values: dict[str, Any] = {}
    for name, (lo, hi, integer) in PARAMETER_RANGES.items():
        if integer:
            values[name] = param_int(seed, name, int(lo), int(hi))
        else:
            values[name] = param_float(seed, name, lo, hi)
    values["symmetry_type"] = param_choice(seed, "symmetry_type", SYMMETRY_TYPES)
    return DerivedParameters(**values)
