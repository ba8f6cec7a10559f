"""
Glass library and geometry/safety multiplier tables.

Anneal and strain temperatures are taken from manufacturer annealing charts
(°F). Process temperatures are typical kiln-controller targets for each mode.
"""

from annealing.types import (
    Conservativeness,
    GlassMaterial,
    GlassType,
    ScheduleValidationError,
    ShapeFactor,
)

GLASS_LIBRARY: dict[GlassType, GlassMaterial] = {
    "bullseye_coe90": GlassMaterial(
        name="Bullseye (COE 90)",
        anneal_temp=961,  # 516°C
        strain_point=900,  # 482°C
        slump_temp=1225,
        tack_fuse_temp=1350,
        full_fuse_temp=1490,
        cast_temp=1525,
    ),
    "oceanside_coe96": GlassMaterial(
        name="Oceanside / Spectrum (COE 96)",
        anneal_temp=950,  # 510°C
        strain_point=850,  # 455°C
        slump_temp=1225,
        tack_fuse_temp=1350,
        full_fuse_temp=1465,
        cast_temp=1500,
    ),
    "effetre_coe104": GlassMaterial(
        name="Effetre / Moretti (COE 104)",
        anneal_temp=968,  # 520°C
        strain_point=860,  # 460°C
        slump_temp=1200,
        tack_fuse_temp=1350,
        full_fuse_temp=1450,
        cast_temp=1480,
    ),
    "borosilicate_coe33": GlassMaterial(
        name="Simax / Pyrex (Borosilicate COE 33)",
        anneal_temp=1050,  # 565°C
        strain_point=950,  # 510°C
        brand_factor=1.8,  # Tolerates ~3x, started conservatively
        slump_temp=1300,
        tack_fuse_temp=1600,
        full_fuse_temp=2000,
        cast_temp=2200,
    ),
    "satake_coe110": GlassMaterial(
        name="Satake (COE 110-120)",
        anneal_temp=896,  # 480°C
        strain_point=806,  # 430°C
        brand_factor=0.75,  # Very high lead
        slump_temp=1150,
        tack_fuse_temp=1300,
        full_fuse_temp=1400,
        cast_temp=1450,
    ),
    "custom": GlassMaterial(
        name="Custom",
        anneal_temp=None,
        strain_point=None,
    ),
}

# Effective thickness multipliers: 3-D and hollow forms hold heat like
# thicker slabs.
SHAPE_FACTORS: dict[ShapeFactor, float] = {
    "slab": 1.0,
    "uneven": 1.5,  # Tack fused / uneven layers
    "hollow_deep": 2.0,  # Vessels, deep drops, castings with cores
}

# Safety multipliers: soak time is multiplied, cooling rates divided.
CONSERVATIVENESS_FACTORS: dict[Conservativeness, float] = {
    "fast": 0.75,  # Economy / aggressive
    "standard": 1.0,  # Chart baseline
    "cautious": 1.5,  # Safety margin
}


def get_material(glass_type: GlassType) -> GlassMaterial:
    """Look up a glass family, rejecting unknown names."""
    try:
        return GLASS_LIBRARY[glass_type]
    except (KeyError, TypeError):
        raise ScheduleValidationError(f"Unknown glass type: {glass_type}") from None


def get_shape_multiplier(shape: ShapeFactor) -> float:
    try:
        return SHAPE_FACTORS[shape]
    except (KeyError, TypeError):
        raise ScheduleValidationError(f"Unknown shape factor: {shape}") from None


def get_safety_factor(conservativeness: Conservativeness) -> float:
    try:
        return CONSERVATIVENESS_FACTORS[conservativeness]
    except (KeyError, TypeError):
        raise ScheduleValidationError(
            f"Unknown conservativeness: {conservativeness}"
        ) from None
