"""Fixed macrocycle geometry used by the procedural generator.

Distances are in angstroms.  The values approximate the phthalocyanine
core closely enough to read as one at viewing scale; they are not
refined coordinates.
"""

RING_CARBONS: int = 16
"""Carbon atoms on the macrocycle ring."""

RING_NITROGENS: int = 8
"""Four pyrrole-type plus four aza-bridge nitrogens."""

ARMS_PER_GROUP: int = 3
"""Branch carbons around each substituent anchor."""

FLUORINES_PER_ARM: int = 3
"""Fluorines capping each branch carbon."""

ATOMS_PER_GROUP: int = 1 + ARMS_PER_GROUP + ARMS_PER_GROUP * FLUORINES_PER_ARM
"""Anchor + arms + arm fluorines: 13 atoms per substituent group."""

CARBON_RING_RADIUS: float = 3.4
NITROGEN_RING_RADIUS: float = 2.05
AROMATIC_F_RADIUS: float = 4.75
PERIPHERAL_F_RADIUS: float = 6.0
SUBSTITUENT_RADIUS: float = 7.4

RING_PUCKER: float = 0.12
"""Out-of-plane amplitude applied to ring carbons (cosmetic only)."""

PERIPHERAL_JITTER: float = 0.35
"""Alternating radial offset for extra peripheral fluorines."""

PERIPHERAL_LIFT: float = 0.55
"""Out-of-plane amplitude for extra peripheral fluorines."""

ARM_LENGTH: float = 1.25
"""Anchor-to-arm carbon distance."""

ARM_FLUORINE_LENGTH: float = 1.05
"""Arm carbon to fluorine distance."""
