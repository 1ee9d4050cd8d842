"""Default region settings."""

DEFAULT_REGION = "CO"

# Shown in the region prompt.
EXAMPLE_REGIONS: list[str] = ["CO", "NY", "FL", "MI"]
