"""Front ends that paint the color wheel (pygame)."""
