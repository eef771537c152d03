"""Application bootstrap package for the wardrobe stylist."""
