"""Interactive full-screen applications."""
