"""Optional pygame view of the grid (requires the ``visual`` extra)."""
