"""Per sensor family decode methods referenced by the sensor table."""
