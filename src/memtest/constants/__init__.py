"""Constants shared across memtest modules."""
