"""Physical constants shared across the package."""

R_GAS = 8.31446261815324  # J/(mol*K)
STANDARD_ATMOSPHERE = 101325.0  # Pa
