"""Physical constants shared across the package."""

R_GAS = 8.314  # J/(mol·K)
R_GAS_KJ = R_GAS / 1000.0  # kJ/(mol·K)

# Floors used to keep powers, ratios and logarithms finite.
QUOTIENT_FLOOR = 1e-10
MIN_ACTIVATION_ENERGY = 5.0  # kJ/mol

EQUILIBRIUM_TOLERANCE = 0.05
