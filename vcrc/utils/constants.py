"""Physical constants and model limits used throughout VCRC.

All values in SI units unless otherwise noted.
"""

# Atmospheric
P_ATM = 101325.0  # Pa, standard atmospheric pressure

# Thermodynamic
T_CELSIUS_OFFSET = 273.15  # K

# Conversion factors
BAR_TO_PA = 1.0e5
PA_TO_MPA = 1.0e-6

# Model limits
TEMPERATURE_TOLERANCE = 1.0e-3  # K, temperatures closer than this are equal
GLIDE_TOLERANCE = 0.01  # K, larger glide means a zeotropic phase change
MAX_TEMPERATURE_DELTA = 50.0  # K, superheat / subcooling / economizer limits
PRESSURE_TOLERANCE = 1.0  # Pa, streams closer than this share a pressure
ZERO_LOSS_TOLERANCE = 1.0e-9  # J/kg, total exergy destruction treated as zero

# Optimal R744 gas cooler pressure correlation, p [bar] = A·t [°C] + B
# (Yang L. et al., Applied Thermal Engineering 89 (2015) 656-662)
R744_GAS_COOLER_SLOPE = 2.759  # bar/°C
R744_GAS_COOLER_INTERCEPT = -9.912  # bar
R744_GAS_COOLER_MAX_TEMPERATURE = 60.0 + T_CELSIUS_OFFSET  # K
