"""Shared training constants.

Empirical coefficients used by the distance, speed and calorie formulas.
Values are calibrated against the reference reports, so keep them exact.
"""

# Average step length in meters
LEN_STEP = 0.65

# Meters in one kilometer
M_IN_KM = 1000

# Minutes in one hour
MIN_IN_HOUR = 60

# km/h -> m/s conversion factor
KMH_IN_MSEC = 0.278

# Centimeters in one meter
CM_IN_M = 100

# Running calories: mean speed multiplier and shift
RUNNING_CALORIES_MEAN_SPEED_MULTIPLIER = 18.0
RUNNING_CALORIES_MEAN_SPEED_SHIFT = 1.79

# Walking calories: body weight and height/speed multipliers
WALKING_CALORIES_WEIGHT_MULTIPLIER = 0.035
WALKING_SPEED_HEIGHT_MULTIPLIER = 0.029

# Swimming calories: mean speed shift and body weight multiplier
SWIMMING_CALORIES_MEAN_SPEED_SHIFT = 1.1
SWIMMING_CALORIES_WEIGHT_MULTIPLIER = 2

# Returned instead of a report when the training label is not registered
UNKNOWN_TRAINING_MESSAGE = "неизвестный тип тренировки"

# Decimal places for every number in a training report
REPORT_DECIMALS = 2
