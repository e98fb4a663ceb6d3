from ftracker.core.constants import LEN_STEP, M_IN_KM


def distance(action: int) -> float:
    """
    Distance covered during a training, in km.
    Example: 1000 steps -> 0.65
    """
    return action * LEN_STEP / M_IN_KM


def mean_speed(action: int, duration: float) -> float:
    """
    Mean speed over the whole training, in km/h.
    `duration` is in hours; a zero duration gives 0.
    """
    if duration == 0:
        return 0.0

    return distance(action) / duration


def swimming_mean_speed(length_pool: int, count_pool: int, duration: float) -> float:
    """
    Mean swimming speed in km/h, from pool length (m) and number of laps.
    Example: 25 m pool, 40 laps in 1 h -> 1.0
    """
    if duration == 0:
        return 0.0

    return length_pool * count_pool / M_IN_KM / duration
