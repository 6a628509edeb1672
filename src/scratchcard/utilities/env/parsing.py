import os

TRUE_FLAG_VALUES = {"true", "1", "yes", "on"}


def _env_flag(env_var: str, *, default: bool = False) -> bool:
    """Return the boolean value of ``env_var`` respecting common true strings."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    return value.strip().lower() in TRUE_FLAG_VALUES


def _check_bounds(
    env_var: str,
    parsed: float,
    *,
    minimum: float | None,
    maximum: float | None,
    exclusive_minimum: bool = False,
) -> None:
    if minimum is not None:
        if exclusive_minimum and parsed <= minimum:
            raise ValueError(f"{env_var} must be greater than {minimum}")
        if not exclusive_minimum and parsed < minimum:
            raise ValueError(f"{env_var} must be at least {minimum}")
    if maximum is not None and parsed > maximum:
        raise ValueError(f"{env_var} must be at most {maximum}")


def _env_int(
    env_var: str,
    *,
    default: int,
    minimum: int | None = None,
    maximum: int | None = None,
) -> int:
    """Return the integer value of ``env_var`` with optional bounds checking."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be an integer") from exc
    _check_bounds(env_var, parsed, minimum=minimum, maximum=maximum)
    return parsed


def _env_float(
    env_var: str,
    *,
    default: float,
    minimum: float | None = None,
    maximum: float | None = None,
    exclusive_minimum: bool = False,
) -> float:
    """Return the float value of ``env_var`` with optional bounds checking."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    try:
        parsed = float(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be a float") from exc
    _check_bounds(
        env_var,
        parsed,
        minimum=minimum,
        maximum=maximum,
        exclusive_minimum=exclusive_minimum,
    )
    return parsed


def _env_pair(
    env_var: str,
    *,
    default: tuple[float, float],
    minimum: float | None = None,
    maximum: float | None = None,
    exclusive_minimum: bool = False,
) -> tuple[float, float]:
    """Return an ``"x,y"`` float pair from ``env_var``.

    A single number is accepted and used for both components.
    """

    value = os.environ.get(env_var)
    if value is None:
        return default
    parts = [part.strip() for part in value.split(",")]
    if len(parts) == 1:
        parts = parts * 2
    if len(parts) != 2:
        raise ValueError(f"{env_var} must be a pair formatted as 'x,y'")
    try:
        pair = (float(parts[0]), float(parts[1]))
    except ValueError as exc:
        raise ValueError(f"{env_var} must contain two floats") from exc
    for component in pair:
        _check_bounds(
            env_var,
            component,
            minimum=minimum,
            maximum=maximum,
            exclusive_minimum=exclusive_minimum,
        )
    return pair
