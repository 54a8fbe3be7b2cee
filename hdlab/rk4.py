"""Classical four-stage Runge-Kutta time integration, one stage at a time.

For du/dt = rhs(t, u):
  stage 1: predictor, Euler forward to t + dt/2
  stage 2: corrector, Euler backward to t + dt/2
  stage 3: predictor, midpoint rule to t + dt
  stage 4: corrector, Simpson rule to t + dt
"""

from collections.abc import MutableSequence, Sequence


def get_time_rkstep(ti: float, dt: float, rk: int) -> float:
    """Return the time at which the right-hand side of stage ``rk`` (0..3) is evaluated."""
    if rk == 0:
        return ti
    if rk in (1, 2):
        return ti + dt / 2.0
    if rk == 3:
        return ti + dt
    raise ValueError("rk out of range (0 <= rk < 4)")


def rk4_step(
    u: MutableSequence[float],
    uh: Sequence[MutableSequence[float]],
    rhs: Sequence[float],
    dt: float,
    rk_step: int,
) -> None:
    """Advance ``u`` in place through stage ``rk_step`` (1..4).

    ``uh`` holds two rows: the state at the start of the step and the running
    weighted sum of the stage slopes. ``u[0]`` is left untouched, as it is fixed
    by the boundary condition. Stage numbers outside 1..4 change nothing.
    """
    rk1 = dt / 6.0
    rk2 = dt / 3.0
    rk3 = dt / 2.0
    rk4 = dt
    start, acc = uh[0], uh[1]
    n = len(u)

    if rk_step == 1:
        for i in range(1, n):
            start[i] = u[i]
            u[i] = start[i] + rk3 * rhs[i]
            acc[i] = rk1 * rhs[i]
    elif rk_step == 2:
        for i in range(1, n):
            u[i] = start[i] + rk3 * rhs[i]
            acc[i] += rk2 * rhs[i]
    elif rk_step == 3:
        for i in range(1, n):
            u[i] = start[i] + rk4 * rhs[i]
            acc[i] += rk2 * rhs[i]
    elif rk_step == 4:
        for i in range(1, n):
            u[i] = start[i] + acc[i] + rk1 * rhs[i]