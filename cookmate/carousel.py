"""Step navigation for the cooking animation carousel, clamped to [0, step_count - 1]."""


def clamp_step(step: int, step_count: int) -> int:
    if step_count <= 0:
        return 0
    return max(0, min(step, step_count - 1))


def next_step(current: int, step_count: int) -> int:
    return clamp_step(current + 1, step_count)


def previous_step(current: int, step_count: int) -> int:
    return clamp_step(current - 1, step_count)


def is_first_step(current: int) -> bool:
    return current <= 0


def is_last_step(current: int, step_count: int) -> bool:
    return current >= step_count - 1


def step_label(current: int, step_count: int) -> str:
    if step_count <= 0:
        return ""
    return f"Step {clamp_step(current, step_count) + 1} / {step_count}"
