from .linear import linear_steps, cycle_samples

__all__ = ["linear_steps", "cycle_samples"]
