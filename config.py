from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Tolerances and switches for the root finder.

    Passed explicitly to every operation that compares floats against zero,
    so callers can tune it to the magnitude of their coefficients.
    """

    tolerance: float = 1e-15         # near-zero test, also |sin(phi)| of a real binomial root
    root_tolerance: float = 1e-12    # bracket width at which refinement stops
    max_iterations: int = 200        # refinement steps per bracket
    numeric_fallback: bool = True    # isolate roots numerically when no structure matches

    def __post_init__(self) -> None:
        for name in ("tolerance", "root_tolerance"):
            value = getattr(self, name)
            if not value > 0:
                raise ValueError(f"{name} must be positive, got {value!r}")
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be at least 1, got {self.max_iterations!r}")


DEFAULT_CONFIG = Config()
