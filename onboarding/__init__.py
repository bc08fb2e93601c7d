"""
Onboarding — allocate a penetration target into monthly additions and project active customers.
"""

from .allocator import (
    allocate,
    distribute_residual,
    pace_to_exponent,
    power_law_allocation,
    simulate_end_active,
    survival_weighted_allocation,
)
from .projector import (
    active_customers,
    continuous_growth_customers,
    onboarding_plan,
    penetration_cap,
    project_active,
    target_dealers,
)

__all__ = [
    "allocate",
    "distribute_residual",
    "pace_to_exponent",
    "power_law_allocation",
    "simulate_end_active",
    "survival_weighted_allocation",
    "active_customers",
    "continuous_growth_customers",
    "onboarding_plan",
    "penetration_cap",
    "project_active",
    "target_dealers",
]
