"""
Form state for the BMI calculator page.

The page never mutates state directly: every keystroke and every press of
Calculate becomes an event, and reduce() returns the next state.
"""
import logging
from dataclasses import dataclass, replace
from typing import Optional

from bmi import BmiInputError, BmiResult, calculate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculatorState:
    height: str = ""
    weight: str = ""
    result: Optional[BmiResult] = None
    error: str = ""


# ------------------------ EVENTS ------------------------


@dataclass(frozen=True)
class HeightChanged:
    value: str


@dataclass(frozen=True)
class WeightChanged:
    value: str


@dataclass(frozen=True)
class ComputeRequested:
    pass


# ------------------------ REDUCER ------------------------


def _compute(state: CalculatorState) -> CalculatorState:
    try:
        result = calculate(state.height, state.weight)
    except BmiInputError as e:
        logger.debug("Rejected input height=%r weight=%r: %s", state.height, state.weight, e)
        # the previous result stays on screen next to the new error
        return replace(state, error=e.message)
    return replace(state, result=result, error="")


def reduce(state: CalculatorState, event) -> CalculatorState:
    if isinstance(event, HeightChanged):
        return replace(state, height=event.value)
    if isinstance(event, WeightChanged):
        return replace(state, weight=event.value)
    if isinstance(event, ComputeRequested):
        return _compute(state)
    raise TypeError(f"Unknown calculator event: {event!r}")


class Calculator:
    """Holds the current state and applies events to it one at a time."""

    def __init__(self, state: Optional[CalculatorState] = None):
        self.state = state or CalculatorState()

    def dispatch(self, event) -> CalculatorState:
        self.state = reduce(self.state, event)
        return self.state
