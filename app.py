import logging

import streamlit as st

from calculator import Calculator, ComputeRequested, HeightChanged, WeightChanged

logger = logging.getLogger(__name__)

# ------------------------ UI CONFIGURATION ------------------------
PAGE_TITLE = "BMI Calculator"
DESCRIPTION = "Enter your height and weight to calculate your BMI."
STATE_KEY = "calculator"


def get_calculator() -> Calculator:
    # One calculator per browser session
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = Calculator()
    return st.session_state[STATE_KEY]


def render_form(calculator: Calculator):
    height = st.text_input("Height (cm)", key="height", placeholder="Enter your height")
    weight = st.text_input("Weight (kg)", key="weight", placeholder="Enter your weight")

    if height != calculator.state.height:
        calculator.dispatch(HeightChanged(height))
    if weight != calculator.state.weight:
        calculator.dispatch(WeightChanged(weight))

    if st.button("Calculate", key="calculate"):
        state = calculator.dispatch(ComputeRequested())
        logger.debug("Calculate pressed: result=%s error=%r", state.result, state.error)


def render_result(calculator: Calculator):
    state = calculator.state

    if state.error:
        st.error(state.error)

    if state.result is not None:
        st.metric("BMI", state.result.bmi)
        st.caption(state.result.category)


def main():
    st.set_page_config(page_title=PAGE_TITLE, layout="centered")
    st.title(PAGE_TITLE)
    st.write(DESCRIPTION)

    calculator = get_calculator()
    render_form(calculator)
    render_result(calculator)


if __name__ == "__main__":
    main()
