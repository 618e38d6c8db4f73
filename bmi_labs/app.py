import streamlit as st

from bmi_labs.calculator import INVALID_INPUT_MESSAGE, calculate_from_text

st.title("BMI Calculator")

height_text = st.text_input("Height (m)", key="height")
weight_text = st.text_input("Weight (kg)", key="weight")

if st.button("Calculate"):
    message = calculate_from_text(height_text, weight_text)
    if message == INVALID_INPUT_MESSAGE:
        st.error(message)
    else:
        st.success(message)
