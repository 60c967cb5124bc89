"""Streamlit dashboard and Plotly figure builders."""
