"""Streamlit recap viewer."""
