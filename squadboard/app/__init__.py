"""Streamlit host views for the squad dashboard."""
