"""Streamlit UI for browsing, renting and promoting listings."""
