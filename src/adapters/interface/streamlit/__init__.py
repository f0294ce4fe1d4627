"""Streamlit interface for the farm dashboard."""

__all__ = []
