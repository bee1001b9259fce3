"""Tabs of the admin dashboard."""

from .analytics_tab import render_analytics_tab
from .data_processing_tab import render_data_processing_tab
from .model_training_tab import render_model_training_tab


__all__ = [
    "render_analytics_tab",
    "render_data_processing_tab",
    "render_model_training_tab",
]
