"""Candidate browser views package."""

from .page import render_candidates_page


__all__ = ["render_candidates_page"]
