"""Thin wrapper around ``st.session_state``."""

from __future__ import annotations

from typing import Any, TypeVar

import streamlit as st


T = TypeVar("T")


class SessionManager:
    """Namespaced access to Streamlit session state.

    Keys are stored as ``"<namespace>_<key>"`` when a namespace is given so
    presenters of different pages never overwrite each other's state.
    """

    def __init__(self, namespace: str | None = None):
        self.namespace = namespace

    def _key(self, key: str) -> str:
        return f"{self.namespace}_{key}" if self.namespace else key

    def get(self, key: str, default: Any = None) -> Any:
        return st.session_state.get(self._key(key), default)

    def set(self, key: str, value: Any) -> None:
        st.session_state[self._key(key)] = value

    def get_or_create(self, key: str, default: T) -> T:
        """Return the stored value, storing ``default`` first if absent."""
        full_key = self._key(key)
        if full_key not in st.session_state:
            st.session_state[full_key] = default
        return st.session_state[full_key]

    def delete(self, key: str) -> None:
        full_key = self._key(key)
        if full_key in st.session_state:
            del st.session_state[full_key]

    def has(self, key: str) -> bool:
        return self._key(key) in st.session_state
