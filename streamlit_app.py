"""Streamlit entry point for CopyCraft (frontend and generation in one process)."""
import os

import streamlit as st
from streamlit.errors import StreamlitAPIException

from backend.app.config import API_KEY_VARIABLES

# Set API key from Streamlit secrets or environment variables
# Streamlit Cloud uses st.secrets, other hosts set environment variables
if not any(os.getenv(name) for name in API_KEY_VARIABLES):
    try:
        for name in API_KEY_VARIABLES:
            if name in st.secrets:
                os.environ[name] = st.secrets[name]
                break
    except (FileNotFoundError, StreamlitAPIException):
        # No secrets.toml; the key has to come from the environment
        pass

from frontend.app import main

main()
