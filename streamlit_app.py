"""
Shopping List - Home Page

Type an item, press Add, and remove entries with the button on each row.
"""

import streamlit as st

from config import configure_logging, get_settings

settings = get_settings()

# Page configuration (must be first Streamlit command)
st.set_page_config(
    page_title=settings.app_title,
    page_icon=settings.page_icon,
    layout="centered"
)

configure_logging(settings.log_level)

from views.shopping_view import ShoppingView

view = ShoppingView()
view.render()
