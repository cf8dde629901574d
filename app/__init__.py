"""Streamlit front end for the StackShop catalog browser."""
