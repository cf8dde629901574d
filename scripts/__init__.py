"""Command-line scripts for the StackShop catalog browser."""
