"""StackShop catalog browser core."""
