"""Domain layer - catalog model and domain exceptions."""
